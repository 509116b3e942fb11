"""Domain layer for LEASING.

Contains business rules: tenancy paths, interval timelines, entities, value
objects and domain events. This package is deliberately technology-agnostic.

Dependency rule: do not import from `leasing.adapters` or `leasing.entrypoints`.
"""

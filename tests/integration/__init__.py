"""Integration tests.

Exercise `leasing.bootstrap` wiring: environment configuration, dependency
injection into handlers, and event cascades across aggregates.
"""

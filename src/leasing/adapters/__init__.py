"""Adapters (outbound implementations) for LEASING.

Concrete implementations of the contracts in `leasing.interfaces`: in-memory
repositories and unit of work, and ID generators.

Dependency rule: may import `leasing.interfaces` and `leasing.domain`; must not
import `leasing.service_layer` or `leasing.entrypoints`.
"""

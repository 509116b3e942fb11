"""Service layer for LEASING.

Implements application use-cases: command and event handlers, tenancy
cascades, and transaction boundaries. Calls domain objects and the outbound
ports defined in `leasing.interfaces`.

Dependency rule: may import `leasing.domain` and `leasing.interfaces`, but not
`leasing.adapters` or `leasing.entrypoints`.
"""

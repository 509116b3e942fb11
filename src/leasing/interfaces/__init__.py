"""Interfaces (application boundary) for LEASING.

Defines framework-free application contracts: repository ABCs, the unit of
work and ID generators shared by the service layer and adapters. Business
rules stay out of this package.

Dependency rule: this package may import `leasing.domain` types for its
signatures only. It may be imported by `leasing.service_layer`,
`leasing.adapters`, and `leasing.bootstrap`.
"""

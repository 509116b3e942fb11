"""Entities package.

All tenanted entities are defined in this package and inherit from the base
`TenantedEntity` class in `base.py`. They are re-exported here to provide a
single, convenient import path.
"""

from .agreement import Agreement, AgreementRole
from .asset import Property, Unit
from .base import TenantedEntity
from .lease import Lease, LeaseItem, LeaseTerm
from .numerator import Numerator

__all__ = [
    "Agreement",
    "AgreementRole",
    "Lease",
    "LeaseItem",
    "LeaseTerm",
    "Numerator",
    "Property",
    "TenantedEntity",
    "Unit",
]

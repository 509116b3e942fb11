"""LEASING

The domain kernel of a real-estate lease management application.
It scopes objects to hierarchical application tenancies and keeps
date-ranged agreement roles and lease items in contiguous timelines.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

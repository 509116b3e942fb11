"""Bootstrap (composition root) for LEASING.

Assembles the application at runtime: wires the in-memory adapters to the
service-layer handlers, builds the message bus and unit of work, and reads
configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `leasing.adapters`, `leasing.service_layer`,
  `leasing.interfaces`, `leasing.domain`, and `leasing.config`.
- Inner layers must not import `leasing.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]

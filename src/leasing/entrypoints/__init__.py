"""Entrypoints (inbound adapters) for LEASING.

Expose the application to the outside world. Today that is the ``leasing``
command line; entry points parse and validate inputs, call into the domain or
the service layer, and present results.

Dependency rule: may import `leasing.bootstrap`, `leasing.service_layer` and
`leasing.domain`; avoid importing `leasing.adapters` directly.
"""

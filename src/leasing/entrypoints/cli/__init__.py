"""The ``leasing`` command line."""

"""Unit tests.

Domain objects are exercised directly; handlers run on a message bus built
over an in-memory unit of work with sequential ids, so runs are repeatable.
"""

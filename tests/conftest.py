"""Global pytest fixtures for LEASING."""

from __future__ import annotations

from datetime import date

import pytest

from leasing.adapters.id_generators import SequentialIdGenerator
from leasing.adapters.unit_of_work import InMemoryUnitOfWork
from leasing.bootstrap.bootstrap import build_message_bus
from leasing.domain.entities import Lease, Property
from leasing.domain.tenancy import ApplicationTenancy
from leasing.service_layer.handlers import COMMAND_HANDLERS, EVENT_HANDLERS
from leasing.service_layer.messagebus import MessageBus
from tests.helpers.samples import TENANCY_TREE

# pylint: disable=redefined-outer-name


@pytest.fixture
def tenancies() -> list[ApplicationTenancy]:
    """A small tenancy hierarchy below the root."""
    return [ApplicationTenancy(path) for path in TENANCY_TREE]


@pytest.fixture
def lease() -> Lease:
    """A lease running for the whole of 2024."""
    return Lease("L-1", "OXF-TOPMODEL-001", date(2024, 1, 1), date(2024, 12, 31))


@pytest.fixture
def prop() -> Property:
    """A property with two units."""
    p = Property("P-1", "OXF", "Oxford Super Mall")
    p.new_unit("U-1", "OXF-001")
    p.new_unit("U-2", "OXF-002")
    return p


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    """A fresh in-memory unit of work."""
    return InMemoryUnitOfWork()


@pytest.fixture
def bus(uow: InMemoryUnitOfWork) -> MessageBus:
    """A message bus wired with all handlers and sequential ids."""
    return build_message_bus(
        uow,
        COMMAND_HANDLERS,
        EVENT_HANDLERS,
        id_generator=SequentialIdGenerator(prefix="id-"),
    )

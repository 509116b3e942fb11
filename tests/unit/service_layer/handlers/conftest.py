"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from leasing.adapters.id_generators import SequentialIdGenerator
from leasing.adapters.unit_of_work import InMemoryUnitOfWork
from leasing.bootstrap.bootstrap import build_message_bus
from leasing.domain.tenancy import PathMatching
from leasing.service_layer.handlers import COMMAND_HANDLERS, EVENT_HANDLERS

if TYPE_CHECKING:
    from leasing.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus_params():
    """Default bus parameters. Classes can override this fixture"""
    return {}


@pytest.fixture
def make_test_bus(bus_params) -> Callable[..., MessageBus]:
    """Factory for a fully wired bus over a fresh in-memory unit of work."""

    def _make():
        params = {"path_matching": PathMatching.SEGMENT, **bus_params}
        return build_message_bus(
            InMemoryUnitOfWork(),
            COMMAND_HANDLERS,
            EVENT_HANDLERS,
            id_generator=SequentialIdGenerator(prefix="id-"),
            **params,
        )

    return _make

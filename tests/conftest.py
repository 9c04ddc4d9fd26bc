"""Shared fixtures for the ledger_export tests."""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal

import pytest

from ledger_export.models import RawTransaction


def make_txn(**overrides) -> RawTransaction:
    """Build a checked, categorized transaction; fields can be overridden."""
    values = dict(
        booking_date=datetime.date(2024, 1, 2),
        value_date=datetime.date(2024, 1, 3),
        amount=Decimal("-24.99"),
        currency="EUR",
        name="Hardware Store",
        category="Expenses\\Garden",
        comment="",
        purpose="",
        checkmark=True,
        booked=True,
    )
    values.update(overrides)
    return RawTransaction(**values)


@pytest.fixture
def txn_factory():
    return make_txn


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handlers and levels set by the CLI so tests stay independent."""
    package_logger = logging.getLogger("ledger_export")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)

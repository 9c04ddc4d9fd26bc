"""Data types passed between the parsing, processing and writing stages."""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import collections
import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from beancount.core.amount import Amount


class RawTransaction(NamedTuple):
    """Transaction as provided by the banking application.

    ``amount`` is seen from the financial account; the exported counter
    posting uses the negated amount. ``checkmark`` is True, False or None
    (no checkmark support for the account).
    """

    booking_date: datetime.date
    value_date: datetime.date
    amount: Decimal
    currency: str
    name: str = ""
    category: str = ""
    comment: str = ""
    purpose: str = ""
    checkmark: bool | None = None
    booked: bool = True

    @property
    def units(self) -> Amount:
        return Amount(self.amount, self.currency)


class Account(NamedTuple):
    """Financial account the transactions are exported from."""

    name: str
    attributes: Mapping[str, Any] = MappingProxyType({})


class ExportOptions(NamedTuple):
    needs_category: bool = True
    needs_checkmark: bool = True


class LedgerTransaction(NamedTuple):
    """Parts of a ledger transaction; the header is shared within a group."""

    header: str
    posting: str
    error: str | None = None


# Same shape as beancount's error tuples so that they can be reported alike.
ExportError = collections.namedtuple("ExportError", "source message entry")

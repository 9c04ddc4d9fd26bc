"""Amount and date formatting plus the digest used for transaction grouping."""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import datetime
import hashlib
from decimal import ROUND_HALF_UP

from beancount.core.amount import Amount
from beancount.core.number import D

DECIMAL_MARKS = (".", ",")

_CENT = D("0.01")


def format_amount(units: Amount, decimal_mark: str = ".") -> str:
    """Format an amount as ``#,##0.00 CUR`` (``-#,##0.00 CUR`` if negative).

    The currency is separated by an ASCII space so that ledger and hledger
    can parse it as commodity. The grouping separator is whichever of ``.``
    and ``,`` is not the decimal mark.

    Args:
        units: Amount with currency
        decimal_mark: Either "." or ","

    Returns:
        The formatted amount
    """
    if decimal_mark not in DECIMAL_MARKS:
        raise ValueError(f"Invalid decimal mark '{decimal_mark}'")

    number = units.number.quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if number < 0 else ""
    text = f"{abs(number):,.2f}"
    if decimal_mark == ",":
        text = text.replace(",", "\0").replace(".", ",").replace("\0", ".")

    return f"{sign}{text} {units.currency}".rstrip()


def format_date(value: datetime.date) -> str:
    return value.strftime("%Y-%m-%d")


def digest(text: str) -> str:
    """SHA-1 hex digest of a string."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()

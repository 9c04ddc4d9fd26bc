"""Loading of exported accounts and transactions from a YAML document.

INPUT FORMAT:

    accounts:
      - name: Checking
        attributes:
          LedgerAccount: "Assets:Bank:Checking"   # optional
        transactions:
          - booking_date: 2024-01-02
            value_date: 2024-01-03              # defaults to booking_date
            amount: "-24.99"
            currency: EUR
            name: Hardware Store
            category: 'Expenses\\Garden {19%}'
            comment: "New shovel #project:garden"
            purpose: ""
            checkmark: true
            booked: true

Transactions are exported in the order they appear in the file.
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import datetime
import logging
from decimal import InvalidOperation
from pathlib import Path
from typing import List, Tuple

from beancount.core.number import D

from ledger_export.config import ConfigError, load_yaml
from ledger_export.models import Account, RawTransaction

logger = logging.getLogger(__name__)


def _date(value, field: str, where: str) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value))
    except ValueError as e:
        raise ConfigError(f"{where}: invalid {field} {value!r}") from e


def _text(record: dict, field: str) -> str:
    value = record.get(field)
    return "" if value is None else str(value)


def parse_transaction(record: dict, where: str = "transaction") -> RawTransaction:
    """Build a transaction from one input record.

    Raises:
        ConfigError: If required fields are missing or invalid
    """
    if not isinstance(record, dict):
        raise ConfigError(f"{where}: expected a mapping")

    for field in ("booking_date", "amount", "currency"):
        if record.get(field) is None:
            raise ConfigError(f"{where}: missing field '{field}'")

    booking_date = _date(record["booking_date"], "booking_date", where)
    value_date = booking_date
    if record.get("value_date") is not None:
        value_date = _date(record["value_date"], "value_date", where)

    try:
        amount = D(str(record["amount"]))
    except (InvalidOperation, ValueError) as e:
        raise ConfigError(f"{where}: invalid amount {record['amount']!r}") from e
    if not amount.is_finite():
        raise ConfigError(f"{where}: invalid amount {record['amount']!r}")

    checkmark = record.get("checkmark")
    if checkmark is not None and not isinstance(checkmark, bool):
        raise ConfigError(f"{where}: checkmark must be true, false or empty")

    booked = record.get("booked")
    if booked is None:
        booked = True
    elif not isinstance(booked, bool):
        raise ConfigError(f"{where}: booked must be true, false or empty")

    return RawTransaction(
        booking_date=booking_date,
        value_date=value_date,
        amount=amount,
        currency=str(record["currency"]),
        name=_text(record, "name"),
        category=_text(record, "category"),
        comment=_text(record, "comment"),
        purpose=_text(record, "purpose"),
        checkmark=checkmark,
        booked=booked,
    )


def load_transactions(path: str | Path) -> List[Tuple[Account, List[RawTransaction]]]:
    """Load accounts and their transactions from a YAML file.

    Raises:
        ConfigError: If the file cannot be read or contains invalid records
    """
    path = Path(path)
    content = load_yaml(path)

    accounts = content.get("accounts")
    if not isinstance(accounts, list):
        raise ConfigError(f"{path}: 'accounts' must be a list")

    batches = []
    for i, account_record in enumerate(accounts):
        if not isinstance(account_record, dict) or not account_record.get("name"):
            raise ConfigError(f"{path}: account #{i + 1} needs a name")

        account = Account(
            name=str(account_record["name"]),
            attributes=dict(account_record.get("attributes") or {}),
        )
        transactions = [
            parse_transaction(record, f"{path}: {account.name} #{j + 1}")
            for j, record in enumerate(account_record.get("transactions") or [])
        ]
        batches.append((account, transactions))

    logger.info(
        f"Loaded {sum(len(t) for _, t in batches)} transactions "
        f"of {len(batches)} accounts from {path}"
    )
    return batches

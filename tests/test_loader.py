import datetime
import textwrap
from decimal import Decimal

import pytest

from ledger_export.config import ConfigError
from ledger_export.loader import load_transactions, parse_transaction
from ledger_export.models import Account, RawTransaction


def test_load_transactions(tmp_path):
    path = tmp_path / "transactions.yaml"
    path.write_text(
        textwrap.dedent(
            r"""
            accounts:
              - name: Checking
                attributes:
                  LedgerAccount: Assets:Giro
                transactions:
                  - booking_date: 2024-01-02
                    value_date: 2024-01-03
                    amount: -24.99
                    currency: EUR
                    name: Hardware Store
                    category: "Expenses\\Garden {19%}"
                    comment: "New shovel"
                    checkmark: true
                  - booking_date: 2024-01-04
                    amount: "100"
                    currency: EUR
                    booked: false
              - name: Savings
            """
        ),
        encoding="utf-8",
    )

    batches = load_transactions(path)

    assert batches == [
        (
            Account("Checking", {"LedgerAccount": "Assets:Giro"}),
            [
                RawTransaction(
                    booking_date=datetime.date(2024, 1, 2),
                    value_date=datetime.date(2024, 1, 3),
                    amount=Decimal("-24.99"),
                    currency="EUR",
                    name="Hardware Store",
                    category="Expenses\\Garden {19%}",
                    comment="New shovel",
                    checkmark=True,
                ),
                RawTransaction(
                    booking_date=datetime.date(2024, 1, 4),
                    value_date=datetime.date(2024, 1, 4),
                    amount=Decimal("100"),
                    currency="EUR",
                    booked=False,
                ),
            ],
        ),
        (Account("Savings"), []),
    ]


def test_string_dates_are_accepted():
    txn = parse_transaction(
        {"booking_date": "2024-03-01", "amount": "1", "currency": "USD", "checkmark": None}
    )

    assert txn.booking_date == datetime.date(2024, 3, 1)
    assert txn.checkmark is None


@pytest.mark.parametrize(
    "record, message",
    [
        ({"amount": "1", "currency": "EUR"}, "missing field 'booking_date'"),
        ({"booking_date": "2024-13-01", "amount": "1", "currency": "EUR"}, "invalid booking_date"),
        ({"booking_date": "2024-01-01", "amount": "1", "currency": "EUR", "checkmark": "yes"},
         "checkmark"),
        ("not a record", "expected a mapping"),
    ],
)
def test_invalid_records(record, message):
    with pytest.raises(ConfigError, match=message):
        parse_transaction(record)


def test_accounts_must_be_a_list(tmp_path):
    path = tmp_path / "transactions.yaml"
    path.write_text("accounts: {}\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a list"):
        load_transactions(path)


@pytest.mark.parametrize("amount", ["NaN", "Infinity", "-inf", float("inf")])
def test_non_finite_amounts_are_rejected(amount):
    record = {"booking_date": "2024-01-01", "amount": amount, "currency": "EUR"}

    with pytest.raises(ConfigError, match="invalid amount"):
        parse_transaction(record)


def test_non_finite_amount_in_file_is_an_input_error(tmp_path):
    path = tmp_path / "transactions.yaml"
    path.write_text(
        textwrap.dedent(
            """
            accounts:
              - name: Checking
                transactions:
                  - booking_date: 2024-01-02
                    amount: .inf
                    currency: EUR
            """
        ),
        encoding="utf-8",
    )

    with pytest.raises(ConfigError, match="invalid amount"):
        load_transactions(path)


def test_empty_booked_flag_means_booked():
    txn = parse_transaction(
        {"booking_date": "2024-01-01", "amount": "1", "currency": "EUR", "booked": None}
    )

    assert txn.booked is True


def test_booked_flag_must_be_a_boolean():
    record = {"booking_date": "2024-01-01", "amount": "1", "currency": "EUR", "booked": "no"}

    with pytest.raises(ConfigError, match="booked must be true, false or empty"):
        parse_transaction(record)

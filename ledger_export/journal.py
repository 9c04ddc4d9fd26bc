"""Writing of ledger journal files.

WHAT IT DOES:
- Writes the journal header (export timestamp and decimal mark)
- Converts each transaction via ``process_transaction``
- Groups transactions that share header and error (split transactions) into
  one ledger transaction with one posting per split and a single posting for
  the financial account
- Comments out groups with an error, so the journal stays valid
- Collects one message per failing transaction and returns them as summary
  once the export is complete

OUTPUT:

    ; Export: 2024-02-01 10:00:00
    decimal-mark .

    2024-01-02=2024-01-02 * Hardware Store
      ; comment: Garden
      Expenses:Garden  20.00 EUR
      Expenses:Household  4.99 EUR
      Assets:Checking

    ; Error: The transaction was not checked
    ; 2024-01-03=2024-01-03 Bakery
    ;   Expenses:Food  3.20 EUR
    ;   Assets:Checking

The error report lives on the ``JournalWriter`` and is reset by
``write_header``, so one writer can be reused for consecutive exports.
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import datetime
import logging
import re
from typing import IO, Iterable, Iterator, List, Sequence, Tuple

from ledger_export.config import Settings
from ledger_export.formatting import format_amount
from ledger_export.messages import Messages
from ledger_export.models import Account, ExportError, LedgerTransaction, RawTransaction
from ledger_export.transaction import process_transaction

logger = logging.getLogger(__name__)

POSTING_INDENT = "\n  "
ERROR_COMMENT = "; "


class ErrorReport:
    """Transaction errors collected during one export run."""

    def __init__(self):
        self._errors: List[ExportError] = []

    def reset(self) -> None:
        self._errors.clear()

    def add(self, error: ExportError) -> None:
        self._errors.append(error)

    def __iter__(self) -> Iterator[ExportError]:
        return iter(list(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def summary(self, messages: Messages) -> str | None:
        """Aggregate message for the user, or None if there were no errors."""
        if not self._errors:
            return None
        details = "\n\n".join(error.message for error in self._errors)
        return f"{messages.incomplete_export()}\n\n{details}"


def financial_account(account: Account, settings: Settings | None = None) -> str:
    """Ledger account name of the exported account.

    The ``LedgerAccount`` attribute of the account wins over the one from the
    configuration; without either the name is ``Assets:<account name>``.
    """
    ledger_account = account.attributes.get("LedgerAccount")
    if not ledger_account and settings is not None:
        ledger_account = settings.accounts.get(account.name, {}).get("LedgerAccount")
    return ledger_account or f"Assets:{account.name}"


def group_transactions(
    processed: Iterable[Tuple[LedgerTransaction, str]],
) -> List[List[LedgerTransaction]]:
    """Group ledger transactions by digest.

    Groups are returned in the order of their first transaction; each group
    keeps the order in which its transactions arrived.
    """
    groups: dict[str, List[LedgerTransaction]] = {}
    for ledger_transaction, group_digest in processed:
        groups.setdefault(group_digest, []).append(ledger_transaction)
    return list(groups.values())


def render_group(group: Sequence[LedgerTransaction], account_name: str) -> str:
    """Assemble the ledger transaction text of a group.

    Header and error are taken from the first transaction as they are shared
    by the whole group.
    """
    first = group[0]

    output = first.header
    for ledger_transaction in group:
        output += POSTING_INDENT + ledger_transaction.posting
    output += POSTING_INDENT + re.sub(r"\s+", " ", account_name)

    if first.error:
        # comment out every line of the invalid transaction
        output = f"{ERROR_COMMENT}Error: {first.error}\n{output}"
        output = output.replace("\n", "\n" + ERROR_COMMENT)

    return output


class JournalWriter:
    """Writes one journal file in three steps: header, transactions, tail."""

    def __init__(self, stream: IO[str], settings: Settings | None = None):
        self.stream = stream
        self.settings = settings or Settings()
        self.messages = Messages(self.settings.language)
        self.errors = ErrorReport()

    def write_header(self, now: datetime.datetime | None = None) -> None:
        """Write the first lines of the journal and reset the error report."""
        now = now or datetime.datetime.now()
        self.stream.write(
            f"; Export: {now:%Y-%m-%d %H:%M:%S}\n"
            f"decimal-mark {self.settings.decimal_mark}\n"
        )
        self.errors.reset()

    def write_transactions(
        self, account: Account, transactions: Sequence[RawTransaction]
    ) -> None:
        """Write consecutive transactions of one account.

        Args:
            account: Account the transactions are exported from
            transactions: Transactions in chronological order
        """
        account_name = financial_account(account, self.settings)

        processed = []
        for index, txn in enumerate(transactions):
            ledger_transaction, group_digest = process_transaction(
                txn,
                self.settings.options,
                self.messages,
                self.settings.decimal_mark,
            )
            processed.append((ledger_transaction, group_digest))

            # one message per transaction, even if grouped with others
            if ledger_transaction.error:
                self.errors.add(
                    ExportError(
                        source={"filename": account_name, "lineno": index},
                        message=(
                            f"{ledger_transaction.error}:\n"
                            f"{self.messages.date(txn.booking_date)} · {txn.name} "
                            f"({format_amount(txn.units, self.settings.decimal_mark)})"
                        ),
                        entry=txn,
                    )
                )

        groups = group_transactions(processed)
        for group in groups:
            # leading newline separates the transactions by an empty line
            self.stream.write("\n" + render_group(group, account_name) + "\n")

        logger.info(
            f"Wrote {len(groups)} ledger transactions from {len(transactions)} "
            f"transactions of '{account_name}'"
        )

    def write_tail(self) -> str | None:
        """Finish the export.

        Returns:
            Summary of all transaction errors, or None if there were none
        """
        if self.errors:
            logger.warning(f"Found {len(self.errors)} transactions with errors")
        else:
            logger.info("All transactions were exported")
        return self.errors.summary(self.messages)


def export_journal(
    batches: Iterable[Tuple[Account, Sequence[RawTransaction]]],
    stream: IO[str],
    settings: Settings | None = None,
    now: datetime.datetime | None = None,
) -> str | None:
    """Run a complete export into ``stream``.

    Args:
        batches: Accounts with their transactions (oldest first)
        stream: Text stream the journal is written to
        settings: Export settings
        now: Export timestamp for the header

    Returns:
        Summary of all transaction errors, or None if there were none
    """
    writer = JournalWriter(stream, settings)
    writer.write_header(now)
    for account, transactions in batches:
        writer.write_transactions(account, transactions)
    return writer.write_tail()

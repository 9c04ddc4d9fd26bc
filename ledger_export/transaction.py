"""Conversion of a single transaction into ledger header and posting strings.

The header (dates, status, code, payee and transaction tags) and the posting
(counter account, amount and posting tags) are kept apart so that split
transactions sharing a header can be written as one ledger transaction.

OUTPUT SHAPE:

    2024-01-02=2024-01-03 * (4711) Hardware Store
      ; project: garden
      ; comment: New shovel
      Expenses:Garden  24.99 EUR ; tax: 19%

VALIDATION:
Problems never abort the conversion. The first problem found is reported as
the transaction error; an empty counter account overrides earlier ones as it
makes the output unusable:

1. Missing category (only if ``needs_category`` is set)
2. Missing checkmark (only if ``needs_checkmark`` is set)
3. Empty counter account (always)
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import logging
from typing import Tuple

from beancount.core.amount import Amount

from ledger_export.category import account_name, parse_category
from ledger_export.formatting import digest, format_amount, format_date
from ledger_export.messages import Messages
from ledger_export.models import ExportOptions, LedgerTransaction, RawTransaction
from ledger_export.tags import TagSet, format_tags, parse_date_override, parse_tags

logger = logging.getLogger(__name__)

UNKNOWN_ACCOUNT = "Unknown"
INVALID_ACCOUNT = "Invalid"
NO_ERROR = "no error"

HEADER_TAG_SEPARATOR = "\n  "
POSTING_TAG_SEPARATOR = "\n    "


def _status_character(txn: RawTransaction) -> str:
    # trailing space only when present to avoid a double space in the header
    if txn.checkmark is True:
        return "* "
    if txn.booked is False:
        return "! "
    return ""


def _posting_tags(tags: TagSet) -> Tuple[TagSet, str]:
    """Move the date, tax and code tags out of the transaction tags.

    Returns:
        Tuple of (posting_tags, code_prefix)
    """
    posting_tags = TagSet()

    date_override = tags.pop("date")
    if date_override is not None:
        try:
            parse_date_override(date_override)
        except ValueError as e:
            logger.warning(f"Date override is passed through unparsed: {e}")
        posting_tags.add_bare(date_override)

    tax = tags.pop("tax")
    if tax is not None:
        posting_tags.set("tax", tax)

    code = tags.pop("code")
    code_prefix = f"({code}) " if code is not None else ""

    return posting_tags, code_prefix


def process_transaction(
    txn: RawTransaction,
    options: ExportOptions,
    messages: Messages | None = None,
    decimal_mark: str = ".",
) -> Tuple[LedgerTransaction, str]:
    """Turn a transaction into the parts of a ledger transaction.

    Args:
        txn: Transaction from the banking application
        options: Validation options of the export
        messages: Message catalog for error texts (English by default)
        decimal_mark: Decimal mark used for the amount

    Returns:
        Tuple of (ledger_transaction, group_digest); transactions with the
        same digest share header and error
    """
    messages = messages or Messages()
    error = None

    category = txn.category
    if category == "":
        category = UNKNOWN_ACCOUNT
        if options.needs_category:
            error = messages.missing_category()

    if options.needs_checkmark and txn.checkmark is False:
        error = error or messages.not_checked()

    hierarchy, tags = parse_category(category)
    counter_account = account_name(hierarchy)
    if counter_account == "":
        error = messages.empty_counter_account(category)
        counter_account = INVALID_ACCOUNT

    comment, transaction_tags = parse_tags(txn.comment.replace("\n", " "), transaction=True)
    if comment != "":
        transaction_tags.set("comment", comment)

    # the purpose text is only used if the comment did not set a purpose tag
    if txn.purpose != "" and "purpose" not in transaction_tags:
        transaction_tags.set("purpose", txn.purpose.replace("\n", " "))

    # transaction tags are more specific than category tags
    tags.update(transaction_tags)

    posting_tags, code_prefix = _posting_tags(tags)

    # the posting is written for the counter account
    amount = format_amount(Amount(-txn.amount, txn.currency), decimal_mark)

    header = (
        f"{format_date(txn.booking_date)}={format_date(txn.value_date)} "
        f"{_status_character(txn)}{code_prefix}{txn.name}"
        f"{format_tags(tags, HEADER_TAG_SEPARATOR, HEADER_TAG_SEPARATOR)}"
    )
    posting = (
        f"{counter_account}  {amount}"
        f"{format_tags(posting_tags, POSTING_TAG_SEPARATOR, ' ')}"
    )

    if error:
        logger.debug(f"Transaction '{txn.name}' on {txn.booking_date}: {error}")

    ledger_transaction = LedgerTransaction(header=header, posting=posting, error=error)
    group_digest = digest(f"{header}//{error or NO_ERROR}")

    return ledger_transaction, group_digest

"""Export of bank transactions as ledger journal for double-entry accounting.

Transactions carry their ledger information in two free text fields: the
category name and the comment. This package parses the tags embedded in
those fields and writes the transactions as ledger journal entries.

INCLUDED MODULES:

1. extract
   - Extract-and-remove primitive for regular expression matches

2. tags
   - TagSet of keyed and bare tags
   - Parser for {tax}, #custom[:value], <code> and [date] tags

3. category
   - Converts backslash-separated category names into account names
   - Supports [name] overrides on each level

4. transaction
   - Validates a transaction and builds its ledger header and posting

5. journal
   - Groups split transactions, comments out erroneous ones
   - Writes the journal and reports all transaction errors at the end

6. config / loader / cli
   - YAML settings, YAML transaction input and the ledger-export command

TAG SYNTAX:

    Category:  Expenses\\Travel [Expenses:Trips]\\Hotel {7%} #trip:rome
    Comment:   Two nights <R-4711> [2024-03-01=2024-03-03] #reimbursable

Results in:

    2024-03-04=2024-03-04 * (R-4711) Hotel Roma
      ; trip: rome
      ; reimbursable:
      ; comment: Two nights
      Expenses:Trips:Hotel  240.00 EUR ; [2024-03-01=2024-03-03]
        ; tax: 7%
      Assets:Checking
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

from ledger_export.category import parse_category
from ledger_export.journal import JournalWriter, export_journal
from ledger_export.models import Account, ExportOptions, LedgerTransaction, RawTransaction
from ledger_export.tags import Bare, Keyed, TagSet, parse_tags
from ledger_export.transaction import process_transaction

__all__ = [
    "Account",
    "Bare",
    "ExportOptions",
    "JournalWriter",
    "Keyed",
    "LedgerTransaction",
    "RawTransaction",
    "TagSet",
    "export_journal",
    "parse_category",
    "parse_tags",
    "process_transaction",
]

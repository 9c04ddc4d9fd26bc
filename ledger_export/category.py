"""Conversion of hierarchical category names into ledger account names.

Category levels are separated by backslashes. Each level can override the
generated account name with a ``[name]`` tag:

    Expenses\\Travel\\Etc. []                    -> Expenses:Travel
    My Business\\Travel [Expenses:Travel]\\Hotel  -> Expenses:Travel:Hotel

An empty ``[]`` drops its level. A non-empty override replaces everything
collected from the levels above it. Tags (``{tax}``, ``#custom``) can be
placed on any level; deeper levels win for tags of the same name.
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import logging
import re
from typing import List, Tuple

from ledger_export.extract import extract_pattern, trim
from ledger_export.tags import TagSet, parse_tags

logger = logging.getLogger(__name__)

LEVEL_SEPARATOR = "\\"
NAME_OVERRIDE_PATTERN = r"\[.*?\]"


def parse_category(name: str) -> Tuple[List[str], TagSet]:
    """Split a category name into account levels and tags.

    Args:
        name: Full category path as shown in the banking application

    Returns:
        Tuple of (hierarchy, tags) where hierarchy is the list of account
        name levels (possibly empty)
    """
    # extracting the tags up front lets lower levels override higher ones
    name, tags = parse_tags(name)

    hierarchy: List[str] = []
    for level in name.split(LEVEL_SEPARATOR):
        if not level:
            continue

        level, override = extract_pattern(level, NAME_OVERRIDE_PATTERN)

        if override is None:
            hierarchy.append(trim(level))
        elif override != "[]":
            logger.debug(f"Account name override {override} replaces {hierarchy}")
            hierarchy = override[1:-1].split(":")

    return hierarchy, tags


def account_name(hierarchy: List[str]) -> str:
    """Join account levels and collapse whitespace runs to single spaces."""
    return re.sub(r"\s+", " ", ":".join(hierarchy))

"""Extract-and-remove primitive shared by all micro-syntax parsers.

Every tag syntax understood by the exporter (``<code>``, ``[date]``, ``{tax}``,
``#custom`` and the ``[name]`` overrides of category levels) is handled the
same way: find the match, remember it and cut it out of the free text so that
the remaining text can be used as a comment or account name.

GAP HANDLING:
When a match is removed, both sides of the gap are trimmed and joined with
exactly one space:

    "Lunch {19%} with team"  ->  "Lunch with team"   (match "{19%}")
    "{19%} Lunch"            ->  "Lunch"

The removed text is located literally, so matches containing regex
metacharacters (``[x]``, ``{19%}``, ``<A+B>``) are cut out correctly.
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import logging
import re
from functools import lru_cache
from typing import List, Tuple, overload, Literal

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.DOTALL)


def trim(text: str) -> str:
    """Remove whitespace from the beginning and end of a string."""
    return text.strip()


def _remove_literal(text: str, match: str) -> str:
    """Cut the first literal occurrence of ``match`` out of ``text``.

    The text on both sides of the gap is trimmed and rejoined with a single
    space. If ``match`` no longer occurs, ``text`` is returned unchanged.
    """
    start = text.find(match)
    if start < 0:
        return text

    before = trim(text[:start])
    after = trim(text[start + len(match) :])
    return trim(f"{before} {after}")


@overload
def extract_pattern(
    text: str, pattern: str, multiple: Literal[False] = False
) -> Tuple[str, str | None]: ...


@overload
def extract_pattern(
    text: str, pattern: str, multiple: Literal[True]
) -> Tuple[str, List[str]]: ...


def extract_pattern(text: str, pattern: str, multiple: bool = False):
    """Extract values matching a regular expression from a string.

    All matches are searched in the string as passed in. Each one is then
    removed from the working copy (see module docstring for the gap rule).

    Args:
        text: String to extract from
        pattern: Regular expression for a single value
        multiple: If True, return all matches instead of only the last one

    Returns:
        Tuple of (remaining_text, last match or None) or, with ``multiple``,
        (remaining_text, list of matches in order of appearance). If nothing
        matches, the text is returned unaltered.
    """
    matches = [m.group(0) for m in _compile(pattern).finditer(text)]

    for match in matches:
        text = _remove_literal(text, match)

    if matches:
        logger.debug(f"Extracted {len(matches)} match(es) of {pattern!r}")

    if multiple:
        return text, matches

    return text, (matches[-1] if matches else None)

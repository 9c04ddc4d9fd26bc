"""Tag syntax embedded in category names and transaction comments.

Free text fields of a transaction can carry tags that end up as ledger
comments (``; key: value``) in the exported journal:

    {19%}              tax tag           -> ; tax: 19%
    #project:garden    custom tag        -> ; project: garden
    #reimbursable      custom tag        -> ; reimbursable:
    <4711>             transaction code  -> (4711) in the header
    [2024-01-02=2024-01-05]
                       date override     -> ; [2024-01-02=2024-01-05]

The code and date tags are only recognized in transaction comments. Tags are
collected in a ``TagSet``, an ordered collection of ``Keyed`` and ``Bare``
entries where every name occurs at most once.
"""

__copyright__ = "Copyright (C) 2026 slimslickner"
__license__ = "GNU GPLv2"

import logging
import re
from datetime import date
from typing import Dict, Iterator, NamedTuple, Tuple, Union

from ledger_export.extract import extract_pattern

logger = logging.getLogger(__name__)

CODE_PATTERN = r"<.*?>"
DATE_PATTERN = r"\[.*?\]"
TAX_PATTERN = r"\{.*?\}"
CUSTOM_PATTERN = r"#[^\s:,]+(?::[^\s,]*)?"

_DATE_RE = re.compile(r"(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})")


class Keyed(NamedTuple):
    """Tag rendered as ``; name: value``."""

    name: str
    value: str = ""


class Bare(NamedTuple):
    """Tag rendered literally as ``; text``."""

    text: str


Tag = Union[Keyed, Bare]


class TagSet:
    """Ordered tags with unique names; the last write of a name wins.

    Overwriting a name keeps the position of its first insertion.
    """

    def __init__(self, entries=()):
        self._entries: Dict[Union[str, int], Tag] = {}
        self._bare_count = 0
        for entry in entries:
            self.add(entry)

    def add(self, entry: Tag) -> None:
        if isinstance(entry, Bare):
            self._entries[self._bare_count] = entry
            self._bare_count += 1
        else:
            self._entries[entry.name] = entry

    def set(self, name: str, value: str = "") -> None:
        self.add(Keyed(name, value))

    def add_bare(self, text: str) -> None:
        self.add(Bare(text))

    def get(self, name: str, default: str | None = None) -> str | None:
        entry = self._entries.get(name)
        return entry.value if entry is not None else default

    def pop(self, name: str, default: str | None = None) -> str | None:
        entry = self._entries.pop(name, None)
        return entry.value if entry is not None else default

    def update(self, other: "TagSet") -> None:
        for entry in other:
            self.add(entry)

    def copy(self) -> "TagSet":
        return TagSet(self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._entries

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"TagSet({list(self)!r})"


def parse_tags(text: str, transaction: bool = False) -> Tuple[str, TagSet]:
    """Extract the ``{tax}`` and ``#custom`` tags from a string.

    Args:
        text: Free text (category name or transaction comment)
        transaction: If True, the ``<code>`` and ``[date]`` tags are
            extracted as well

    Returns:
        Tuple of (remaining_text, tags)
    """
    tags = TagSet()

    if transaction:
        text, result = extract_pattern(text, CODE_PATTERN)
        if result is not None:
            tags.set("code", result[1:-1])

        # kept with brackets; rendered as a bare tag later on
        text, result = extract_pattern(text, DATE_PATTERN)
        if result is not None:
            tags.set("date", result)

    text, result = extract_pattern(text, TAX_PATTERN)
    if result is not None:
        tags.set("tax", result[1:-1])

    # parsed last so that `#` can be used inside the other tags
    text, results = extract_pattern(text, CUSTOM_PATTERN, multiple=True)
    for token in results:
        name, _, value = token[1:].partition(":")
        tags.set(name, value)

    return text, tags


def format_tags(tags: TagSet, separator: str, start: str = "") -> str:
    """Convert tags into ledger comment syntax.

    Args:
        tags: Tags to print
        separator: String printed in between tags
        start: String printed in front of the first tag

    Returns:
        The formatted tags or an empty string if there are none
    """
    strings = []
    for entry in tags:
        if isinstance(entry, Bare):
            strings.append(f"; {entry.text}")
        elif entry.value:
            strings.append(f"; {entry.name}: {entry.value}")
        else:
            strings.append(f"; {entry.name}:")

    if not strings:
        return ""
    return start + separator.join(strings)


def _parse_date(text: str) -> date:
    match = _DATE_RE.fullmatch(text.strip())
    if not match:
        raise ValueError(f"Invalid date '{text}'")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def parse_date_override(text: str) -> Tuple[date | None, date | None]:
    """Parse the ``[date]`` tag into its actual and effective date.

    Accepted forms are ``[date1=date2]``, ``[date1]`` and ``[=date2]``.

    Raises:
        ValueError: If the tag does not follow one of the accepted forms
    """
    if not (text.startswith("[") and text.endswith("]")):
        raise ValueError(f"Date override '{text}' is not enclosed in brackets")

    first, separator, second = text[1:-1].partition("=")
    if not first.strip() and not second.strip():
        raise ValueError(f"Date override '{text}' contains no date")

    actual = _parse_date(first) if first.strip() else None
    effective = None
    if separator and second.strip():
        effective = _parse_date(second)
    elif separator:
        raise ValueError(f"Date override '{text}' has an empty effective date")

    return actual, effective

"""Match predicates for monitor search.

A predicate is a small tree: Contains leaves (column contains value,
case-insensitive) joined by AnyOf (OR) and AllOf (AND) nodes. The tree is
built here from the raw query text and phrase mode; the repository compiles
it into parameterized SQL, so user text never reaches the SQL string.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from monitor_search.domain.enums import PhraseMode


class SearchColumn(str, Enum):
    """Logical text columns a predicate can test."""

    TITLE = "title"
    TEXT = "text"


@dataclass(frozen=True)
class Contains:
    """Leaf: column contains value (substring, case-insensitive)."""

    column: SearchColumn
    value: str


@dataclass(frozen=True)
class AnyOf:
    """OR node."""

    children: tuple[Predicate, ...]


@dataclass(frozen=True)
class AllOf:
    """AND node."""

    children: tuple[Predicate, ...]


Predicate = Contains | AnyOf | AllOf


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return text.split()


def issue_columns(search_issue_text: bool) -> tuple[SearchColumn, ...]:
    """Columns matched for issues: title, plus body when search_issue_text is on."""
    if search_issue_text:
        return (SearchColumn.TITLE, SearchColumn.TEXT)
    return (SearchColumn.TITLE,)


def comment_columns() -> tuple[SearchColumn, ...]:
    """Columns matched for comments: body only (comments have no title)."""
    return (SearchColumn.TEXT,)


def _match_any_column(value: str, columns: Sequence[SearchColumn]) -> AnyOf:
    return AnyOf(tuple(Contains(column, value) for column in columns))


def build_match_predicate(
    text: str,
    phrase: PhraseMode | str | None,
    columns: Sequence[SearchColumn],
) -> Predicate:
    """Build the match predicate for one entity kind.

    ANY / ALL: each whitespace-separated token must appear in one of the
    columns; tokens are OR-ed (ANY) or AND-ed (ALL). Any other phrase
    treats the whole stripped text as one literal substring.

    Args:
        text: Raw query text (stripped here).
        phrase: Phrase mode or raw phrase option.
        columns: Columns to test, in order (see issue_columns / comment_columns).

    Returns:
        Predicate tree.

    Raises:
        ValueError: If text is empty after stripping or no columns are given.
    """
    text = text.strip()
    if not text:
        raise ValueError("Cannot build a match predicate for empty text")
    if not columns:
        raise ValueError("At least one column is required")
    mode = phrase if isinstance(phrase, PhraseMode) else PhraseMode.parse(phrase)
    if mode is PhraseMode.EXACT:
        return _match_any_column(text, columns)
    per_token = tuple(_match_any_column(token, columns) for token in tokenize(text))
    if mode is PhraseMode.ALL:
        return AllOf(per_token)
    return AnyOf(per_token)

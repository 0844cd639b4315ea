"""Domain enumerations for the monitor search provider.

Enums represent the fixed value sets a search request is made of: which
areas to search, how the query text is matched, and how hits are ordered.
"""

from enum import Enum


class SearchArea(str, Enum):
    """Searchable entity kinds."""

    ISSUES = "issues"
    COMMENTS = "comments"

    @classmethod
    def values(cls) -> list[str]:
        """Return all area keys as strings, in declaration order.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [area.value for area in cls]


class PhraseMode(str, Enum):
    """How the query text is turned into a match predicate.

    ANY and ALL tokenize on whitespace; anything else is treated as EXACT
    (the whole text is one literal substring).
    """

    ANY = "any"
    ALL = "all"
    EXACT = "exact"

    @classmethod
    def parse(cls, value: str | None) -> "PhraseMode":
        """Map a raw phrase option to a mode; unknown values fall back to EXACT."""
        try:
            return cls(value)
        except ValueError:
            return cls.EXACT


class SearchOrdering(str, Enum):
    """Result ordering options. POPULAR has no metric and behaves as NEWEST."""

    NEWEST = "newest"
    OLDEST = "oldest"
    POPULAR = "popular"
    ALPHA = "alpha"
    CATEGORY = "category"

    @classmethod
    def parse(cls, value: str | None) -> "SearchOrdering":
        """Map a raw ordering option to an ordering; unknown values fall back to NEWEST."""
        try:
            ordering = cls(value)
        except ValueError:
            return cls.NEWEST
        return cls.NEWEST if ordering is cls.POPULAR else ordering

# ==============================================
# ClassifierRules
# ==============================================
#
# PURPOSE:
#   The fixed table of regular expressions that tag a string as:
#
#   - display-only       → URLs and filesystem paths. Worth showing,
#                          useless to search or filter on.
#   - filter-not-search  → version-4 UUIDs. Exact-match identifiers.
#   - sort-and-filter    → numeric and date/time-like tokens.
#
#   Built once (ClassifierRules.default()) and handed to the scorer.
#   Frozen, so a shared instance can never drift.
#
# ==============================================

import re
from dataclasses import dataclass
from typing import Sequence, Tuple


URL_PATTERNS = (
    r"^[a-z][a-z0-9+.\-]*://\S+$",
    r"^www\.\S+\.\S+$",
    r"^mailto:\S+@\S+$",
)

PATH_PATTERNS = (
    r"^(?:/|\./|\.\./|~/)\S*$",
    r"^[a-z]:\\\S*$",
)

UUID_V4_PATTERNS = (
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
)

NUMERIC_PATTERNS = (
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?$",
)

DATE_PATTERNS = (
    # 2024-01-15, 2024-01-15T10:30:00Z, 2024-01-15 10:30:00.123+02:00
    r"^\d{4}-\d{2}-\d{2}(?:[t ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:z|[+-]\d{2}:?\d{2})?)?$",
    # 2024/01/15
    r"^\d{4}/\d{2}/\d{2}$",
    # 15/01/2024, 01-15-24, 15.01.2024
    r"^\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}$",
    # 10:30, 10:30:00
    r"^\d{1,2}:\d{2}(?::\d{2})?$",
)


def _compile(patterns: Sequence[str]) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


@dataclass(frozen=True)
class ClassifierRules:
    """Immutable set of string classification patterns."""

    display_only: Tuple[re.Pattern, ...]
    filter_not_search: Tuple[re.Pattern, ...]
    sort_and_filter: Tuple[re.Pattern, ...]

    @classmethod
    def default(cls) -> "ClassifierRules":
        return cls(
            display_only=_compile(URL_PATTERNS + PATH_PATTERNS),
            filter_not_search=_compile(UUID_V4_PATTERNS),
            sort_and_filter=_compile(NUMERIC_PATTERNS + DATE_PATTERNS),
        )

    def is_display_only(self, text: str) -> bool:
        return _any_match(self.display_only, text)

    def is_filter_not_search(self, text: str) -> bool:
        return _any_match(self.filter_not_search, text)

    def is_sort_and_filter(self, text: str) -> bool:
        return _any_match(self.sort_and_filter, text)


def _any_match(patterns: Tuple[re.Pattern, ...], text: str) -> bool:
    return any(p.fullmatch(text) for p in patterns)

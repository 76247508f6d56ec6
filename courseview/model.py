"""
Central data model definitions used across the project.

This module defines the canonical Course object and the helpers that turn a
loosely structured JSON record into one, so that:
- every other module works with the same attribute names
- field aliases are resolved in exactly one place
- credits are always one of a small set of well-known shapes
"""

from __future__ import annotations

import json
import math
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence, Union


# ---------------------------------------------------------------------------
# Alias chains (priority order, first usable value wins)
# ---------------------------------------------------------------------------

ID_ALIASES = ("id", "courseId", "code")
TITLE_ALIASES = ("title", "name")

OPTIONAL_ALIASES = {
    "posted_time": ("postedTime", "semester", "term"),
    "type": ("type", "category"),
    "level": ("level", "difficulty"),
    "credits": ("credits", "creditHours", "units"),
    "instructor": ("instructor", "professor", "teacher"),
    "skill": ("skill", "topic"),
    "department": ("department", "dept"),
    "detail": ("detail", "description", "summary"),
}

SEASON_ORDER = {
    "Winter": 1,
    "Spring": 2,
    "Summer": 3,
    "Fall": 4,
}

_SEMESTER_RE = re.compile(r"^(\w+)\s+(\d{4})$", re.ASCII)


# ---------------------------------------------------------------------------
# Credits
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NumericCredits:
    """Credits that could be read as a number."""

    value: Union[int, float]

    def __str__(self) -> str:
        return _number_text(self.value)


@dataclass(frozen=True)
class RawCredits:
    """Credits that were present but not numeric (e.g. "3-4" or "varies")."""

    value: str

    def __str__(self) -> str:
        return self.value


# None stands for "no credits given"
Credits = Optional[Union[NumericCredits, RawCredits]]


def _number_text(n: Union[int, float]) -> str:
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any) -> Optional[Union[int, float]]:
    """
    Read value as a finite number, or return None.

    Strings are trimmed first. Python-only literal forms (digit separators)
    are not accepted.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        n = float(text)
    except ValueError:
        return None
    return n if math.isfinite(n) else None


def normalize_credits(value: Any) -> Credits:
    if _is_blank(value):
        return None
    n = parse_number(value)
    if n is not None:
        return NumericCredits(n)
    if isinstance(value, str):
        return RawCredits(value)
    return RawCredits(display_value(value))


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def display_value(value: Any) -> str:
    """
    Text form of a field value, as shown to the user and used for filtering.

    JSON literals keep their JSON spelling (true/false/null), integral floats
    drop the ".0" and nested structures are shown as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_text(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def collation_key(text: str) -> str:
    """
    Comparison key that ignores case and accents ("base" sensitivity).
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def compare_text(a: str, b: str) -> int:
    ka, kb = collation_key(a), collation_key(b)
    return (ka > kb) - (ka < kb)


def resolve_alias(
    raw: Mapping[str, Any],
    keys: Sequence[str],
    accept: Optional[Callable[[Any], bool]] = None,
) -> Any:
    """
    Return the value of the first key in `keys` that holds something usable.

    None and empty (or whitespace-only) strings are skipped, so
    {"id": "", "courseId": "C1"} resolves to "C1". With `accept`, values it
    rejects are skipped as well.
    """
    for key in keys:
        value = raw.get(key)
        if _is_blank(value):
            continue
        if accept is None or accept(value):
            return value
    return None


def semester_rank(value: Any) -> Optional[int]:
    """
    Turn "Fall 2020" into 20204 (year * 10 + season index).

    Anything that is not exactly "<Season> <4-digit year>" has no rank.
    """
    if not isinstance(value, str) or not value:
        return None
    match = _SEMESTER_RE.match(value.strip())
    if not match:
        return None
    season_index = SEASON_ORDER.get(match.group(1))
    if not season_index:
        return None
    return int(match.group(2)) * 10 + season_index


def _valid_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (int, float)):
        # 0 counts as empty, like an empty string
        return math.isfinite(value) and value != 0
    return False


# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Course:
    """
    One canonical course, built from a single record of the loaded file.

    Only id and title are required. Every other attribute keeps the value
    found in the file (no type coercion) except credits, which is normalized.
    """

    id: Union[str, int, float]
    title: str
    posted_time: Any = None
    type: Any = None
    level: Any = None
    credits: Credits = None
    instructor: Any = None
    skill: Any = None
    department: Any = None
    detail: Any = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["Course"]:
        """
        Build a Course from a raw record, or return None if it is unusable.
        """
        if not isinstance(raw, Mapping):
            return None

        course_id = resolve_alias(raw, ID_ALIASES, accept=_valid_id)
        title = resolve_alias(raw, TITLE_ALIASES, accept=lambda v: isinstance(v, str))
        if course_id is None or title is None:
            return None

        optional = {name: resolve_alias(raw, keys) for name, keys in OPTIONAL_ALIASES.items()}
        optional["credits"] = normalize_credits(optional["credits"])

        return cls(id=course_id, title=title, raw=raw, **optional)

    @property
    def semester_rank(self) -> Optional[int]:
        return semester_rank(self.posted_time)

    def field_value(self, key: str) -> Any:
        """Return the attribute used for a facet key (e.g. "level")."""
        return getattr(self, key)

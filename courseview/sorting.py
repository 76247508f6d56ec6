"""
Sorting.

Supported keys:
    none      keep the current (load) order
    title     case- and accent-insensitive text order
    id        numeric when both ids are numbers, text order otherwise
    semester  chronological by "Season YYYY", unknown semesters last

Direction "desc" simply negates the comparison, so for semester sorting the
unknown semesters move to the front. Python's sort is stable, so courses that
compare equal keep their relative order in both directions.
"""

from __future__ import annotations

import functools
from typing import List, Sequence, Tuple

from courseview.model import Course, parse_number, compare_text, display_value

SORT_KEYS = ("none", "title", "id", "semester")
SORT_DIRECTIONS = ("asc", "desc")


def parse_sort_mode(mode: str) -> Tuple[str, str]:
    """
    Split a combined mode like "title-desc" into ("title", "desc").

    "none" (or an empty string) means unsorted. Raises ValueError for
    anything else.
    """
    text = (mode or "").strip().lower()
    if not text or text == "none":
        return "none", "asc"

    key, sep, direction = text.partition("-")
    if not sep:
        direction = "asc"
    if key not in SORT_KEYS or key == "none" or direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort mode: {mode!r}")
    return key, direction


def _compare_ids(a: Course, b: Course) -> int:
    an = parse_number(a.id)
    bn = parse_number(b.id)
    # numeric only when BOTH sides are numbers; decided per pair
    if an is not None and bn is not None:
        return (an > bn) - (an < bn)
    return compare_text(display_value(a.id), display_value(b.id))


def _compare_semesters(a: Course, b: Course) -> int:
    ar = a.semester_rank
    br = b.semester_rank
    if ar is None and br is None:
        return 0
    if ar is None:
        return 1
    if br is None:
        return -1
    return (ar > br) - (ar < br)


def compare_courses(a: Course, b: Course, key: str, direction: str = "asc") -> int:
    if key == "title":
        cmp = compare_text(a.title or "", b.title or "")
    elif key == "id":
        cmp = _compare_ids(a, b)
    elif key == "semester":
        cmp = _compare_semesters(a, b)
    else:
        cmp = 0
    return -cmp if direction == "desc" else cmp


def sort_courses(courses: Sequence[Course], key: str = "none", direction: str = "asc") -> List[Course]:
    """
    Return a new, sorted list. The input sequence is not modified.
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key!r}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort direction: {direction!r}")

    if key == "none":
        return list(courses)

    return sorted(courses, key=functools.cmp_to_key(lambda a, b: compare_courses(a, b, key, direction)))

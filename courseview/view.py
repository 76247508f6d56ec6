"""
View projection: Course -> text for the list and the detail pane.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from courseview.model import Course, display_value

EMPTY_PLACEHOLDER = "—"
NO_SELECTION_TEXT = "Select a course to see details."
SEGMENT_SEPARATOR = " • "

DETAIL_FIELDS = (
    ("ID", "id"),
    ("Department", "department"),
    ("Instructor", "instructor"),
    ("Credits", "credits"),
    ("Level", "level"),
    ("Type", "type"),
    ("Skill", "skill"),
    ("Semester", "posted_time"),
    ("Description", "detail"),
)


def _present(value: object) -> bool:
    return value is not None and value != ""


def summarize(course: Course) -> str:
    """
    One-line summary, e.g. "Algorithms (CS201) • Intermediate • 4 credits • Fall 2020".
    """
    head = f"{course.title} ({display_value(course.id)})"

    segments = [head]
    if _present(course.level):
        segments.append(display_value(course.level))
    if course.credits is not None:
        segments.append(f"{course.credits} credits")
    if _present(course.posted_time):
        segments.append(display_value(course.posted_time))

    return SEGMENT_SEPARATOR.join(segments)


def detail_heading(course: Optional[Course]) -> str:
    if course is None:
        return NO_SELECTION_TEXT
    return course.title or "Course"


def detail_rows(course: Course) -> List[Tuple[str, str]]:
    """
    Ordered (label, text) pairs for the detail pane.

    Missing values are shown as EMPTY_PLACEHOLDER instead of a blank cell.
    """
    rows: List[Tuple[str, str]] = []
    for label, attr in DETAIL_FIELDS:
        value = getattr(course, attr)
        rows.append((label, display_value(value) if _present(value) else EMPTY_PLACEHOLDER))
    return rows

"""
Filtering.

A course passes when every active filter matches its field exactly,
ignoring case. There is no partial matching and no ranking.
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from courseview.model import Course, display_value


def matches_filters(course: Course, filters: Mapping[str, str]) -> bool:
    for key, value in filters.items():
        field_value = course.field_value(key)
        if field_value is None:
            return False
        if display_value(field_value).lower() != str(value).lower():
            return False
    return True


def filter_courses(courses: Sequence[Course], filters: Mapping[str, str]) -> List[Course]:
    """
    Return the courses passing all filters, in their original order.
    """
    return [c for c in courses if matches_filters(c, filters)]

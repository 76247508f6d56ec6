"""
Facet derivation.

Facets are the attributes a user can filter on. Which ones exist, and which
values they offer, is decided by the loaded data only:
- a candidate key with no value in any course gets no filter at all
- option lists are built once from the full (unfiltered) course list
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from courseview.model import Course, collation_key, display_value

CANDIDATE_FACET_KEYS = (
    "level",
    "credits",
    "instructor",
    "department",
    "type",
    "skill",
)

FACET_LABELS = {
    "level": "Level",
    "credits": "Credits",
    "instructor": "Instructor",
    "department": "Department",
    "type": "Type",
    "skill": "Skill",
}


def _has_value(value: object) -> bool:
    return value is not None and value != ""


def derive_facets(courses: Sequence[Course]) -> List[str]:
    """
    Return the candidate keys (in candidate order) that at least one course has a value for.
    """
    return [key for key in CANDIDATE_FACET_KEYS if any(_has_value(c.field_value(key)) for c in courses)]


def build_options(courses: Sequence[Course], keys: Iterable[str]) -> Dict[str, List[str]]:
    """
    Map each facet key to its distinct values, sorted ignoring case and accents.
    """
    options: Dict[str, List[str]] = {}
    for key in keys:
        seen: Dict[str, None] = {}
        for c in courses:
            value = c.field_value(key)
            if _has_value(value):
                seen.setdefault(display_value(value), None)
        options[key] = sorted(seen, key=collation_key)
    return options


def label_for_key(key: str) -> str:
    return FACET_LABELS.get(key, key)

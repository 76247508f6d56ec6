"""
Application state.

CatalogState is the single owner of everything that changes while the user
works with a catalog:
- the loaded courses and the facets derived from them
- the active filters and the sort mode
- the visible (filtered + sorted) courses
- the selected course and the current status message

Rendering code only reads through the get_* accessors and changes things
through the mutators below. Every mutator recomputes the visible list, so the
accessors always describe a consistent view.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from courseview.facets import build_options, derive_facets
from courseview.filters import filter_courses
from courseview.loader import (
    NO_RESULTS_MESSAGE,
    CatalogLoadError,
    LoadResult,
    Message,
    load_catalog,
    read_catalog_file,
)
from courseview.model import Course, display_value
from courseview.sorting import SORT_DIRECTIONS, SORT_KEYS, sort_courses

logger = logging.getLogger(__name__)


class CatalogState:
    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._courses: List[Course] = []
        self._facet_keys: List[str] = []
        self._facet_options: Dict[str, List[str]] = {}
        self._filters: Dict[str, str] = {}
        self._sort: Tuple[str, str] = ("none", "asc")
        self._visible: List[Course] = []
        self._selected_id: Any = None
        self._load_message: Optional[Message] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_text(self, raw_text: str) -> LoadResult:
        """
        Replace the whole state with the catalog in raw_text.

        On failure the state is left empty, an error message is stored and
        the CatalogLoadError is re-raised for the caller.
        """
        self._reset()
        try:
            result = load_catalog(raw_text)
        except CatalogLoadError as exc:
            logger.warning("Catalog load failed: %s", exc)
            self._load_message = Message(exc.user_message, "error")
            raise

        self._courses = list(result.courses)
        self._facet_keys = derive_facets(self._courses)
        self._facet_options = build_options(self._courses, self._facet_keys)
        self._load_message = result.message
        self._refresh()
        return result

    def load_file(self, path: str | Path) -> LoadResult:
        try:
            text = read_catalog_file(path)
        except CatalogLoadError as exc:
            self._reset()
            logger.warning("Could not read %s: %s", path, exc)
            self._load_message = Message(exc.user_message, "error")
            raise
        return self.load_text(text)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_courses(self) -> List[Course]:
        return list(self._courses)

    def get_visible_courses(self) -> List[Course]:
        return list(self._visible)

    def get_selected_course(self) -> Optional[Course]:
        if self._selected_id is None:
            return None
        for c in self._visible:
            if c.id == self._selected_id:
                return c
        return None

    def get_facet_keys(self) -> List[str]:
        return list(self._facet_keys)

    def get_facet_options(self) -> Dict[str, List[str]]:
        return {key: list(values) for key, values in self._facet_options.items()}

    def get_filters(self) -> Dict[str, str]:
        return dict(self._filters)

    def get_sort(self) -> Tuple[str, str]:
        return self._sort

    def get_message(self) -> Optional[Message]:
        """
        The status line to show right now.

        Load errors always win. Otherwise an empty view of a loaded catalog
        shows the "no results" note, and any other view shows the load notice.
        """
        if self._load_message is not None and self._load_message.is_error:
            return self._load_message
        if self._courses and not self._visible:
            return Message(NO_RESULTS_MESSAGE, "info")
        return self._load_message

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_filter(self, key: str, value: Optional[str]) -> None:
        """
        Constrain facet `key` to `value`; None or "" removes the constraint.
        """
        if key not in self._facet_keys:
            raise ValueError(f"Unknown filter: {key!r}")
        if value is None or value == "":
            self._filters.pop(key, None)
        else:
            self._filters[key] = value
        self._refresh()

    def clear_filters(self) -> None:
        self._filters = {}
        self._refresh()

    def set_sort(self, key: str, direction: str = "asc") -> None:
        if key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {key!r}")
        if direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction: {direction!r}")
        self._sort = (key, direction)
        self._refresh()

    def select_course(self, course_id: Any) -> bool:
        """
        Select the visible course with this id (None clears the selection).

        Returns True if a visible course matched.
        """
        if course_id is None:
            self._selected_id = None
            return False
        if any(c.id == course_id for c in self._visible):
            self._selected_id = course_id
            return True
        self._selected_id = None
        return False

    def find_course_id(self, text: str) -> Any:
        """
        Map an id typed by the user to the id stored on the course.

        Numeric ids from the file are matched by their text form, so "101"
        finds a course loaded with id 101. The first match wins.
        """
        wanted = text.strip()
        for c in self._courses:
            if display_value(c.id) == wanted:
                return c.id
        return None

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    def _refresh(self) -> None:
        key, direction = self._sort
        filtered = filter_courses(self._courses, self._filters)
        self._visible = sort_courses(filtered, key, direction)

        if self._selected_id is not None and not any(c.id == self._selected_id for c in self._visible):
            logger.debug("Selection %r is no longer visible, clearing it", self._selected_id)
            self._selected_id = None

"""
Loading (JSON text -> canonical courses).

- Reads a catalog file as UTF-8 text
- Parses it as JSON; the top level must be an array
- Converts EACH array element into at most ONE Course
- Counts every element that could not be converted as skipped

Important rules:
- A broken file and a file without a single usable course look the same to
  the user ("Invalid JSON file format."), but they are different errors here.
- Skipped records are never reported one by one, only as a count.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from courseview.model import Course

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# User messages
# ---------------------------------------------------------------------------

INVALID_FORMAT_MESSAGE = "Invalid JSON file format."
NO_RESULTS_MESSAGE = "No courses found for current filters."
READ_FAILED_MESSAGE = "Read failed"


@dataclass(frozen=True)
class Message:
    """A status line for the user. kind is "info" or "error"."""

    text: str
    kind: str = "info"

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


def skipped_message(loaded: int, skipped: int) -> str:
    suffix = "y" if skipped == 1 else "ies"
    return f"Loaded {loaded} courses. Skipped {skipped} invalid entr{suffix}."


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CatalogLoadError(Exception):
    """Base class for everything that aborts a catalog load."""

    user_message = INVALID_FORMAT_MESSAGE

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.user_message)
        self.detail = detail


class CatalogFormatError(CatalogLoadError):
    """The text is not JSON, or its top level is not an array."""


class EmptyCatalogError(CatalogLoadError):
    """The array was parsed, but not a single record was a usable course."""


class CatalogReadError(CatalogLoadError):
    """The file itself could not be read."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.user_message = detail or READ_FAILED_MESSAGE


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


@dataclass
class LoadResult:
    courses: List[Course] = field(default_factory=list)
    skipped_count: int = 0

    @property
    def message(self) -> Optional[Message]:
        """
        Info message for a successful load, None if nothing was skipped.
        """
        if self.skipped_count > 0:
            return Message(skipped_message(len(self.courses), self.skipped_count), "info")
        return None


def convert(raw_array: Sequence[Any]) -> Tuple[List[Course], int]:
    """
    Convert every raw record, keeping input order.

    Returns the courses and the number of skipped records, so that
    len(courses) + skipped == len(raw_array).
    """
    courses: List[Course] = []
    skipped = 0

    for index, raw in enumerate(raw_array):
        course = Course.from_raw(raw)
        if course is None:
            skipped += 1
            logger.debug("Skipping record %d: no usable id/title", index)
            continue
        courses.append(course)

    return courses, skipped


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are accepted by the json module but are not JSON
    raise ValueError(f"unexpected constant {name!r}")


def parse_catalog(text: str) -> List[Any]:
    """
    Parse catalog text and return the top-level array.
    """
    # a leading byte order mark is not part of the document
    if text.startswith("\ufeff"):
        text = text[1:]

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise CatalogFormatError(f"not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise CatalogFormatError(f"top level is {type(data).__name__}, expected an array")

    return data


def load_catalog(text: str) -> LoadResult:
    """
    Parse and convert a whole catalog.

    Raises CatalogFormatError for broken input and EmptyCatalogError when no
    course could be built.
    """
    data = parse_catalog(text)
    courses, skipped = convert(data)

    if not courses:
        raise EmptyCatalogError(f"no valid courses in {len(data)} records")

    logger.info("Loaded %d courses, skipped %d records", len(courses), skipped)
    return LoadResult(courses=courses, skipped_count=skipped)


def read_catalog_file(path: str | Path) -> str:
    """
    Read a catalog file as UTF-8 text.
    """
    try:
        # undecodable bytes become U+FFFD instead of failing the whole file
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise CatalogReadError(str(exc)) from exc

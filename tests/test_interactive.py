"""
Smoke tests for the interactive menu.

User input is replayed through a patched _prompt and the rich console writes
into a buffer, so no terminal is needed.
"""

import io
import json
import tempfile
import unittest
from pathlib import Path
from typing import List, Optional, Tuple
from unittest import mock

from rich.console import Console

from courseview import interactive
from courseview.state import CatalogState

CATALOG = [
    {"id": "CS101", "title": "Intro", "level": "Beginner"},
    {"id": "CS201", "title": "Algorithms", "level": "Intermediate"},
]


class TestInteractive(unittest.TestCase):
    def _run(self, answers: List[str], path: Optional[str] = None) -> Tuple[CatalogState, str]:
        buf = io.StringIO()
        state = CatalogState()
        with mock.patch.object(interactive, "console", Console(file=buf, width=200)), mock.patch.object(
            interactive, "_prompt", side_effect=answers
        ):
            interactive.run_interactive(state, path)
        return state, buf.getvalue()

    def test_filter_list_and_details(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "courses.json"
            p.write_text(json.dumps(CATALOG), encoding="utf-8")

            answers = [
                "2", "1", "1",  # filter level = Beginner
                "5",  # list
                "6", "CS101",  # details
                "0",
            ]
            state, out = self._run(answers, str(p))

        self.assertEqual(state.get_filters(), {"level": "Beginner"})
        selected = state.get_selected_course()
        assert selected is not None
        self.assertEqual(selected.id, "CS101")
        self.assertIn("Intro (CS101) • Beginner", out)
        self.assertIn("Selected: CS101", out)
        self.assertIn("Bye.", out)

    def test_sort_menu(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "courses.json"
            p.write_text(json.dumps(CATALOG), encoding="utf-8")
            state, _ = self._run(["4", "2", "0"], str(p))

        self.assertEqual(state.get_sort(), ("title", "asc"))
        self.assertEqual([c.id for c in state.get_visible_courses()], ["CS201", "CS101"])

    def test_open_broken_file_shows_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "broken.json"
            p.write_text("{", encoding="utf-8")
            state, out = self._run(["1", str(p), "0"])

        self.assertEqual(state.get_courses(), [])
        self.assertIn("Invalid JSON file format.", out)

    def test_prompt_hint_is_shown(self) -> None:
        buf = io.StringIO()
        with mock.patch.object(interactive, "console", Console(file=buf, width=200)), mock.patch(
            "builtins.input", return_value=""
        ):
            answer = interactive._prompt("Enter number [blank = back]: ")
        self.assertEqual(answer, "")
        self.assertIn("Enter number [blank = back]: ", buf.getvalue())

    def test_invalid_choice(self) -> None:
        _, out = self._run(["x", "0"])
        self.assertIn("Invalid choice.", out)


if __name__ == "__main__":
    unittest.main()

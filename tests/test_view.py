import unittest

from courseview.model import Course
from courseview.view import EMPTY_PLACEHOLDER, NO_SELECTION_TEXT, detail_heading, detail_rows, summarize


class TestSummary(unittest.TestCase):
    def test_full_summary(self) -> None:
        c = Course.from_raw(
            {"id": "CS201", "title": "Algorithms", "level": "Intermediate", "credits": "4", "semester": "Fall 2020"}
        )
        self.assertEqual(summarize(c), "Algorithms (CS201) • Intermediate • 4 credits • Fall 2020")

    def test_missing_segments_are_left_out(self) -> None:
        c = Course.from_raw({"id": 7, "title": "Seminar", "credits": "varies"})
        self.assertEqual(summarize(c), "Seminar (7) • varies credits")

    def test_only_required_fields(self) -> None:
        c = Course.from_raw({"id": "X", "title": "Y"})
        self.assertEqual(summarize(c), "Y (X)")


class TestDetails(unittest.TestCase):
    def test_rows_in_order_with_placeholder(self) -> None:
        c = Course.from_raw({"id": "CS1", "title": "Intro", "dept": "CS", "credits": 3, "description": "Basics"})
        rows = detail_rows(c)
        self.assertEqual(
            [label for label, _ in rows],
            ["ID", "Department", "Instructor", "Credits", "Level", "Type", "Skill", "Semester", "Description"],
        )
        values = dict(rows)
        self.assertEqual(values["ID"], "CS1")
        self.assertEqual(values["Department"], "CS")
        self.assertEqual(values["Credits"], "3")
        self.assertEqual(values["Instructor"], EMPTY_PLACEHOLDER)
        self.assertEqual(values["Semester"], EMPTY_PLACEHOLDER)
        self.assertEqual(values["Description"], "Basics")

    def test_heading(self) -> None:
        c = Course.from_raw({"id": "CS1", "title": "Intro"})
        self.assertEqual(detail_heading(c), "Intro")
        self.assertEqual(detail_heading(None), NO_SELECTION_TEXT)


if __name__ == "__main__":
    unittest.main()

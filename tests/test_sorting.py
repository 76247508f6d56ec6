"""
Unit tests for sorting.

Rules checked here:
- "none" keeps the incoming order
- id sorting is numeric when both ids are numbers
- unknown semesters sort last ascending and first descending
- ties keep their relative order (stable sort)
"""

import unittest

from courseview.model import Course
from courseview.sorting import compare_courses, parse_sort_mode, sort_courses


def _course(cid, title="T", semester=None) -> Course:
    raw = {"id": cid, "title": title}
    if semester is not None:
        raw["semester"] = semester
    c = Course.from_raw(raw)
    assert c is not None
    return c


class TestSortModes(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(parse_sort_mode("none"), ("none", "asc"))
        self.assertEqual(parse_sort_mode(""), ("none", "asc"))
        self.assertEqual(parse_sort_mode("title-desc"), ("title", "desc"))
        self.assertEqual(parse_sort_mode("Semester-ASC"), ("semester", "asc"))
        self.assertEqual(parse_sort_mode("id"), ("id", "asc"))

    def test_parse_invalid(self) -> None:
        for mode in ("credits-asc", "title-up", "none-desc"):
            with self.assertRaises(ValueError):
                parse_sort_mode(mode)

    def test_unknown_key(self) -> None:
        with self.assertRaises(ValueError):
            sort_courses([], "credits")


class TestSortCourses(unittest.TestCase):
    def test_none_is_identity(self) -> None:
        courses = [_course("b"), _course("a"), _course("c")]
        self.assertEqual(sort_courses(courses, "none"), courses)
        self.assertEqual(sort_courses(courses, "none", "desc"), courses)

    def test_id_numeric(self) -> None:
        courses = [_course("10"), _course("2")]
        self.assertEqual([c.id for c in sort_courses(courses, "id", "asc")], ["2", "10"])
        self.assertEqual([c.id for c in sort_courses(courses, "id", "desc")], ["10", "2"])

    def test_id_text_fallback(self) -> None:
        courses = [_course("cs200"), _course("CS100"), _course("bio1")]
        self.assertEqual([c.id for c in sort_courses(courses, "id")], ["bio1", "CS100", "cs200"])

    def test_id_comparison_is_per_pair(self) -> None:
        self.assertLess(compare_courses(_course(9), _course("10"), "id"), 0)
        self.assertLess(compare_courses(_course("10"), _course("9x"), "id"), 0)

    def test_title(self) -> None:
        courses = [_course(1, "beta"), _course(2, "Alpha"), _course(3, "Écologie")]
        self.assertEqual([c.title for c in sort_courses(courses, "title")], ["Alpha", "beta", "Écologie"])

    def test_semester_ascending(self) -> None:
        courses = [_course(1, semester="Fall 2020"), _course(2, semester="Spring 2021"), _course(3)]
        out = sort_courses(courses, "semester", "asc")
        self.assertEqual([c.posted_time for c in out], ["Fall 2020", "Spring 2021", None])

    def test_semester_descending_puts_unknown_first(self) -> None:
        courses = [_course(1, semester="Fall 2020"), _course(2, semester="Spring 2021"), _course(3)]
        out = sort_courses(courses, "semester", "desc")
        self.assertEqual([c.posted_time for c in out], [None, "Spring 2021", "Fall 2020"])

    def test_semester_chronology(self) -> None:
        courses = [
            _course(1, semester="Fall 2021"),
            _course(2, semester="Winter 2021"),
            _course(3, semester="Summer 2021"),
            _course(4, semester="Spring 2021"),
        ]
        out = sort_courses(courses, "semester")
        self.assertEqual([c.id for c in out], [2, 4, 3, 1])

    def test_stable_ties(self) -> None:
        courses = [_course(1, "Same"), _course(2, "same"), _course(3, "SAME")]
        self.assertEqual([c.id for c in sort_courses(courses, "title", "asc")], [1, 2, 3])
        self.assertEqual([c.id for c in sort_courses(courses, "title", "desc")], [1, 2, 3])

    def test_input_not_modified(self) -> None:
        courses = [_course("b", "b"), _course("a", "a")]
        sort_courses(courses, "title")
        self.assertEqual([c.id for c in courses], ["b", "a"])


if __name__ == "__main__":
    unittest.main()

"""
CLI (Command Line Interface).

This module provides quick terminal commands on top of a catalog file, e.g.:

    courseview list courses.json
    courseview list courses.json --filter level=Beginner --sort semester-desc
    courseview list courses.json --select CS101
    courseview facets courses.json
    courseview interactive [courses.json]

Note:
- The interactive UI lives in courseview/interactive.py
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from courseview.facets import label_for_key
from courseview.loader import CatalogLoadError
from courseview.sorting import parse_sort_mode
from courseview.state import CatalogState
from courseview.view import detail_heading, detail_rows, summarize


def _print_message(state: CatalogState) -> None:
    msg = state.get_message()
    if msg is not None:
        prefix = "Error: " if msg.is_error else ""
        print(f"{prefix}{msg.text}")


def _load(state: CatalogState, path: str) -> bool:
    """
    Load the catalog into state. On failure the error message is printed.
    """
    try:
        state.load_file(path)
    except CatalogLoadError:
        _print_message(state)
        return False
    return True


def _parse_filter(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Filter must look like KEY=VALUE, got {text!r}")
    return key.strip().lower(), value.strip()


def _cmd_list(args: argparse.Namespace, state: CatalogState) -> int:
    """
    Print the visible courses and, optionally, the details of one of them.
    """
    if not _load(state, args.file):
        return 1

    try:
        for item in args.filter or []:
            key, value = _parse_filter(item)
            state.set_filter(key, value)
        state.set_sort(*parse_sort_mode(args.sort))
    except ValueError as exc:
        print(exc)
        return 2

    _print_message(state)
    for c in state.get_visible_courses():
        print(summarize(c))

    if args.select:
        course_id = state.find_course_id(args.select)
        if course_id is None or not state.select_course(course_id):
            print(f"Not in current view: {args.select}")
            return 1

        course = state.get_selected_course()
        print()
        print(detail_heading(course))
        for label, text in detail_rows(course):
            print(f"  {label}: {text}")

    return 0


def _cmd_facets(args: argparse.Namespace, state: CatalogState) -> int:
    """
    Print every facet found in the file together with its options.
    """
    if not _load(state, args.file):
        return 1

    _print_message(state)
    options = state.get_facet_options()
    if not options:
        print("No filterable attributes.")
        return 0

    for key, values in options.items():
        print(f"{label_for_key(key)} ({key}): {', '.join(values)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="courseview", description="Course catalog viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List courses (filtered + sorted)")
    p_list.add_argument("file", type=str, help="Catalog JSON file")
    p_list.add_argument(
        "--filter",
        action="append",
        metavar="KEY=VALUE",
        help="Exact-match filter, may be repeated (e.g. level=Beginner)",
    )
    p_list.add_argument(
        "--sort",
        type=str,
        default="none",
        help="none, title-asc, title-desc, id-asc, id-desc, semester-asc, semester-desc",
    )
    p_list.add_argument("--select", type=str, help="Show details for this course id")

    p_facets = sub.add_parser("facets", help="Show filterable attributes and their values")
    p_facets.add_argument("file", type=str, help="Catalog JSON file")

    p_inter = sub.add_parser("interactive", help="Interactive menu mode")
    p_inter.add_argument("file", type=str, nargs="?", help="Catalog JSON file to open first")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = CatalogState()

    if args.command == "list":
        raise SystemExit(_cmd_list(args, state))
    if args.command == "facets":
        raise SystemExit(_cmd_facets(args, state))

    if args.command == "interactive":
        from courseview.interactive import run_interactive

        run_interactive(state, args.file)
        raise SystemExit(0)

    raise SystemExit(2)

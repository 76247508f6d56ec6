from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from courseview.facets import label_for_key
from courseview.loader import CatalogLoadError
from courseview.model import display_value
from courseview.sorting import parse_sort_mode
from courseview.state import CatalogState
from courseview.view import NO_SELECTION_TEXT, detail_heading, detail_rows, summarize

console = Console()

SORT_MODES = (
    "none",
    "title-asc",
    "title-desc",
    "id-asc",
    "id-desc",
    "semester-asc",
    "semester-desc",
)

MAX_LIST_ROWS = 50


def _println(msg: str = "") -> None:
    console.print(msg)


def _prompt(msg: str) -> str:
    # prompts are plain text; hints like "[blank = back]" must not be read as markup
    return console.input(escape(msg))


def _print_message(state: CatalogState) -> None:
    msg = state.get_message()
    if msg is None:
        return
    style = "bold red" if msg.is_error else "yellow"
    _println(f"[{style}]{escape(msg.text)}[/]")


def _pick_number(msg: str, count: int) -> Optional[int]:
    """
    Ask for a 1-based number. Returns None for blank input or bad values.
    """
    pick = _prompt(msg).strip()
    if not pick:
        return None
    if not pick.isdigit():
        _println("Not a number.")
        return None
    i = int(pick)
    if not (1 <= i <= count):
        _println("Out of range.")
        return None
    return i


def run_interactive(state: CatalogState, path: Optional[str] = None) -> None:
    """
    Interactive menu loop around one CatalogState.
    """
    if path:
        _open_file(state, path)

    while True:
        _print_header(state)

        choice = _prompt(
            "\n[1] Open catalog file\n"
            "[2] Set filter\n"
            "[3] Clear filters\n"
            "[4] Sort\n"
            "[5] List courses\n"
            "[6] Course details\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "1":
            _flow_open(state)
        elif choice == "2":
            _flow_filter(state)
        elif choice == "3":
            state.clear_filters()
            _println("Filters cleared.")
        elif choice == "4":
            _flow_sort(state)
        elif choice == "5":
            _flow_list(state)
        elif choice == "6":
            _flow_details(state)
        else:
            _println("Invalid choice.")


def _print_header(state: CatalogState) -> None:
    _println("\n=== Course Explorer (interactive) ===")

    total = len(state.get_courses())
    visible = len(state.get_visible_courses())
    key, direction = state.get_sort()
    sort_text = "none" if key == "none" else f"{key}-{direction}"
    filters = state.get_filters()
    filter_text = ", ".join(f"{label_for_key(k)}={v}" for k, v in filters.items()) or "none"

    _println(f"Courses: {visible}/{total} shown | Sort: {sort_text} | Filters: {escape(filter_text)}")
    _print_message(state)


def _open_file(state: CatalogState, path: str) -> None:
    try:
        result = state.load_file(path)
    except CatalogLoadError:
        return
    _println(f"Opened {escape(path)} ({len(result.courses)} courses).")


def _flow_open(state: CatalogState) -> None:
    path = _prompt("Path to catalog JSON [blank = back]: ").strip()
    if not path:
        return
    _open_file(state, path)


def _flow_filter(state: CatalogState) -> None:
    """
    Pick a facet, then pick one of its values (or "All" to clear it).
    """
    options = state.get_facet_options()
    if not options:
        _println("No filterable attributes. Open a catalog first.")
        return

    keys = list(options)
    current = state.get_filters()

    table = Table(title="Filters", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Attribute")
    table.add_column("Current")
    for i, key in enumerate(keys, start=1):
        table.add_row(str(i), label_for_key(key), escape(current.get(key, "All")))
    console.print(table)

    i = _pick_number("Enter number of attribute [blank = back]: ", len(keys))
    if i is None:
        return
    key = keys[i - 1]
    values = options[key]

    table = Table(title=label_for_key(key), box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Value")
    table.add_row("0", "All")
    for n, value in enumerate(values, start=1):
        table.add_row(str(n), escape(value))
    console.print(table)

    pick = _prompt("Enter number of value [blank = back]: ").strip()
    if pick == "0":
        state.set_filter(key, None)
        _println(f"{label_for_key(key)}: All")
        return
    if not pick:
        return
    if not pick.isdigit() or not (1 <= int(pick) <= len(values)):
        _println("Out of range.")
        return

    value = values[int(pick) - 1]
    state.set_filter(key, value)
    _println(f"{label_for_key(key)}: {escape(value)}")


def _flow_sort(state: CatalogState) -> None:
    table = Table(title="Sort", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Mode")
    for i, mode in enumerate(SORT_MODES, start=1):
        table.add_row(str(i), mode)
    console.print(table)

    i = _pick_number("Enter number [blank = back]: ", len(SORT_MODES))
    if i is None:
        return
    state.set_sort(*parse_sort_mode(SORT_MODES[i - 1]))
    _println(f"Sort: {SORT_MODES[i - 1]}")


def _flow_list(state: CatalogState) -> None:
    courses = state.get_visible_courses()
    if not courses:
        _print_message(state)
        return

    selected = state.get_selected_course()

    table = Table(title=f"Courses ({len(courses)})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    for i, c in enumerate(courses[:MAX_LIST_ROWS], start=1):
        label = escape(summarize(c))
        if selected is not None and c.id == selected.id:
            label = f"[bold cyan]{label}[/]"
        table.add_row(str(i), label)
    console.print(table)

    if len(courses) > MAX_LIST_ROWS:
        _println(f"... and {len(courses) - MAX_LIST_ROWS} more courses")


def _flow_details(state: CatalogState) -> None:
    """
    Select a course by id and show its detail pane.
    """
    if not state.get_visible_courses():
        _print_message(state)
        return

    text = _prompt("Course id [blank = show current]: ").strip()
    if text:
        course_id = state.find_course_id(text)
        if course_id is None or not state.select_course(course_id):
            _println(f"Not in current view: {escape(text)}")
            return

    course = state.get_selected_course()
    if course is None:
        _println(NO_SELECTION_TEXT)
        return

    table = Table(title=escape(detail_heading(course)), box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for label, value in detail_rows(course):
        table.add_row(label, escape(value))
    console.print(table)
    _println(f"Selected: {escape(display_value(course.id))}")

"""
Run the course viewer as a module:

    python -m courseview list courses.json --sort title-asc

Arguments are handled by courseview.cli.main(), the same entry point as the
installed `courseview` command.
"""

from courseview.cli import main

if __name__ == "__main__":
    main()

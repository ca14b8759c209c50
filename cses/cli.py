"""CLI entry point for the CSES toolkit.

Checks that a file is a CSES document and prints its subjects and
schedules.

Usage::

    cses timetable.yaml
    python -m cses timetable.yaml
"""

import argparse
import sys

from .errors import CSESError
from .parser import CSESParser

USAGE = "Check CSES File\nUsage: cses <cses_file>"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_show(path):
    """Print every subject and schedule in ``path``."""
    if not CSESParser.is_cses_file(path):
        print("Not a valid CSES file")
        sys.exit(1)

    try:
        parser = CSESParser(path)
    except CSESError as exc:
        _error(str(exc))

    print("All Subjects:")
    for subject in parser.get_subjects():
        print(f"{subject.name} ({_text(subject.simplified_name)})")
        print(f"- Teacher: {_text(subject.teacher)}")
        print(f"- Room: {_text(subject.room)}")

    print()
    print("All Schedules:")
    for schedule in parser.get_schedules():
        print(f"{schedule.name} ({schedule.enable_day} {schedule.weeks}):")
        for cls in schedule.classes:
            print(f"- {cls.subject} ({cls.start_time} - {cls.end_time})")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _text(value):
    return "" if value is None else value


def _error(msg):
    print(f"  ERROR: {msg}", file=sys.stderr)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cses",
        description="Check a CSES file and list its subjects and schedules.",
        add_help=False,
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="cses_file",
        help="Path to a CSES YAML file.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv=None):
    """CLI entry point."""
    # Dash-prefixed arguments are paths too; only the count matters.
    args, unknown = build_parser().parse_known_args(argv)
    files = args.files + unknown
    if len(files) != 1:
        print(USAGE)
        sys.exit(1)
    cmd_show(files[0])


if __name__ == "__main__":
    main()

"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from philosophers.parsing import ArgumentError, UsageError, parse_args
from philosophers.table import Table


def main(argv: list[str] | None = None) -> int:
    """Run the simulation with ``argv`` (arguments after the program name)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_args(args)
    except (UsageError, ArgumentError) as error:
        print(error)
        return 1
    Table(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Adding a gigasecond to a moment in time."""

from __future__ import annotations

import argparse
from datetime import datetime, timedelta

from scratchweb.clock import Clock

GIGASECOND = timedelta(seconds=1_000_000_000)


def after(start: datetime) -> datetime:
    """Return the moment one billion seconds after ``start``."""
    return start + GIGASECOND


def main(argv=None) -> None:
    """Print a gigasecond after 2024-03-03 and a sample clock time."""
    argparse.ArgumentParser(description="Gigasecond and clock demo.").parse_args(argv)
    print("Hello, world!")

    start = datetime(2024, 3, 3, 0, 0, 0)
    print(f"One billion seconds later: {after(start)}")

    clock = Clock(0, 300).add_minutes(3)
    print(f"時間: {clock}")


if __name__ == "__main__":
    main()
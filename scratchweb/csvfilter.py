"""Copy the CSV records that have a field equal to a query."""

from __future__ import annotations

import argparse
import csv
import sys
from typing import TextIO


def filter_records(source: TextIO, query: str, sink: TextIO) -> int:
    """Write the header and every record with a field exactly equal to ``query``.

    Blank lines are ignored. A record whose field count differs from the
    header's raises ValueError. Returns the number of records written.
    """
    reader = csv.reader(source)
    writer = csv.writer(sink, lineterminator="\n")

    header = next((row for row in reader if row), None)
    if header is None:
        return 0
    writer.writerow(header)

    written = 0
    for row in reader:
        if not row:
            continue
        if len(row) != len(header):
            raise ValueError(
                f"record on line {reader.line_num} has {len(row)} fields, "
                f"but the header has {len(header)}"
            )
        if query in row:
            writer.writerow(row)
            written += 1
    sink.flush()
    return written


def main(argv=None) -> int:
    """Filter CSV from stdin to stderr by the first argument."""
    parser = argparse.ArgumentParser(description="Keep CSV records with a matching field.")
    parser.add_argument("query", nargs="?")
    args = parser.parse_args(argv)

    if args.query is None:
        print("expected 1 arg, but got none")
        return 1
    try:
        filter_records(sys.stdin, args.query, sys.stderr)
    except (ValueError, csv.Error) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
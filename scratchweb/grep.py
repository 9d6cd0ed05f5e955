"""Print the lines of a file that contain a pattern."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, TextIO, Union


def _decoded_lines(handle: BinaryIO) -> Iterator[str]:
    with handle:
        for raw in handle:
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Open ``path`` now and return its lines lazily, without line endings.

    Lines that are not valid UTF-8 are skipped. Raises OSError if the file
    cannot be opened.
    """
    return _decoded_lines(open(path, "rb"))


def find_matches(lines: Iterable[str], pattern: str, out: TextIO) -> int:
    """Write every line containing ``pattern`` to ``out``; return how many."""
    count = 0
    for line in lines:
        if pattern in line:
            out.write(f"{line}\n")
            count += 1
    return count


def main(argv=None) -> int:
    """Search a file for a pattern and print the matching lines."""
    parser = argparse.ArgumentParser(description="Print lines that contain a pattern.")
    parser.add_argument("pattern")
    parser.add_argument("path", type=Path)
    args = parser.parse_args(argv)

    try:
        lines = read_lines(args.path)
    except OSError as exc:
        print(f"File not found: {exc}", file=sys.stderr)
        return 1

    find_matches(lines, args.pattern, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
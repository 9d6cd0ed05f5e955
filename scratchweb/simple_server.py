"""A minimal server that answers ``GET /`` with one HTML file."""

from __future__ import annotations

import argparse
import socket
from pathlib import Path
from typing import Tuple, Union

DEFAULT_ADDR = "127.0.0.1:8080"
DEFAULT_HTML = "./hello.html"

_GET_ROOT = b"GET / HTTP/1.1\r\n"
_READ_SIZE = 1024


def _split_addr(addr: str) -> Tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid address: {addr!r}")
    return host, int(port)


def open_html(path: Union[str, Path]) -> str:
    """Return the contents of an HTML file; raises OSError if it cannot be read."""
    return Path(path).read_text(encoding="utf-8")


def handle_connection(conn, html_path: Union[str, Path] = DEFAULT_HTML) -> None:
    """Read a request and, if it is ``GET /``, reply with the HTML file."""
    data = conn.recv(_READ_SIZE)
    print(f"Request: {data.decode('utf-8', errors='replace')}")

    if not data.startswith(_GET_ROOT):
        print("Not Get")
        return

    contents = open_html(html_path)
    conn.sendall(f"HTTP/1.1 200 OK\r\n\r\n{contents}".encode("utf-8"))


def serve(addr: str, html_path: Union[str, Path] = DEFAULT_HTML) -> None:
    """Listen on ``addr`` and handle connections one at a time, forever."""
    host, port = _split_addr(addr)
    with socket.create_server((host, port)) as listener:
        print(f"Listener: {listener}")
        while True:
            conn, _ = listener.accept()
            with conn:
                handle_connection(conn, html_path)


def main(argv=None) -> None:
    """Run the single-threaded HTML server."""
    parser = argparse.ArgumentParser(description="Serve one HTML file on GET /.")
    parser.add_argument("--addr", default=DEFAULT_ADDR)
    parser.add_argument("--html", default=DEFAULT_HTML)
    args = parser.parse_args(argv)
    serve(args.addr, args.html)


if __name__ == "__main__":
    main()
"""A handler that serves files from a public directory."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional

from scratchweb.method import Method
from scratchweb.request import Request
from scratchweb.response import Response
from scratchweb.server import Handler, Server
from scratchweb.status_code import StatusCode

DEFAULT_ADDR = "127.0.0.1:4005"


class WebsiteHandler(Handler):
    """Serves ``/``, ``/hello`` and files under ``public_path``."""

    def __init__(self, public_path: str) -> None:
        self.public_path = public_path

    def read_file(self, file_path: str) -> Optional[str]:
        """Return the text of a file under the public directory, or None.

        Paths that resolve outside the public directory are refused.
        """
        try:
            resolved = Path(f"{self.public_path}/{file_path}").resolve(strict=True)
        except (OSError, RuntimeError):
            return None
        if not resolved.is_relative_to(Path(self.public_path)):
            print(f"Directory traversal attack attempted: {file_path}")
            return None
        try:
            return resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def handle_request(self, request: Request) -> Response:
        if request.method is not Method.GET:
            return Response(StatusCode.BAD_REQUEST)
        if request.path == "/":
            return Response(StatusCode.OK, self.read_file("index.html"))
        if request.path == "/hello":
            return Response(StatusCode.OK, "<h1>Hello world</h1>")
        contents = self.read_file(request.path)
        if contents is None:
            return Response(StatusCode.NOT_FOUND)
        return Response(StatusCode.OK, contents)


def main(argv=None) -> None:
    """Serve the public directory (``PUBLIC_PATH`` or ``./public``)."""
    parser = argparse.ArgumentParser(description="Serve static files over HTTP.")
    parser.add_argument("--addr", default=DEFAULT_ADDR)
    parser.add_argument("--public-path", default=None)
    args = parser.parse_args(argv)

    default_path = os.path.join(os.getcwd(), "public")
    public_path = args.public_path or os.environ.get("PUBLIC_PATH", default_path)
    print(f"public path: {public_path}")
    Server(args.addr).run(WebsiteHandler(public_path))


if __name__ == "__main__":
    main()
"""A small HTTP/1.1 server on plain sockets, with companion command-line utilities and helpers."""

__version__ = "0.1.0"
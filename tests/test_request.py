import pytest

from scratchweb.method import Method
from scratchweb.request import ParseError, ParseErrorKind, Request


def test_parse_with_query_string():
    req = Request.from_bytes(b"GET /search?name=abc&sort=1 HTTP/1.1\r\n")
    assert req.method is Method.GET
    assert req.path == "/search"
    assert req.query_string is not None
    assert req.query_string.get("name") == "abc"
    assert req.query_string.get("sort") == "1"


def test_parse_without_query_string():
    req = Request.from_bytes(b"POST /hello HTTP/1.1\r\nHost: x\r\n\r\nbody")
    assert req.method is Method.POST
    assert req.path == "/hello"
    assert req.query_string is None


def test_trailing_zero_bytes_are_ignored():
    buf = b"GET / HTTP/1.1\r\n" + bytes(1024 - 16)
    req = Request.from_bytes(buf)
    assert req.path == "/"


def test_protocol_followed_by_space():
    req = Request.from_bytes(b"DELETE /item HTTP/1.1 ")
    assert req.method is Method.DELETE


@pytest.mark.parametrize(
    "buf, kind",
    [
        (b"\xff\xfe GET / HTTP/1.1\r\n", ParseErrorKind.INVALID_ENCODING),
        (b"GET", ParseErrorKind.INVALID_REQUEST),
        (b"GET /", ParseErrorKind.INVALID_REQUEST),
        (b"GET / HTTP/1.1", ParseErrorKind.INVALID_REQUEST),
        (b"GET / HTTP/1.0\r\n", ParseErrorKind.INVALID_PROTOCOL),
        (b"FOO / HTTP/1.1\r\n", ParseErrorKind.INVALID_METHOD),
        (b"FOO / HTTP/1.0\r\n", ParseErrorKind.INVALID_PROTOCOL),
    ],
)
def test_parse_errors(buf, kind):
    with pytest.raises(ParseError) as info:
        Request.from_bytes(buf)
    assert info.value.kind is kind


@pytest.mark.parametrize(
    "kind, message",
    [
        (ParseErrorKind.INVALID_REQUEST, "Invalid Request"),
        (ParseErrorKind.INVALID_ENCODING, "Invalid Encoding"),
        (ParseErrorKind.INVALID_PROTOCOL, "Invalid Protocol"),
        (ParseErrorKind.INVALID_METHOD, "Invalid Method"),
    ],
)
def test_error_messages(kind, message):
    assert str(ParseError(kind)) == message
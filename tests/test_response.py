import io

from scratchweb.response import Response
from scratchweb.status_code import StatusCode


class _FakeSocket:
    def __init__(self):
        self.sent = b""

    def sendall(self, data):
        self.sent += data


def test_to_bytes_with_body():
    resp = Response(StatusCode.OK, "<h1>Hello world</h1>")
    assert resp.to_bytes() == b"HTTP/1.1 200 OK\r\n\r\n<h1>Hello world</h1>"


def test_to_bytes_without_body():
    resp = Response(StatusCode.NOT_FOUND)
    assert resp.to_bytes() == b"HTTP/1.1 404 Not Found\r\n\r\n"


def test_bad_request_status_line():
    data = Response(StatusCode.BAD_REQUEST, None).to_bytes()
    assert data.startswith(b"HTTP/1.1 400 Bad Request\r\n")
    assert data.endswith(b"\r\n\r\n")


def test_send_to_binary_file():
    resp = Response(StatusCode.OK, "body")
    buf = io.BytesIO()
    resp.send(buf)
    assert buf.getvalue() == resp.to_bytes()


def test_send_to_socket_like():
    resp = Response(StatusCode.OK, "body")
    sock = _FakeSocket()
    resp.send(sock)
    assert sock.sent == resp.to_bytes()
    assert sock.sent.endswith(b"body")


def test_non_ascii_body_is_utf8():
    resp = Response(StatusCode.OK, "寿司")
    assert resp.to_bytes().endswith("寿司".encode("utf-8"))
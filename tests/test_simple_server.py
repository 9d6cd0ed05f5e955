import socket

import pytest

from scratchweb.simple_server import handle_connection, main, open_html, serve


@pytest.fixture
def pair():
    client, server_end = socket.socketpair()
    yield client, server_end
    client.close()
    server_end.close()


@pytest.fixture
def html_file(tmp_path):
    path = tmp_path / "hello.html"
    path.write_text("<p>hi</p>", encoding="utf-8")
    return path


def test_open_html_reads_contents(html_file):
    assert open_html(html_file) == "<p>hi</p>"


def test_open_html_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_html(tmp_path / "missing.html")


def test_get_root_is_answered_with_html(pair, html_file):
    client, server_end = pair
    client.sendall(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
    handle_connection(server_end, html_file)
    reply = client.recv(4096)
    assert reply == b"HTTP/1.1 200 OK\r\n\r\n" + open_html(html_file).encode("utf-8")
    assert reply == b"HTTP/1.1 200 OK\r\n\r\n<p>hi</p>"


def test_other_request_gets_no_reply(pair, html_file, capsys):
    client, server_end = pair
    client.sendall(b"GET /other HTTP/1.1\r\n\r\n")
    handle_connection(server_end, html_file)
    server_end.close()
    assert client.recv(4096) == b""
    assert "Not Get" in capsys.readouterr().out


def test_get_root_with_missing_html_raises(pair, tmp_path):
    client, server_end = pair
    client.sendall(b"GET / HTTP/1.1\r\n\r\n")
    with pytest.raises(FileNotFoundError):
        handle_connection(server_end, tmp_path / "absent.html")


def test_serve_rejects_malformed_address(html_file):
    with pytest.raises(ValueError):
        serve("localhost", html_file)


def test_main_rejects_malformed_address():
    with pytest.raises(ValueError):
        main(["--addr", "bad-address"])
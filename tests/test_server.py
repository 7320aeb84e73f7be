import socket

import pytest

from minilab.webserver.server import NOT_FOUND_RESPONSE, Server, build_response


def _read_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def _split(response):
    head, _, body = response.partition(b"\r\n\r\n")
    lines = head.decode("ascii").split("\r\n")
    headers = dict(line.split(": ", 1) for line in lines[1:])
    return lines[0], headers, body


def test_missing_document_gives_404(tmp_path):
    response = build_response(tmp_path / "missing.html")
    assert response == NOT_FOUND_RESPONSE
    status, headers, body = _split(response)
    assert status == "HTTP/1.1 404 Not Found"
    assert body == b"<html><body><h1>404 Not Found</h1></body></html>"
    assert int(headers["Content-Length"]) == len(body)


def test_existing_document_gives_200_with_body(tmp_path):
    page = tmp_path / "index.html"
    content = b"<html><body>hello</body></html>"
    page.write_bytes(content)
    status, headers, body = _split(build_response(page))
    assert status == "HTTP/1.1 200 OK"
    assert body == content
    assert int(headers["Content-Length"]) == len(content)
    assert headers["Content-Type"] == "text/html; charset=UTF-8"
    assert headers["Connection"] == "close"


def test_handle_client_sends_document(tmp_path):
    page = tmp_path / "index.html"
    page.write_bytes(b"<p>served</p>")
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.sendall(b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n")
        Server(0, page).handle_client(server_side)
        received = _read_all(client_side)
    assert received == build_response(page)
    assert server_side.fileno() == -1


def test_handle_client_sends_404_when_document_missing(tmp_path):
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.sendall(b"GET /anything HTTP/1.1\r\n\r\n")
        Server(0, tmp_path / "none.html").handle_client(server_side)
        received = _read_all(client_side)
    status, headers, body = _split(received)
    assert status == "HTTP/1.1 404 Not Found"
    assert body == b"<html><body><h1>404 Not Found</h1></body></html>"
    assert headers["Content-Length"] == "48"
    assert headers["Connection"] == "close"
    assert server_side.fileno() == -1


def test_handle_client_closes_on_empty_request(tmp_path):
    page = tmp_path / "index.html"
    page.write_bytes(b"x")
    server_side, client_side = socket.socketpair()
    with client_side:
        client_side.shutdown(socket.SHUT_WR)
        Server(0, page).handle_client(server_side)
        assert _read_all(client_side) == b""
    assert server_side.fileno() == -1


def test_start_raises_when_port_is_taken(tmp_path):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupier:
        occupier.bind(("", 0))
        occupier.listen(1)
        port = occupier.getsockname()[1]
        with pytest.raises(OSError):
            Server(port, tmp_path / "index.html").start()
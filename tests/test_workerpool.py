import socket

from gosyncdemos.pipeline import Pipe
from gosyncdemos.workerpool import build_response, handle_http_request, start_http_workers


def _read_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def test_build_response_serves_file(tmp_path):
    (tmp_path / "index.html").write_bytes(b"hello")
    request = b"GET /index.html HTTP/1.1\r\nHost: localhost\r\n\r\n"
    assert build_response(request, str(tmp_path)) == (
        b"HTTP/1.1/200 OK\r\nContent-Length: 5\r\n\r\nhello"
    )


def test_build_response_missing_file(tmp_path):
    request = b"GET /absent.html HTTP/1.1\r\n\r\n"
    assert build_response(request, str(tmp_path)) == (
        b"HTTP/1.1 404 Not Found\r\n\r\n<html>Not Found</html>"
    )


def test_build_response_malformed_request(tmp_path):
    assert build_response(b"POST / HTTP/1.0\r\n\r\n", str(tmp_path)) == (
        b"HTTP/1.1 500 Internal Server Error\r\n\r\n"
    )


def test_handle_http_request_answers_and_closes(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"abc")
    server, client = socket.socketpair()
    with client:
        client.sendall(b"GET a.txt HTTP/1.1\r\n\r\n")
        handle_http_request(server, str(tmp_path))
        assert _read_all(client).endswith(b"\r\n\r\nabc")
    assert server.fileno() == -1


def test_workers_serve_from_pipe_and_stop_on_close(tmp_path):
    connections = Pipe()
    workers = start_http_workers(2, connections, str(tmp_path))
    server, client = socket.socketpair()
    with client:
        client.sendall(b"garbage")
        connections.send(server)
        assert _read_all(client) == b"HTTP/1.1 500 Internal Server Error\r\n\r\n"
    connections.close()
    for worker in workers:
        worker.join(timeout=2)
    assert not any(worker.is_alive() for worker in workers)
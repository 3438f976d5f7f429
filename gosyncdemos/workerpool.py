"""A file-serving HTTP server with a fixed pool of worker threads."""

import os
import re
import socket
import threading

from .pipeline import Cancelled, Pipe

ASSET_DIR = "../asset"
_REQUEST = re.compile(rb"GET (.+) HTTP/1.1\r\n")
_NOT_FOUND = b"HTTP/1.1 404 Not Found\r\n\r\n<html>Not Found</html>"
_SERVER_ERROR = b"HTTP/1.1 500 Internal Server Error\r\n\r\n"
_BUSY = b"HTTP/1.1 429 Too Many Requests\r\n\r\n<html>Busy</html>\n"


def build_response(request, asset_dir=ASSET_DIR):
    """The response bytes for a raw ``request`` served from ``asset_dir``."""
    match = _REQUEST.search(request)
    if match is None:
        return _SERVER_ERROR
    path = f"{asset_dir}/{os.fsdecode(match.group(1))}"
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError:
        return _NOT_FOUND
    header = f"HTTP/1.1/200 OK\r\nContent-Length: {len(content)}\r\n\r\n"
    return header.encode("ascii") + content


def handle_http_request(conn, asset_dir=ASSET_DIR):
    """Read one request from ``conn``, answer it and close the connection."""
    with conn:
        request = conn.recv(1024)
        conn.sendall(build_response(request, asset_dir))


def start_http_workers(n, connections, asset_dir=ASSET_DIR):
    """Start ``n`` threads serving connections from the ``connections`` pipe."""

    def work():
        for conn in connections:
            try:
                handle_http_request(conn, asset_dir)
            except OSError:
                pass

    workers = [threading.Thread(target=work, daemon=True) for _ in range(n)]
    for worker in workers:
        worker.start()
    return workers


def worker_pool_main(host="localhost", port=8888):
    """Serve forever with three workers, turning away requests when all are busy."""
    connections = Pipe()
    start_http_workers(3, connections)
    immediately = threading.Event()
    immediately.set()
    with socket.create_server((host, port)) as server:
        while True:
            conn, _ = server.accept()
            try:
                connections.send(conn, immediately)
            except Cancelled:
                print("Server is busy")
                with conn:
                    try:
                        conn.sendall(_BUSY)
                    except OSError:
                        pass
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


class OneShotServer:
    """Accepts a single connection on 127.0.0.1 and hands it to handler"""

    def __init__(self, handler):
        self.handler = handler
        self.received = b""
        self.listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.listener.bind(("127.0.0.1", 0))
        self.listener.listen(1)
        self.port = self.listener.getsockname()[1]
        self.thread = threading.Thread(target=self._serve, daemon=True)
        self.thread.start()

    def _serve(self):
        conn, _ = self.listener.accept()
        try:
            self.handler(self, conn)
        finally:
            conn.close()
            self.listener.close()

    def read_request(self, conn, until=b"\r\n\r\n", size=None):
        """Read until the marker (or size bytes) shows up, keep it in received"""
        conn.settimeout(5)
        while True:
            if size is not None and len(self.received) >= size:
                break
            if size is None and until in self.received:
                break
            chunk = conn.recv(4096)
            if not chunk:
                break
            self.received += chunk
        return self.received


@pytest.fixture
def one_shot_server():
    servers = []

    def start(handler):
        server = OneShotServer(handler)
        servers.append(server)
        return server

    yield start
    for server in servers:
        server.thread.join(timeout=5)


class HelloHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"

    def do_GET(self):
        body = b"hello"
        self.send_response(200)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), HelloHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port

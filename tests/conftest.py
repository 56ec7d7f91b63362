import socket
import threading

import pytest


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        return sock.getsockname()[1]


@pytest.fixture
def free_port() -> int:
    return _free_port()


@pytest.fixture
def run_server():
    """Serve a werkzeug server on a background thread until the test ends."""
    servers = []

    def start(server):
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append((server, thread))
        return f'http://127.0.0.1:{server.server_port}'

    yield start

    for server, thread in servers:
        server.shutdown()
        thread.join(timeout=5)
        server.server_close()

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.converter_api import ConverterAPI
from app.services.download_probe import DownloadProbe

CONVERTER_BASE = "https://converter.example.com/api/button"


def upstream_response(payload=None, status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def upstream_reply():
    return upstream_response


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def upstream_get(monkeypatch):
    get = MagicMock()
    get.return_value = upstream_response(
        {"status": "ok", "url": "https://x/file.mp3", "title": "Song"}
    )
    monkeypatch.setattr("app.services.converter_api.requests.get", get)
    return get


class _ConverterHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.server.seen.append({"path": self.path, "cookie": self.headers.get("Cookie")})
        body = json.dumps(self.server.payload).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Set-Cookie", "caller=alice; Path=/")
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def upstream_server(monkeypatch):
    """Local conversion service recording the path and Cookie of every request."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)

    server = ThreadingHTTPServer(("127.0.0.1", 0), _ConverterHandler)
    server.seen = []
    server.payload = {"status": "ok", "url": "https://x/file.mp3", "title": "Song"}
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    server.base_url = f"http://127.0.0.1:{server.server_port}/api/button"
    yield server
    server.shutdown()
    server.server_close()


@pytest.fixture
def probe_requests():
    return []


@pytest.fixture
def probe_handler():
    """Replace in a test to change what the download location answers."""
    return lambda request: httpx.Response(
        200, headers={"Content-Type": "audio/mpeg", "Content-Length": "1234"}
    )


@pytest.fixture
def converter_api(upstream_get):
    return ConverterAPI(base_url=CONVERTER_BASE)


@pytest.fixture
def download_probe(probe_handler, probe_requests):
    def handler(request):
        probe_requests.append(request)
        return probe_handler(request)

    return DownloadProbe(transport=httpx.MockTransport(handler))


@pytest.fixture
def stubbed(monkeypatch, converter_api, download_probe):
    monkeypatch.setattr("app.api.convert._converter_api", converter_api)
    monkeypatch.setattr("app.api.convert._download_probe", download_probe)

"""Shared fixtures: a temporary document root and a helper that runs one request through the handler."""

import io
from pathlib import Path
from typing import Callable, Dict, Tuple

import pytest

from static_server.config import ServerConfig
from static_server.connection import serve_request

ParsedResponse = Tuple[str, Dict[str, str], bytes]


def split_response(raw: bytes) -> ParsedResponse:
    head, body = raw.split(b"\r\n\r\n", 1)
    lines = head.decode("utf-8").split("\r\n")
    headers = {}
    for line in lines[1:]:
        key, value = line.split(": ", 1)
        headers[key] = value
    return lines[0], headers, body


@pytest.fixture
def parse_response() -> Callable[[bytes], ParsedResponse]:
    return split_response


@pytest.fixture
def web_root(tmp_path: Path) -> Path:
    root = tmp_path / "www"
    root.mkdir()
    return root


@pytest.fixture
def config(web_root: Path) -> ServerConfig:
    return ServerConfig.create(web_root=str(web_root))


@pytest.fixture
def send_request(config: ServerConfig) -> Callable[[bytes], bytes]:
    def _send(raw_request: bytes) -> bytes:
        rfile = io.BytesIO(raw_request)
        wfile = io.BytesIO()
        serve_request(rfile, wfile, config)
        return wfile.getvalue()

    return _send

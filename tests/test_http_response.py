import io

import pytest

from static_server.http_response import NotFoundSource, build_response, choose_not_found_source, write_response


class BrokenStream(io.RawIOBase):
    def __init__(self, fail_on_call: int) -> None:
        self.calls = 0
        self.fail_on_call = fail_on_call
        self.written = b""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise BrokenPipeError("peer went away")
        self.written += bytes(data)
        return len(data)


def test_build_response_framing() -> None:
    assert build_response("200 OK", "text/html; charset=utf-8", "<h1>Hi</h1>") == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Length: 11\r\n"
        b"Content-Type: text/html; charset=utf-8\r\n"
        b"Connection: close\r\n"
        b"\r\n"
        b"<h1>Hi</h1>"
    )


def test_content_length_counts_encoded_bytes() -> None:
    response = build_response("200 OK", "text/html; charset=utf-8", "café")
    assert b"Content-Length: 5\r\n" in response
    assert response.endswith("café".encode("utf-8"))


def test_binary_payload_is_written_unchanged() -> None:
    payload = bytes(range(10))
    response = build_response("200 OK", "image/png", payload)
    assert b"Content-Length: 10\r\n" in response
    assert response.endswith(b"\r\n\r\n" + payload)


def test_empty_payload() -> None:
    assert build_response("200 OK", "text/css; charset=utf-8", b"").endswith(b"Content-Length: 0\r\nContent-Type: text/css; charset=utf-8\r\nConnection: close\r\n\r\n")


def test_write_response_matches_build_response() -> None:
    wfile = io.BytesIO()
    assert write_response(wfile, "404 NOT FOUND", "text/plain", "404 Not Found")
    assert wfile.getvalue() == build_response("404 NOT FOUND", "text/plain", "404 Not Found")


@pytest.mark.parametrize("fail_on_call", [1, 2])
def test_write_failure_is_reported_not_raised(fail_on_call: int, capsys) -> None:
    stream = BrokenStream(fail_on_call)
    assert write_response(stream, "200 OK", "image/png", b"abc") is False
    assert stream.calls == fail_on_call
    assert "peer went away" in capsys.readouterr().err


def test_not_found_source_for_binary_failure() -> None:
    assert choose_not_found_source(True, "logo.png") is NotFoundSource.PLAIN_TEXT
    assert choose_not_found_source(True, "404.html") is NotFoundSource.PLAIN_TEXT


def test_not_found_source_for_text_failure() -> None:
    assert choose_not_found_source(False, "index.html") is NotFoundSource.PAGE
    assert choose_not_found_source(False, "404.html") is NotFoundSource.INLINE_HTML

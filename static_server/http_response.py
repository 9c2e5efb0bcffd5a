"""
Responsibility: frame status line, headers and body into bytes and write them to the client.

Every response carries Content-Length, Content-Type and Connection: close, nothing else.
The 404 fallbacks used when a file can't be read live here too.
"""
import sys
from enum import Enum
from typing import BinaryIO, Final, Union

from static_server.config import HTTP_VERSION, NOT_FOUND_FILE

PLAIN_TEXT_CONTENT_TYPE: Final[str] = "text/plain"
PLAIN_TEXT_NOT_FOUND_BODY: Final[str] = "404 Not Found"

# Sent when the requested file and 404.html both failed to read
INLINE_NOT_FOUND_BODY: Final[str] = (
    "<html><head><title>404 Not Found</title></head><body><h1>404 Not Found</h1>"
    "<p>The requested resource was not found, and the 404.html error page is also missing or unreadable.</p>"
    "</body></html>"
)
# Sent when 404.html was the target and failed to read
INLINE_NOT_FOUND_PAGE_BODY: Final[str] = (
    "<html><head><title>404 Not Found</title></head><body><h1>404 Not Found</h1>"
    "<p>The 404.html error page is missing or unreadable.</p>"
    "</body></html>"
)

class NotFoundSource(Enum):
    """
    Where the body of a fallback 404 comes from after a file read failed
    """
    PAGE = "page"                # the 404.html file in the web root
    INLINE_HTML = "inline_html"  # hardcoded HTML page
    PLAIN_TEXT = "plain_text"    # hardcoded "404 Not Found", text/plain

def choose_not_found_source(is_binary: bool, failed_path: str) -> NotFoundSource:
    if is_binary:
        # Binary read failures never go through 404.html
        return NotFoundSource.PLAIN_TEXT

    if failed_path == NOT_FOUND_FILE:
        return NotFoundSource.INLINE_HTML

    return NotFoundSource.PAGE

def build_headers(status_line: str, content_type: str, content_length: int) -> bytes:
    return (
        f"{HTTP_VERSION} {status_line}\r\n"
        f"Content-Length: {content_length}\r\n"
        f"Content-Type: {content_type}\r\n"
        "Connection: close\r\n"
        "\r\n"
    ).encode("utf-8")

def build_response(status_line: str, content_type: str, payload: Union[str, bytes]) -> bytes:
    body = payload.encode("utf-8") if isinstance(payload, str) else payload

    # Content-Length is the encoded size, not the number of characters
    return build_headers(status_line, content_type, len(body)) + body

def write_response(wfile: BinaryIO, status_line: str, content_type: str, payload: Union[str, bytes]) -> bool:
    """
    Writes one framed response. Failures are printed and not retried; returns False if anything failed.
    """
    body = payload.encode("utf-8") if isinstance(payload, str) else payload

    try:
        wfile.write(build_headers(status_line, content_type, len(body)))
    except OSError as e:
        print(f"Error writing headers: {e}", file=sys.stderr)
        return False

    try:
        wfile.write(body)
    except OSError as e:
        print(f"Error writing body: {e}", file=sys.stderr)
        return False

    return True

import os
import socket
import sys
from typing import BinaryIO, Optional

from static_server.config import NOT_FOUND_FILE, ServerConfig
from static_server.content_types import HTML_CONTENT_TYPE
from static_server.http_request import parse_request_line
from static_server.http_response import (
    INLINE_NOT_FOUND_BODY,
    INLINE_NOT_FOUND_PAGE_BODY,
    PLAIN_TEXT_CONTENT_TYPE,
    PLAIN_TEXT_NOT_FOUND_BODY,
    NotFoundSource,
    choose_not_found_source,
    write_response,
)
from static_server.path_resolver import STATUS_NOT_FOUND, ResolvedTarget, resolve_path

def read_request_line(rfile: BinaryIO) -> Optional[str]:
    """
    Reads the first line of the request. Returns None when there is nothing usable to answer.
    """
    try:
        raw_line = rfile.readline()
    except OSError as e:
        print(f"Error reading request line: {e}", file=sys.stderr)
        return None

    if raw_line == b"":
        print("Received an empty request.", file=sys.stderr)
        return None

    try:
        request_line = raw_line.decode("utf-8")
    except UnicodeDecodeError as e:
        print(f"Error reading request line: {e}", file=sys.stderr)
        return None

    # Drop the line terminator, LF or CRLF
    if request_line.endswith("\n"):
        request_line = request_line[:-1]
    if request_line.endswith("\r"):
        request_line = request_line[:-1]

    return request_line

def read_binary_file(web_root: str, file_path: str) -> bytes:
    with open(os.path.join(web_root, file_path), "rb") as f:
        return f.read()

def read_text_file(web_root: str, file_path: str) -> str:
    # newline="" keeps CRLF as-is so the body matches the file byte for byte
    with open(os.path.join(web_root, file_path), "r", encoding="utf-8", newline="") as f:
        return f.read()

def not_found_response(source: NotFoundSource, web_root: str) -> tuple[str, str, str]:
    """
    Returns (status line, content type, body) for a fallback 404.
    """
    if source is NotFoundSource.PLAIN_TEXT:
        return STATUS_NOT_FOUND, PLAIN_TEXT_CONTENT_TYPE, PLAIN_TEXT_NOT_FOUND_BODY

    if source is NotFoundSource.INLINE_HTML:
        print(f"'{NOT_FOUND_FILE}' (targeted as error page) failed to read. Sending hardcoded 404.", file=sys.stderr)
        return STATUS_NOT_FOUND, HTML_CONTENT_TYPE, INLINE_NOT_FOUND_PAGE_BODY

    try:
        body = read_text_file(web_root, NOT_FOUND_FILE)
        print(f"Successfully read fallback '{NOT_FOUND_FILE}'.")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading fallback '{NOT_FOUND_FILE}': {e}. Sending hardcoded 404.", file=sys.stderr)
        body = INLINE_NOT_FOUND_BODY

    return STATUS_NOT_FOUND, HTML_CONTENT_TYPE, body

def serve_binary(wfile: BinaryIO, target: ResolvedTarget, web_root: str) -> None:
    try:
        contents = read_binary_file(web_root, target.file_path)
    except OSError as e:
        print(f"Error reading binary file '{target.file_path}': {e}. Sending 404.", file=sys.stderr)
        status_line, content_type, body = not_found_response(choose_not_found_source(True, target.file_path), web_root)
        write_response(wfile, status_line, content_type, body)
        return

    if write_response(wfile, target.status_line, target.content_type, contents):
        print(f"Successfully sent binary file '{target.file_path}'.")

def serve_text(wfile: BinaryIO, target: ResolvedTarget, web_root: str) -> None:
    # Covers HTML, CSS, JS and 404.html itself
    try:
        contents = read_text_file(web_root, target.file_path)
        print(f"Successfully read text file '{target.file_path}'.")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading text file '{target.file_path}': {e}.", file=sys.stderr)
        status_line, content_type, body = not_found_response(choose_not_found_source(False, target.file_path), web_root)
        write_response(wfile, status_line, content_type, body)
        return

    write_response(wfile, target.status_line, target.content_type, contents)

def serve_request(rfile: BinaryIO, wfile: BinaryIO, config: ServerConfig) -> None:
    """
    One request/response cycle: read the request line, resolve it to a file and write the response.

    Nothing is written if the request line can't be read.
    """
    request_line = read_request_line(rfile)
    if request_line is None:
        return

    print(f"Request: {request_line}")

    request = parse_request_line(request_line)
    target = resolve_path(request.path, config.web_root)

    if target.is_binary:
        serve_binary(wfile, target, config.web_root)
    else:
        serve_text(wfile, target, config.web_root)

    try:
        wfile.flush()
    except OSError as e:
        print(f"Failed to flush stream: {e}", file=sys.stderr)

    print(f"Response processing complete for '{request.path}'")

def handle_connection(client_socket: socket.socket, client_address: tuple[str, int], config: ServerConfig) -> None:
    print(f"\nConnection from {client_address}")

    try:
        with client_socket.makefile("rb") as rfile, client_socket.makefile("wb") as wfile:
            serve_request(rfile, wfile, config)
    except Exception as e:
        print(f"Error handling request: {e}", file=sys.stderr)
    finally:
        client_socket.close()

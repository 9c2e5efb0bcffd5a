import os
import sys
from dataclasses import dataclass
from typing import Final

from static_server.config import INDEX_FILE, NOT_FOUND_FILE
from static_server.content_types import HTML_CONTENT_TYPE, resolve_content_type

STATUS_OK: Final[str] = "200 OK"
STATUS_NOT_FOUND: Final[str] = "404 NOT FOUND"

@dataclass(frozen=True)
class ResolvedTarget:
    """
    What to send for one request: the status line, the file to read (relative to the web root),
    its content type and whether it is read as raw bytes.
    """
    status_line: str
    file_path: str
    content_type: str
    is_binary: bool

INDEX_TARGET: Final[ResolvedTarget] = ResolvedTarget(STATUS_OK, INDEX_FILE, HTML_CONTENT_TYPE, False)
NOT_FOUND_TARGET: Final[ResolvedTarget] = ResolvedTarget(STATUS_NOT_FOUND, NOT_FOUND_FILE, HTML_CONTENT_TYPE, False)

def is_within_root(relative_path: str, web_root: str) -> bool:
    # Absolute paths ("//etc/passwd"), ".." segments and symlinks leading out all show up here as a path outside web_root
    try:
        web_root_abs = os.path.realpath(web_root)
        file_path = os.path.realpath(os.path.join(web_root_abs, relative_path))
        return os.path.commonpath([file_path, web_root_abs]) == web_root_abs
    except ValueError:
        # Embedded null byte, or different drives on Windows
        return False

def resolve_path(request_path: str, web_root: str) -> ResolvedTarget:
    if request_path == "/":
        # index.html is not checked here, a missing index shows up later as a read failure
        return INDEX_TARGET

    # Only one leading slash is removed
    relative_path = request_path[1:] if request_path.startswith("/") else request_path

    if not is_within_root(relative_path, web_root):
        print(f"Rejected '{relative_path}': resolves outside of {web_root}", file=sys.stderr)
        print(f"File '{relative_path}' not found. Targeting {NOT_FOUND_FILE}.")
        return NOT_FOUND_TARGET

    # Existence only, a directory or an unreadable file still counts
    if not os.path.exists(os.path.join(web_root, relative_path)):
        print(f"File '{relative_path}' not found. Targeting {NOT_FOUND_FILE}.")
        return NOT_FOUND_TARGET

    content_type, is_binary = resolve_content_type(relative_path)
    return ResolvedTarget(STATUS_OK, relative_path, content_type, is_binary)

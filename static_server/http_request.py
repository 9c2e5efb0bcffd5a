"""
Responsibility: turn the request line into a Request with fields method and path.

Only the request line is looked at; headers and body are never read.
"""
from dataclasses import dataclass
from typing import Final, Optional

DEFAULT_PATH: Final[str] = "/"

@dataclass
class Request:
    method: Optional[str]
    path: str

def parse_request_line(request_line: str) -> Request:
    # Whitespace separated: method, path, version. Anything missing is tolerated.
    parts = request_line.split()
    method = parts[0] if len(parts) > 0 else None
    path = parts[1] if len(parts) > 1 else DEFAULT_PATH

    if not path.startswith("/"):
        path = "/" + path

    return Request(method=method, path=path)

from typing import Final, List, Tuple

HTML_CONTENT_TYPE: Final[str] = "text/html; charset=utf-8"
DEFAULT_CONTENT_TYPE: Final[str] = "application/octet-stream"

# (suffix, content type, binary) checked in order, first match wins
CONTENT_TYPES: Final[List[Tuple[str, str, bool]]] = [
    (".css", "text/css; charset=utf-8", False),
    (".html", HTML_CONTENT_TYPE, False),
    (".js", "application/javascript; charset=utf-8", False),
    (".jpg", "image/jpeg", True),
    (".jpeg", "image/jpeg", True),
    (".png", "image/png", True),
    (".ico", "image/x-icon", True),
    (".heic", "image/heic", True),
]

def resolve_content_type(path: str) -> tuple[str, bool]:
    """
    Returns the content type for a path and whether the file should be read as raw bytes.

    Matching is a case-sensitive suffix check, so "logo.PNG" is served as application/octet-stream.
    """
    for suffix, content_type, is_binary in CONTENT_TYPES:
        if path.endswith(suffix):
            return content_type, is_binary

    # Unknown types are assumed to be binary
    return DEFAULT_CONTENT_TYPE, True

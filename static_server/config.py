import os
from dataclasses import dataclass, field
from typing import Final, Optional

HTTP_VERSION: Final[str] = "HTTP/1.1"
HOST: Final[str] = "127.0.0.1"  # localhost
PORT: Final[int] = 7878
WEB_ROOT: Final[str] = "."      # Current directory
INDEX_FILE: Final[str] = "index.html"
NOT_FOUND_FILE: Final[str] = "404.html"
LISTEN_BACKLOG: Final[int] = 5

@dataclass(frozen=True)
class ServerConfig:
    """
    Process-wide settings, built once at startup and passed to the listener
    and every connection handler.
    """
    host: str = HOST
    port: int = PORT
    # Resolved against the cwd when the config is built, not when this module is imported
    web_root: str = field(default_factory=lambda: os.path.abspath(WEB_ROOT))
    threaded: bool = False

    @classmethod
    def create(cls, host: str = HOST, port: int = PORT, web_root: Optional[str] = None, threaded: bool = False) -> "ServerConfig":
        # web_root is resolved here so a later chdir can't move the document root
        return cls(
            host=host,
            port=port,
            web_root=os.path.abspath(web_root if web_root is not None else WEB_ROOT),
            threaded=threaded
        )

from static_server.config import ServerConfig
from static_server.connection import handle_connection, serve_request
from static_server.content_types import resolve_content_type
from static_server.http_response import NotFoundSource, build_response, choose_not_found_source, write_response
from static_server.path_resolver import ResolvedTarget, resolve_path

__all__ = [
    "NotFoundSource",
    "ResolvedTarget",
    "ServerConfig",
    "build_response",
    "choose_not_found_source",
    "handle_connection",
    "resolve_content_type",
    "resolve_path",
    "serve_request",
    "write_response",
]

import argparse
import socket
import sys
import threading
from typing import List, Optional

from static_server.config import HOST, LISTEN_BACKLOG, PORT, WEB_ROOT, ServerConfig
from static_server.connection import handle_connection

def serve(server_socket: socket.socket, config: ServerConfig, max_connections: Optional[int] = None) -> None:
    """
    Accept loop on an already listening socket. Runs until interrupted, or until
    max_connections connections have been accepted when it is given.
    """
    accepted = 0

    while max_connections is None or accepted < max_connections:
        try:
            client_socket, client_address = server_socket.accept()
        except OSError as e:
            if server_socket.fileno() == -1:
                # Listening socket was closed
                break
            print(f"Failed to establish a connection: {e}", file=sys.stderr)
            continue

        accepted += 1

        if config.threaded:
            # Threads end on their own once the response is sent, so they are never joined
            incoming_thread = threading.Thread(target=handle_connection, args=(client_socket, client_address, config))
            incoming_thread.start()
        else:
            handle_connection(client_socket, client_address, config)

def run_server(config: ServerConfig) -> None:
    # Create a TCP socket
    server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

    try:
        server_socket.bind((config.host, config.port))
        server_socket.listen(LISTEN_BACKLOG)

        print(f"Listening on {config.host}:{config.port}")
        print(f"Serving files from {config.web_root}")

        serve(server_socket, config)
    except KeyboardInterrupt:
        print("\n\nShutting down server...")
    finally:
        server_socket.close()

def parse_args(argv: Optional[List[str]] = None) -> ServerConfig:
    parser = argparse.ArgumentParser(description="Serve static files over HTTP/1.1, one request per connection.")
    parser.add_argument("--host", default=HOST, help=f"Address to bind (default: {HOST})")
    parser.add_argument("--port", type=int, default=PORT, help=f"Port to listen on (default: {PORT})")
    parser.add_argument("--root", default=WEB_ROOT, help="Document root (default: current directory)")
    parser.add_argument("--threaded", action="store_true", help="Handle each connection on its own thread")
    args = parser.parse_args(argv)

    return ServerConfig.create(host=args.host, port=args.port, web_root=args.root, threaded=args.threaded)

def main(argv: Optional[List[str]] = None) -> None:
    run_server(parse_args(argv))

if __name__ == "__main__":
    main()

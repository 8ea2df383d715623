"""A line echo server that greets its client, and a matching client."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Callable, Iterable, Sequence

PORT = 8080
BUFFER_SIZE = 1024
GREETING = "Hello from server!"
BACKLOG = 3


def _log_line(message: str) -> None:
    sys.stdout.write(message if message.endswith("\n") else message + "\n")


def create_server(host: str = "0.0.0.0", port: int = PORT) -> socket.socket:
    """Return a listening TCP socket bound to ``host`` and ``port``."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
    except OSError:
        server.close()
        raise
    return server


def serve_client(
    server: socket.socket,
    greeting: str = GREETING,
    log: Callable[[str], object] = _log_line,
) -> int:
    """Accept one client, greet it and echo what it sends until it leaves.

    Returns the number of chunks echoed back.
    """
    client, _ = server.accept()
    echoed = 0
    with client:
        log("Client connected!")
        client.sendall(greeting.encode("utf-8"))
        log("Greeting message sent")
        while True:
            data = client.recv(BUFFER_SIZE)
            if not data:
                log("Client disconnected")
                break
            log("Client: " + data.decode("utf-8", errors="replace"))
            client.sendall(data)
            echoed += 1
    return echoed


def _receive(sock: socket.socket, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = sock.recv(min(remaining, BUFFER_SIZE))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _stdin_lines() -> Iterable[str]:
    return iter(sys.stdin.readline, "")


def run_client(
    host: str = "127.0.0.1",
    port: int = PORT,
    lines: Iterable[str] | None = None,
    write: Callable[[str], object] = sys.stdout.write,
) -> list[str]:
    """Connect, show the greeting, then send each line and show its echo.

    Stops at the end of ``lines`` or at a line starting with ``quit``.
    Returns the echoed replies in order.
    """
    replies: list[str] = []
    with socket.create_connection((host, port)) as sock:
        write("Connected to server!\n")
        greeting = sock.recv(BUFFER_SIZE).decode("utf-8", errors="replace")
        write(f"Server: {greeting}\n\n")
        write("Type messages (type 'quit' to exit):\n")
        for line in _stdin_lines() if lines is None else lines:
            write("You: ")
            if line.startswith("quit"):
                break
            payload = line.encode("utf-8")
            if not payload:
                continue
            sock.sendall(payload)
            reply = _receive(sock, len(payload)).decode("utf-8", errors="replace")
            if not reply:
                break
            write(f"Server: {reply}")
            replies.append(reply)
        write("Closing connection...\n")
    return replies


def _parser(prog: str, default_host: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=PORT)
    return parser


def server_main(argv: Sequence[str] | None = None) -> int:
    """Serve a single client on the given port."""
    args = _parser("echo-server", "0.0.0.0").parse_args(argv)
    sys.stdout.write("=== Simple TCP Echo Server ===\n")
    try:
        with create_server(args.host, args.port) as server:
            sys.stdout.write(f"Server listening on port {args.port}...\n")
            sys.stdout.write("Waiting for client connection...\n")
            serve_client(server)
    except OSError as exc:
        sys.stderr.write(f"Server failed: {exc}\n")
        return 1
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Talk to an echo server, reading lines from standard input."""
    args = _parser("echo-client", "127.0.0.1").parse_args(argv)
    sys.stdout.write("=== Simple TCP Client ===\n")
    try:
        run_client(args.host, args.port)
    except OSError:
        sys.stdout.write("Connection Failed\n")
        return 1
    return 0
"""Tiny threaded HTTP server that answers every request with one document."""

from __future__ import annotations

import argparse
import logging
import os
import socket
import threading
from collections.abc import Sequence
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_PORT = 8080
DEFAULT_DOCUMENT = "www/index.html"
BUFFER_SIZE = 4096
BACKLOG = 5

NOT_FOUND_RESPONSE = (
    b"HTTP/1.1 404 Not Found\r\n"
    b"Content-Type: text/html; charset=UTF-8\r\n"
    b"Content-Length: 48\r\n"
    b"Connection: close\r\n"
    b"\r\n"
    b"<html><body><h1>404 Not Found</h1></body></html>"
)


def build_response(path: PathLike) -> bytes:
    """Full HTTP response serving the file at ``path``, or a 404 if unreadable."""
    try:
        with open(path, "rb") as handle:
            body = handle.read()
    except OSError:
        return NOT_FOUND_RESPONSE
    headers = (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/html; charset=UTF-8\r\n"
        f"Content-Length: {len(body)}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return headers.encode("ascii") + body


class Server:
    """Listens on a TCP port and serves ``document`` to every client."""

    def __init__(self, port: int = DEFAULT_PORT, document: PathLike = DEFAULT_DOCUMENT) -> None:
        self.port = port
        self.document = document

    def start(self) -> None:
        """Bind, listen and serve clients, one thread each, forever."""
        logger.info("[*] Starting server on port %d...", self.port)
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
            try:
                listener.bind(("", self.port))
            except OSError as exc:
                logger.error("[-] Bind failed. Error: %s", exc)
                raise
            listener.listen(BACKLOG)
            logger.info("[*] Waiting for incoming connections...")

            while True:
                try:
                    conn, _ = listener.accept()
                except OSError as exc:
                    logger.error("[-] Accept failed. Error: %s", exc)
                    continue
                logger.info("[+] Connection accepted! Launching thread...")
                threading.Thread(target=self.handle_client, args=(conn,), daemon=True).start()

    def handle_client(self, conn: socket.socket) -> None:
        """Read one request from ``conn``, send the document and close it."""
        with conn:
            try:
                request = conn.recv(BUFFER_SIZE - 1)
            except OSError:
                request = b""
            if not request:
                logger.error("[-] Failed to receive data or client disconnected.")
                return

            logger.info("[*] Request received:\n%s", request.decode("utf-8", errors="replace"))
            response = build_response(self.document)
            try:
                conn.sendall(response)
            except OSError as exc:
                logger.error("[-] Send failed. Error: %s", exc)
            try:
                conn.shutdown(socket.SHUT_WR)
            except OSError:
                pass

            if response == NOT_FOUND_RESPONSE:
                logger.info("[-] 404 Not Found sent.")
            else:
                logger.info("[*] Client served and connection closed.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="minilab-webserver",
        description="Serve a single HTML document over HTTP.",
    )
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="TCP port to listen on")
    parser.add_argument("--document", default=DEFAULT_DOCUMENT, help="file served to every client")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        Server(args.port, args.document).start()
    except KeyboardInterrupt:
        return 0
    except OSError:
        return 1
    return 0
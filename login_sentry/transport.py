"""
Minimal HTTP/1.1 transport for downloading logs.

Issues a single fixed-shape GET request over a plain TCP connection and
exposes the response body line by line. There is no TLS, redirect or
chunked-encoding support; the server is expected to send a plain body and
close the connection.
"""

import logging
import socket
from typing import IO, Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class FetchError(ConnectionError):
    """Raised when the log server cannot be reached or the request cannot be sent."""


def build_request(host: str, path: str) -> bytes:
    """Build the GET request sent to the log server."""
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: Close\r\n"
        "\r\n"
    ).encode("ascii")


def _strip_eol(raw: bytes) -> bytes:
    return raw.rstrip(b"\r\n")


class ResponseBody:
    """
    Line iterator over an HTTP response body.

    Owns the underlying socket; closing the body (or leaving its ``with``
    block) releases the connection. The body can only be consumed once.
    """

    def __init__(self, sock: socket.socket, stream: IO[bytes], status_line: str = ""):
        self._sock = sock
        self._stream = stream
        self.status_line = status_line
        self.closed = False

    def __iter__(self) -> Iterator[str]:
        for raw in self._stream:
            yield _strip_eol(raw).decode("utf-8", errors="replace")

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self._stream.close()
        finally:
            self._sock.close()
        logger.debug("Connection closed")

    def __enter__(self) -> "ResponseBody":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LogFetcher:
    """
    Downloads a log resource with a single HTTP GET.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT):
        """
        Initialize the fetcher.

        Args:
            timeout: connect and read timeout in seconds (None blocks forever)
        """
        self.timeout = timeout

    def fetch(self, host: str, port: str, path: str) -> ResponseBody:
        """
        Request ``path`` from ``host:port`` and skip the response headers.

        Args:
            host: web-server host name
            port: web-server port, e.g. "80"
            path: path of the log resource, e.g. "/logs/auth.log"

        Returns:
            ResponseBody: the remaining response, positioned at the first body line

        Raises:
            FetchError: if the connection cannot be established or the request fails
        """
        logger.info(f"Connecting to {host}:{port}")
        try:
            sock = socket.create_connection((host, port), timeout=self.timeout)
        except OSError as e:
            raise FetchError(f"Unable to connect to {host}:{port}: {e}") from e

        stream = sock.makefile("rb")
        try:
            sock.sendall(build_request(host, path))
            status_line = self._skip_headers(stream)
        except OSError as e:
            stream.close()
            sock.close()
            raise FetchError(f"Request to {host}:{port}{path} failed: {e}") from e

        return ResponseBody(sock, stream, status_line)

    def _skip_headers(self, stream: IO[bytes]) -> str:
        """
        Consume the status line and headers up to the blank separator line.

        Returns:
            str: the status line ("" if the server sent nothing)
        """
        status_line = _strip_eol(stream.readline()).decode("latin-1")
        if not status_line:
            logger.warning("Server closed the connection without a response")
            return status_line

        logger.info(f"Response: {status_line}")
        parts = status_line.split(None, 2)
        if len(parts) < 2 or not parts[1].startswith("2"):
            logger.warning(f"Unexpected response status: {status_line}")

        while True:
            header = stream.readline()
            if not header:
                logger.warning("Response ended before the end of the headers")
                break
            if not _strip_eol(header):
                break
            logger.debug(f"Skipping header: {_strip_eol(header).decode('latin-1')}")

        return status_line

"""Minimal IPv4 TCP server and client."""

from __future__ import annotations

import socket

from .log import log_info
from .status import Status, StatusError

RECEIVE_TIMEOUT = 1.0


def _check_address(address: str) -> None:
    try:
        socket.inet_pton(socket.AF_INET, address)
    except OSError as exc:
        raise StatusError(Status.INVALID_ADDRESS, f"invalid address: {address!r}") from exc


class TCPServer:
    """Listens on one address and accepts connections with a receive timeout."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None

    def init(self, address: str, port: int) -> None:
        """Bind and listen; raise StatusError naming the step that failed."""
        log_info("starting tcp server...")
        _check_address(address)
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise StatusError(Status.SOCKET_CREATE_FAILED, str(exc)) from exc
        try:
            sock.bind((address, port))
        except OSError as exc:
            sock.close()
            raise StatusError(Status.SOCKET_BIND_FAILED, str(exc)) from exc
        try:
            sock.listen(1)
        except OSError as exc:
            sock.close()
            raise StatusError(Status.SOCKET_LISTEN_FAILED, str(exc)) from exc
        self._sock = sock
        log_info("tcp server started successfully")

    def accept(self) -> socket.socket:
        """Wait for a connection and return it, with the receive timeout applied."""
        if self._sock is None:
            raise RuntimeError("server not initialised")
        conn, _ = self._sock.accept()
        conn.settimeout(RECEIVE_TIMEOUT)
        return conn

    def receive(self, conn: socket.socket, size: int, flags: int = 0) -> bytes:
        """Receive up to ``size`` bytes; b"" means the peer closed.

        Raises TimeoutError if nothing arrives within the receive timeout.
        """
        return conn.recv(size, flags)

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None


class TCPClient:
    """Connects to a server and sends data."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None

    def connect(self, address: str, port: int) -> None:
        """Connect; raise StatusError naming the step that failed."""
        _check_address(address)
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise StatusError(Status.SOCKET_CREATE_FAILED, str(exc)) from exc
        try:
            sock.connect((address, port))
        except OSError as exc:
            sock.close()
            raise StatusError(Status.SOCKET_CONNECT_FAILED, str(exc)) from exc
        self._sock = sock

    def send(self, data: bytes, flags: int = 0) -> int:
        """Send all of ``data`` and return its length."""
        if self._sock is None:
            raise RuntimeError("socket not connected")
        self._sock.sendall(data, flags)
        return len(data)

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None
"""Status codes reported by the TCP layer and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Outcome codes of socket set-up operations."""

    OK = 0
    WSA_STARTUP_FAILED = -1
    WSA_CLEANUP_FAILED = -2
    SOCKET_CREATE_FAILED = -3
    INVALID_ADDRESS = -4
    SOCKET_BIND_FAILED = -5
    SOCKET_LISTEN_FAILED = -6
    SOCKET_CONNECT_FAILED = -7


class StatusError(RuntimeError):
    """Raised when a socket operation fails; ``status`` tells which step."""

    def __init__(self, status: Status, message: str | None = None) -> None:
        self.status = Status(status)
        if message is None:
            message = self.status.name.lower().replace("_", " ")
        self.message = message
        super().__init__(message)
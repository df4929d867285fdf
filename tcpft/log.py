"""A process-wide, thread-safe logger writing to standard output."""

from __future__ import annotations

import inspect
import os
import sys
import threading
from typing import Any, TextIO


class Logger:
    """Concatenates its arguments and writes them to a stream under a lock."""

    _instance: "Logger | None" = None
    _instance_lock = threading.Lock()

    def __init__(self, stream: TextIO | None = None, enabled: bool = True) -> None:
        self.stream = stream
        self.enabled = enabled
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "Logger":
        """Return the shared logger; enabled when TCPFT_LOG_ENABLE is set."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls(enabled=bool(os.environ.get("TCPFT_LOG_ENABLE")))
            return cls._instance

    def log(self, *args: Any) -> None:
        """Write every argument, converted to text, with no separators."""
        if not self.enabled:
            return
        text = "".join(str(arg) for arg in args)
        with self._lock:
            stream = self.stream if self.stream is not None else sys.stdout
            stream.write(text)
            stream.flush()


def _emit(tag: str, args: tuple) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    name = caller.f_code.co_name if caller is not None else "?"
    del frame, caller
    Logger.instance().log(f"[{name}][{tag}]: ", *args, "\n")


def log_info(*args: Any) -> None:
    _emit("INF", args)


def log_warning(*args: Any) -> None:
    _emit("WRN", args)


def log_critical(*args: Any) -> None:
    _emit("CRT", args)


def log_fatal(*args: Any) -> None:
    _emit("FTL", args)
"""Binary whole-file reader and writer."""

from __future__ import annotations

from typing import BinaryIO


class FileReader:
    """Reads a file's whole content in binary mode."""

    def __init__(self) -> None:
        self._file: BinaryIO | None = None
        self._eof = False

    def open(self, path: str) -> None:
        """Open ``path`` for reading; raise RuntimeError if it cannot be opened."""
        try:
            self._file = open(path, "rb")
        except OSError as exc:
            raise RuntimeError("file not open") from exc
        self._eof = False

    def read(self) -> bytes:
        """Return everything from the current position to the end."""
        if self._file is None:
            raise RuntimeError("file not open")
        data = self._file.read()
        self._eof = True
        return data

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def at_eof(self) -> bool:
        """True once the end of the file has been read."""
        return self._eof

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileWriter:
    """Writes bytes to a file in binary mode, truncating it on open."""

    def __init__(self) -> None:
        self._file: BinaryIO | None = None

    def open(self, path: str) -> None:
        """Open ``path`` for writing; raise RuntimeError if it cannot be opened."""
        try:
            self._file = open(path, "wb")
        except OSError as exc:
            raise RuntimeError("file not open") from exc

    def write(self, data: bytes | bytearray | int) -> None:
        """Write a bytes-like object or a single byte value."""
        if self._file is None:
            raise RuntimeError("file not open")
        if isinstance(data, int):
            data = bytes((data,))
        self._file.write(data)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
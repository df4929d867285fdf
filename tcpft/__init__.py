"""Chunked file transfer over a single TCP connection."""

__version__ = "0.1.0"
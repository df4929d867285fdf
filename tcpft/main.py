"""Command that sends a file to itself over a local TCP connection and checks it."""

from __future__ import annotations

import argparse
import os
import threading
import time

from .fsocket import FISocket, FOSocket
from .log import log_fatal
from .status import Status, StatusError

DEFAULT_ADDRESS = "127.0.0.1"
DEFAULT_PORT = 55055
_BLOCK_SIZE = 4096
_CONNECT_ATTEMPTS = 20
_CONNECT_DELAY = 0.05


def _connect(sock: FOSocket, address: str, port: int) -> None:
    # The receiver may still be starting up in another thread.
    for attempt in range(_CONNECT_ATTEMPTS):
        try:
            sock.connect(address, port)
            return
        except StatusError as exc:
            last = attempt == _CONNECT_ATTEMPTS - 1
            if exc.status is not Status.SOCKET_CONNECT_FAILED or last:
                raise
            time.sleep(_CONNECT_DELAY)


def sender(file_path: str, address: str = DEFAULT_ADDRESS, port: int = DEFAULT_PORT) -> None:
    """Read ``file_path`` and transmit it; failures are logged, not raised."""
    try:
        sock = FOSocket()
        _connect(sock, address, port)
        sock.transmit(file_path)
        sock.close()
    except RuntimeError as exc:
        log_fatal(str(exc))


def receiver(file_path: str, address: str = DEFAULT_ADDRESS, port: int = DEFAULT_PORT) -> None:
    """Accept one connection and write what it sends to ``file_path``."""
    try:
        sock = FISocket()
        sock.init(address, port)
        sock.receive(file_path)
        sock.close()
    except RuntimeError as exc:
        log_fatal(str(exc))


def compare_files(file1: str, file2: str) -> bool:
    """True if both files can be opened and hold identical bytes."""
    try:
        with open(file1, "rb") as first, open(file2, "rb") as second:
            if os.fstat(first.fileno()).st_size != os.fstat(second.fileno()).st_size:
                return False
            while True:
                block1 = first.read(_BLOCK_SIZE)
                block2 = second.read(_BLOCK_SIZE)
                if block1 != block2:
                    return False
                if not block1:
                    return True
    except OSError:
        return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tcpft",
        description="Send a file over a local TCP connection and compare the copy.",
    )
    parser.add_argument("in_path", nargs="?", default="test_in.txt")
    parser.add_argument("out_path", nargs="?", default="test_out.txt")
    parser.add_argument("--address", default=DEFAULT_ADDRESS)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    receiving = threading.Thread(
        target=receiver, args=(args.out_path, args.address, args.port)
    )
    sending = threading.Thread(
        target=sender, args=(args.in_path, args.address, args.port)
    )
    receiving.start()
    sending.start()
    sending.join()
    receiving.join()

    print(f"compareFiles: {int(compare_files(args.in_path, args.out_path))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
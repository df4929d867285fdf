"""File transfer over TCP: a receiving socket and a transmitting socket."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from .buffer import CHUNK_SIZE, Pool
from .fileio import FileReader, FileWriter
from .log import log_info
from .tcp import TCPClient, TCPServer
from .worker import Worker

_POLL_INTERVAL = 0.05


class _WorkerThread(threading.Thread):
    """Runs a worker and keeps any exception it raised."""

    def __init__(self, worker: Worker) -> None:
        super().__init__(daemon=True)
        self._worker = worker
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self._worker()
        except BaseException as exc:  # handed back to the caller after join
            self.error = exc


class FileWriterWorker(Worker):
    """Drains chunks from a pool into an output file until asked to finish."""

    def __init__(self, location: str, pool: Pool) -> None:
        self._location = location
        self._pool = pool
        self._writer = FileWriter()
        self._finished = threading.Event()
        self._finish_requested = threading.Event()

    def work(self) -> None:
        while not (self._finish_requested.is_set() and self._pool.is_empty()):
            if not self._pool.wait_for_not_empty(_POLL_INTERVAL):
                continue
            chunk = self._pool.pop()
            self._writer.write(chunk.to_bytes())

    def is_finished(self) -> bool:
        """True once the output file has been written and closed."""
        return self._finished.is_set()

    def finish(self) -> None:
        """Ask the worker to stop once the pool has been drained."""
        self._finish_requested.set()

    def on_prepare_work(self) -> None:
        self._finished.clear()
        self._writer.open(self._location)

    def on_finish_work(self) -> None:
        self._writer.close()
        self._finished.set()


class FileReaderWorker(Worker):
    """Reads an input file and fills a pool with its content."""

    def __init__(self, location: str, pool: Pool) -> None:
        self._location = location
        self._pool = pool
        self._reader = FileReader()
        self._finished = threading.Event()

    def work(self) -> None:
        self._pool.fit(self._reader.read())

    def is_finished(self) -> bool:
        """True once the whole file has been placed in the pool."""
        return self._finished.is_set()

    def on_prepare_work(self) -> None:
        self._finished.clear()
        self._reader.open(self._location)

    def on_finish_work(self) -> None:
        self._reader.close()
        self._finished.set()


class FSocket(ABC):
    """Common base of the file sockets: owns the pool of chunks in transit."""

    def __init__(self) -> None:
        self._pool = Pool()

    @property
    def pool(self) -> Pool:
        return self._pool

    @abstractmethod
    def close(self) -> None:
        """Close the underlying socket."""


class FISocket(FSocket):
    """Accepts one connection and writes what arrives to a file."""

    def __init__(self) -> None:
        super().__init__()
        self._server = TCPServer()

    def init(self, address: str, port: int) -> None:
        """Start listening; raise StatusError on failure."""
        self._server.init(address, port)

    def receive(self, location: str) -> None:
        """Accept a connection and store everything received in ``location``."""
        worker = FileWriterWorker(location, self.pool)
        thread = _WorkerThread(worker)
        thread.start()

        try:
            conn = self._server.accept()
        except BaseException:
            worker.finish()
            thread.join()
            raise

        chunk_count = 0
        log_info("receive ", '"', location, '" starting...')
        try:
            with conn:
                while not worker.is_finished() and thread.is_alive():
                    try:
                        data = self._server.receive(conn, CHUNK_SIZE)
                    except TimeoutError:
                        continue
                    if not data:
                        worker.finish()
                        break
                    chunk_count += 1
                    log_info("receive chunk: ", chunk_count, ", size: ", len(data))
                    self.pool.fit(data)
            log_info("receive finished")
        finally:
            worker.finish()
            thread.join()

        if thread.error is not None:
            raise thread.error

    def close(self) -> None:
        self._server.close()


class FOSocket(FSocket):
    """Connects to a receiver and sends a file to it chunk by chunk."""

    def __init__(self) -> None:
        super().__init__()
        self._client = TCPClient()

    def connect(self, address: str, port: int) -> None:
        """Connect to the receiver; raise StatusError on failure."""
        self._client.connect(address, port)

    def transmit(self, location: str) -> None:
        """Send the content of ``location`` and close the connection."""
        worker = FileReaderWorker(location, self.pool)
        thread = _WorkerThread(worker)
        thread.start()
        chunk_count = 0

        log_info("transmit ", '"', location, '" starting...')
        try:
            while not (worker.is_finished() and self.pool.is_empty()):
                if not self.pool.wait_for_not_empty(_POLL_INTERVAL):
                    if not thread.is_alive() and not worker.is_finished():
                        break
                    continue
                data = self.pool.pop().to_bytes()
                chunk_count += 1
                log_info("send chunk: ", chunk_count, ", size: ", len(data))
                self._client.send(data)
            log_info("transmit finished")
        finally:
            thread.join()
            self._client.close()

        if thread.error is not None:
            raise thread.error

    def close(self) -> None:
        self._client.close()
# tcpft

`tcpft` sends a file from one endpoint to another over a single TCP
connection. The sending side reads the whole file on a worker thread and
splits it into chunks of up to 1024 bytes, then sends them in order. The
receiving side accepts one connection. It collects the incoming data in a pool
of chunks, and a worker thread of its own writes them to the output file. The
transfer ends when the sender closes the connection.

## Installation

```
pip install .
```

The package needs only the Python standard library. It requires Python 3.10
or later.

## Command line

```
tcpft [in_path] [out_path] [--address ADDRESS] [--port PORT]
```

The command starts a receiver thread and a sender thread in the same process.
Both use `--address` (default `127.0.0.1`) and `--port` (default `55055`). The
sender transmits `in_path` (default `test_in.txt`). The receiver writes what
it gets to `out_path` (default `test_out.txt`). The sender tries to connect
several times over about a second, so the receiver has time to start
listening. When both threads have finished, the command prints
`compareFiles: 1` if the two files are identical and `compareFiles: 0`
otherwise.

## Library use

Receiving side:

```python
from tcpft.fsocket import FISocket

sock = FISocket()
sock.init("127.0.0.1", 55055)
sock.receive("received.bin")
sock.close()
```

Sending side:

```python
from tcpft.fsocket import FOSocket

sock = FOSocket()
sock.connect("127.0.0.1", 55055)
sock.transmit("payload.bin")   # closes the connection when done
```

`tcpft.main` provides the pieces the command is built from:

- `sender(file_path, address, port)`
- `receiver(file_path, address, port)`
- `compare_files(file1, file2)`, which returns `False` if either file cannot
  be opened.

`sender` and `receiver` log a `RuntimeError` through `log_fatal` and do not
raise it.

### Errors

- A socket setup failure raises `tcpft.status.StatusError`, which is a
  `RuntimeError`. Its `status` attribute holds a `tcpft.status.Status` member,
  for example `Status.INVALID_ADDRESS`, `Status.SOCKET_BIND_FAILED` or
  `Status.SOCKET_CONNECT_FAILED`.
- A file that cannot be opened raises `RuntimeError("file not open")`.
- An error on a worker thread is raised again by `receive` or `transmit`
  once the thread has been joined.

### Building blocks

- `tcpft.buffer.Buffer(capacity)` is a thread-safe bounded FIFO. Pushing onto
  a full buffer drops the oldest item. It offers `push`, `pop`, `front`,
  `back`, `copy`, `len()`, iteration, the `is_*` checks, and blocking
  `wait_for_*` methods. Each `wait_for_*` method takes an optional timeout and
  returns `False` if the timeout expired first.
- `tcpft.buffer.Chunk` holds up to 1024 byte values; `to_bytes()` returns
  them.
- `tcpft.buffer.Pool` holds up to 1024 chunks. `Pool.fit(data)` splits a byte
  string into chunks and pushes them.
- `tcpft.fileio.FileReader` and `tcpft.fileio.FileWriter` read and write whole
  files in binary mode and can be used as context managers.
- `tcpft.worker.Worker` is an abstract callable. Calling it runs
  `on_prepare_work`, then `work`, then `on_finish_work`.
- `tcpft.tcp.TCPServer` and `tcpft.tcp.TCPClient` are the IPv4 socket layer.
  Accepted connections have a one-second receive timeout.
- `tcpft.log.Logger.instance()` returns the shared logger. It writes only
  when the environment variable `TCPFT_LOG_ENABLE` is set. The helpers
  `log_info`, `log_warning`, `log_critical` and `log_fatal` prefix each line
  with the caller's function name and a level tag.

## Limitations

- No file name, size or checksum is sent. The receiver knows only the bytes
  that arrive.
- A receiver accepts a single connection per `receive` call.
- The pool is bounded. If the writer falls more than 1024 chunks behind, the
  oldest chunks are dropped.

## Running the tests

```
pip install .[test]
pytest
```
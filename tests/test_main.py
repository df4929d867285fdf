import io
import socket
import threading
from contextlib import contextmanager

from tcpft.log import Logger
from tcpft.main import compare_files, main, receiver, sender

HOST = "127.0.0.1"


def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((HOST, 0))
        return s.getsockname()[1]


@contextmanager
def captured_log():
    logger = Logger.instance()
    saved_stream, saved_enabled = logger.stream, logger.enabled
    buffer = io.StringIO()
    logger.stream = buffer
    logger.enabled = True
    try:
        yield buffer
    finally:
        logger.stream = saved_stream
        logger.enabled = saved_enabled


def test_compare_identical_files(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"x" * 10000)
    b.write_bytes(b"x" * 10000)
    assert compare_files(str(a), str(b)) is True


def test_compare_empty_files(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"")
    b.write_bytes(b"")
    assert compare_files(str(a), str(b)) is True


def test_compare_different_content(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"x" * 5000 + b"a")
    b.write_bytes(b"x" * 5000 + b"b")
    assert compare_files(str(a), str(b)) is False


def test_compare_different_size(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"abc")
    b.write_bytes(b"abcd")
    assert compare_files(str(a), str(b)) is False


def test_compare_missing_file(tmp_path):
    a = tmp_path / "a"
    a.write_bytes(b"abc")
    assert compare_files(str(a), str(tmp_path / "missing")) is False


def test_sender_and_receiver_round_trip(tmp_path):
    src = tmp_path / "in.bin"
    dst = tmp_path / "out.bin"
    src.write_bytes(bytes(range(256)) * 12)
    port = free_port()
    receiving = threading.Thread(target=receiver, args=(str(dst), HOST, port), daemon=True)
    receiving.start()
    sender(str(src), HOST, port)
    receiving.join(10)
    assert not receiving.is_alive()
    assert dst.read_bytes() == src.read_bytes()
    assert compare_files(str(src), str(dst)) is True


def test_main_transfers_and_reports(tmp_path, capsys):
    src = tmp_path / "test_in.txt"
    dst = tmp_path / "test_out.txt"
    src.write_bytes(b"line of text\n" * 400)
    port = free_port()
    assert main([str(src), str(dst), "--port", str(port)]) == 0
    assert dst.read_bytes() == src.read_bytes()
    assert "compareFiles: 1" in capsys.readouterr().out


def test_sender_logs_fatal_on_invalid_address(tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"data")
    with captured_log() as out:
        sender(str(src), "not-an-ip", free_port())
    text = out.getvalue()
    assert "[sender][FTL]: " in text
    assert "invalid address" in text


def test_receiver_logs_fatal_on_invalid_address(tmp_path):
    with captured_log() as out:
        receiver(str(tmp_path / "out.bin"), "999.1.1.1", free_port())
    text = out.getvalue()
    assert "[receiver][FTL]: " in text
    assert "invalid address" in text
    assert not (tmp_path / "out.bin").exists()
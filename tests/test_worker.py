import threading

import pytest

from tcpft.worker import Worker


class Recorder(Worker):
    def __init__(self):
        self.events = []

    def on_prepare_work(self):
        self.events.append("prepare")

    def work(self):
        self.events.append("work")

    def on_finish_work(self):
        self.events.append("finish")


class ThreadRecorder(Worker):
    def __init__(self):
        self.events = []

    def on_prepare_work(self):
        self.events.append(("prepare", threading.current_thread().name))

    def work(self):
        self.events.append(("work", threading.current_thread().name))

    def on_finish_work(self):
        self.events.append(("finish", threading.current_thread().name))


class Plain(Worker):
    def __init__(self):
        self.done = False
        self.hooks = []

    def work(self):
        self.done = True


class Failing(Recorder):
    def work(self):
        self.events.append("work")
        raise ValueError("boom")


def test_call_runs_hooks_in_order():
    worker = Recorder()
    Worker.__call__(worker)
    assert worker.events == ["prepare", "work", "finish"]


def test_default_hooks_do_nothing():
    worker = Plain()
    Worker.__call__(worker)
    assert worker.done is True
    assert Worker.on_prepare_work(worker) is None
    assert Worker.on_finish_work(worker) is None
    assert worker.hooks == []


def test_worker_as_thread_target():
    worker = ThreadRecorder()

    def run():
        Worker.__call__(worker)

    thread = threading.Thread(target=run, name="worker-thread")
    thread.start()
    thread.join()
    assert not thread.is_alive()
    assert worker.events == [
        ("prepare", "worker-thread"),
        ("work", "worker-thread"),
        ("finish", "worker-thread"),
    ]

    main_name = threading.current_thread().name
    Worker.__call__(worker)
    assert worker.events[3:] == [
        ("prepare", main_name),
        ("work", main_name),
        ("finish", main_name),
    ]


def test_worker_call_twice_repeats_cycle():
    worker = Recorder()
    Worker.__call__(worker)
    Worker.__call__(worker)
    assert worker.events == ["prepare", "work", "finish"] * 2


def test_failure_skips_finish():
    worker = Failing()
    with pytest.raises(ValueError, match="boom"):
        Worker.__call__(worker)
    assert worker.events == ["prepare", "work"]


def test_work_is_abstract():
    with pytest.raises(TypeError):
        Worker()
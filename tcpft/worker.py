"""Base class for units of work run on a thread."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Worker(ABC):
    """Callable that runs preparation, the work itself, then finishing."""

    @abstractmethod
    def work(self) -> None:
        """Perform the work."""

    def __call__(self) -> None:
        self.on_prepare_work()
        self.work()
        self.on_finish_work()

    def on_prepare_work(self) -> None:
        """Hook run before ``work``."""

    def on_finish_work(self) -> None:
        """Hook run after ``work``."""
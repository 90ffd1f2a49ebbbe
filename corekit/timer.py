"""Run a task repeatedly at a fixed interval on a background thread."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class TimerManager:
    """Calls ``task`` every ``interval_ms`` milliseconds until stopped.

    The timer starts as soon as it is created.
    """

    def __init__(self, task: Callable[[], Any], interval_ms: float) -> None:
        if interval_ms < 0:
            raise ValueError("Interval cannot be negative")
        self._task = task
        self._interval = interval_ms / 1000.0
        self._guard = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.start()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            self._task()

    def start(self) -> None:
        """Start the timer; does nothing if it is already running."""
        with self._guard:
            if self._thread is not None and self._thread.is_alive():
                return
            self._stop_event = threading.Event()
            self._thread = threading.Thread(target=self._run, args=(self._stop_event,), daemon=True)
            self._thread.start()

    def stop(self) -> None:
        """Stop the timer and wait for a running task to finish."""
        with self._guard:
            thread = self._thread
            self._stop_event.set()
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
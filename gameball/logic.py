"""Runs a logic world's ticks on a background thread at a steady rate."""

from __future__ import annotations

import threading
import time

from gameball.world import World


class Manager:
    """Owns a world and ticks it from a worker thread; hold `lock` to touch the world."""

    def __init__(self, world: World | None = None, tick_interval: float | None = None) -> None:
        self.world = world if world is not None else World()
        self.tick_interval = self.world.tick_delta_t if tick_interval is None else tick_interval
        self.lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start ticking; raises RuntimeError if already started."""
        if self._thread is not None:
            raise RuntimeError("logic thread already started")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="logic", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop ticking and wait for the thread; raises RuntimeError if not started."""
        if self._thread is None:
            raise RuntimeError("logic thread is not running")
        self._stop_event.set()
        self._thread.join()
        self._thread = None

    def _run(self) -> None:
        deadline = time.monotonic()
        while not self._stop_event.is_set():
            with self.lock:
                self.world.update_tick()
            deadline += self.tick_interval
            now = time.monotonic()
            if deadline < now:
                deadline = now
            self._stop_event.wait(deadline - now)
"""A small in-memory byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    created_at: float
    val: bytes


class Cache:
    """Thread-safe key/value store with a background reaper.

    A background thread wakes up every ``interval`` seconds and drops every
    entry that is at least ``interval`` seconds old.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be a positive number of seconds")
        self._interval = float(interval)
        self._memory: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    @property
    def interval(self) -> float:
        """Lifetime of an entry, in seconds."""
        return self._interval

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier value."""
        entry = _Entry(created_at=time.monotonic(), val=bytes(val))
        with self._lock:
            self._memory[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._memory.get(key)
        return None if entry is None else entry.val

    def __len__(self) -> int:
        with self._lock:
            return len(self._memory)

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            self._memory = {
                key: entry
                for key, entry in self._memory.items()
                if now - entry.created_at < self._interval
            }

    def _reap_loop(self) -> None:
        while not self._stop.wait(self._interval):
            self._reap()
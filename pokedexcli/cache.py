"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from typing import Callable, NamedTuple


class _Entry(NamedTuple):
    created_at: float
    val: bytes


class Cache:
    """Keyed store of raw bytes, reaped periodically by a background thread.

    Every ``interval`` seconds, entries older than ``interval`` are removed.
    """

    def __init__(
        self,
        interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        autoreap: bool = True,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"cache interval must be positive, got {interval!r}")
        self.interval = float(interval)
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if autoreap:
            self._thread = threading.Thread(
                target=self._reap_loop, name="cache-reaper", daemon=True
            )
            self._thread.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier entry."""
        entry = _Entry(self._clock(), bytes(val))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None if absent."""
        with self._lock:
            entry = self._entries.get(key)
        return entry.val if entry is not None else None

    def reap(self) -> int:
        """Remove entries older than the interval; return how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self.interval
            ]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    @property
    def running(self) -> bool:
        """Whether the background reaper is still active."""
        return self._thread is not None and self._thread.is_alive()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.reap()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
"""In-memory sliding-window limiter for unauthenticated endpoints."""

import time
from threading import Lock


class RateLimiter:
    """Sliding-window limiter keyed by an arbitrary string (usually client IP).

    Keeps the timestamps of accepted calls per key and refuses a call once
    ``max_requests`` of them fall inside the trailing window. Keys with no
    live timestamps are dropped, on touch or by a sweep at most once per window.
    """

    def __init__(self, max_requests: int, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._hits: dict[str, list[float]] = {}
        self._lock = Lock()
        self._last_sweep = time.monotonic()

    def __len__(self) -> int:
        """Number of keys currently tracked."""
        with self._lock:
            return len(self._hits)

    def _prune(self, key: str, now: float) -> list[float]:
        cutoff = now - self.window_seconds
        live = [t for t in self._hits.get(key, ()) if t > cutoff]
        if live:
            self._hits[key] = live
        else:
            self._hits.pop(key, None)
        return live

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self.window_seconds:
            return
        for key in list(self._hits):
            self._prune(key, now)
        self._last_sweep = now

    def hit(self, key: str) -> bool:
        """Record a call for ``key``. Returns False when the limit is reached."""
        now = time.monotonic()
        with self._lock:
            self._sweep(now)
            live = self._prune(key, now)
            if len(live) >= self.max_requests:
                return False
            live.append(now)
            self._hits[key] = live
            return True

    def retry_after(self, key: str) -> int:
        """Whole seconds until ``key`` may call again (0 when it already may)."""
        now = time.monotonic()
        with self._lock:
            live = self._prune(key, now)
            if len(live) < self.max_requests:
                return 0
            return max(1, int(live[0] + self.window_seconds - now) + 1)

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()

"""Interrupting a run of repeated group messages."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass

THROTTLE = 3


@dataclass
class _Run:
    count: int
    raw: str


class RepeatBreaker:
    """Tracks repeated messages per group and breaks long repeat runs."""

    def __init__(self, rng: random.Random | None = None, throttle: int = THROTTLE) -> None:
        self._rng = rng or random.Random()
        self._throttle = throttle
        self._runs: dict[int, _Run] = {}
        self._lock = threading.Lock()

    def feed(self, group_id: int, raw: str) -> str | None:
        """Record a message; return the text to send when a run must be broken."""
        with self._lock:
            run = self._runs.get(group_id)
            if run is None or not run.raw or run.raw != raw:
                self._runs[group_id] = _Run(0, raw)
                return None
            if run.count < self._throttle:
                self._runs[group_id] = _Run(run.count + 1, raw)
                return None
            del self._runs[group_id]
        if len(raw.encode("utf-8")) > 2:
            chars = list(raw)
            self._rng.shuffle(chars)
            return "".join(chars)
        return f"{run.count}: {raw}"
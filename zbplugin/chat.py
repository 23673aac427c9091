"""Basic chat reactions: name calls, pokes and the group air conditioner."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass
from typing import Callable

DEFAULT_TEMPERATURE = 26


@dataclass
class _Bucket:
    tokens: float
    stamp: float


class RateLimiter:
    """Per-key token bucket: ``burst`` tokens refilled over ``interval`` seconds."""

    def __init__(
        self,
        interval: float = 300.0,
        burst: int = 8,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._rate = burst / interval
        self._burst = burst
        self._clock = clock
        self._buckets: dict[int, _Bucket] = {}
        self._lock = threading.Lock()

    def acquire(self, key: int, n: int = 1) -> bool:
        """Take ``n`` tokens for ``key`` if that many are available."""
        now = self._clock()
        with self._lock:
            bucket = self._buckets.setdefault(key, _Bucket(float(self._burst), now))
            bucket.tokens = min(
                float(self._burst), bucket.tokens + (now - bucket.stamp) * self._rate
            )
            bucket.stamp = now
            if bucket.tokens >= n:
                bucket.tokens -= n
                return True
            return False


def name_reply(nickname: str, rng: random.Random | None = None) -> str:
    """Reply for when the bot is called by name alone."""
    replies = [
        nickname + "在此，有何贵干~",
        "(っ●ω●)っ在~",
        "这里是" + nickname + "(っ●ω●)っ",
        nickname + "不在呢~",
    ]
    return (rng or random).choice(replies)


def poke_reply(limiter: RateLimiter, group_id: int, nickname: str) -> str | None:
    """Reply to a poke, or None when poked too often."""
    if limiter.acquire(group_id, 3):
        return f"请不要戳{nickname} >_<"
    if limiter.acquire(group_id, 1):
        return f"喂(#`O′) 戳{nickname}干嘛！"
    return None


class AirConditioner:
    """A pretend air conditioner per group."""

    def __init__(self) -> None:
        self._temperature: dict[int, int] = {}
        self._on: dict[int, bool] = {}

    def turn_on(self, group_id: int) -> str:
        self._on[group_id] = True
        return "❄️哔~"

    def turn_off(self, group_id: int) -> str:
        self._on[group_id] = False
        self._temperature.pop(group_id, None)
        return "💤哔~"

    def set_temperature(self, group_id: int, value: str | int) -> str:
        """Set the temperature when switched on; return the status line."""
        self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
        if self._on.get(group_id, False):
            try:
                self._temperature[group_id] = int(value)
            except ValueError:
                self._temperature[group_id] = 0
        return self.status(group_id)

    def status(self, group_id: int) -> str:
        """Describe the conditioner state and temperature."""
        temperature = self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
        head = "❄️风速中" if self._on.get(group_id, False) else "💤"
        return f"{head}\n群温度 {temperature}℃"
"""Self check of host load and the packed global rate limit setting."""

from __future__ import annotations

import math
import re

import psutil

_LIMIT_COMMAND = re.compile(
    r"^设置默认限速为每\s*(\d+)\s*(分钟|秒)\s*(\d+)\s*次触发$", re.ASCII
)


def _round(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def pack_limit(interval: int, burst: int) -> int:
    """Pack interval seconds and burst count into one stored integer."""
    return (interval & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(data: int) -> tuple[int, int]:
    """Split a stored integer into (interval seconds, burst count)."""
    return data & 0xFFFF, (data >> 16) & 0xFFFF


def parse_limit_command(text: str) -> tuple[int, int]:
    """Parse a rate limit command into (interval seconds, burst count)."""
    match = _LIMIT_COMMAND.match(text)
    if match is None:
        raise ValueError("not a rate limit command")
    interval = int(match.group(1))
    if match.group(2) == "分钟":
        interval *= 60
    if interval >= 65536 or interval <= 0:
        raise ValueError("interval too big")
    burst = int(match.group(3))
    if burst >= 65536 or burst <= 0:
        raise ValueError("burst too big")
    return interval, burst


def cpu_percent() -> float:
    """CPU usage over one second, rounded; -1 when unavailable."""
    try:
        value = psutil.cpu_percent(interval=1)
    except (OSError, RuntimeError, psutil.Error):
        return -1.0
    return _round(value)


def mem_percent() -> float:
    """Used memory percentage, rounded; -1 when unavailable."""
    try:
        info = psutil.virtual_memory()
    except (OSError, RuntimeError, psutil.Error):
        return -1.0
    return _round(info.percent)


def disk_report() -> str:
    """One line per used partition, or the error met."""
    try:
        parts = psutil.disk_partitions(all=True)
    except (OSError, RuntimeError, psutil.Error) as err:
        return str(err)
    lines: list[str] = []
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (OSError, RuntimeError, psutil.Error) as err:
            lines.append("\n  - " + str(err))
            continue
        used = int(_round(usage.percent))
        if used > 0:
            lines.append(f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {used}%")
    return "".join(lines)
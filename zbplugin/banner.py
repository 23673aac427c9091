"""Version banner and its generator."""

from __future__ import annotations

import subprocess
from datetime import datetime
from pathlib import Path

BANNER = "* OneBot + ZeroBot\n* Version v1.6.1-beta3 - 2022-12-26 13:45:09 +0800 CST"

_TIME_SUFFIX = " +0800 CST"


def render_banner(version: str, when: datetime) -> str:
    """Return the banner text for a version built at the given moment."""
    stamp = when.strftime("%Y-%m-%d %H:%M:%S") + _TIME_SUFFIX
    return f"* OneBot + ZeroBot\n* Version {version} - {stamp}"


def latest_tag(tags_output: str) -> str:
    """Pick the newest tag from newline-terminated tag listing output."""
    lines = tags_output.split("\n")
    if len(lines) < 2:
        raise ValueError("no tag found in output")
    return lines[-2]


def generate(path: str | Path) -> str:
    """Write a module holding the banner for the newest git tag; return the text."""
    result = subprocess.run(
        ["git", "tag", "--sort=committerdate"],
        capture_output=True,
        text=True,
        check=True,
    )
    text = render_banner(latest_tag(result.stdout), datetime.now())
    Path(path).write_text(
        f'"""Version banner."""\n\nBANNER = {text!r}\n', encoding="utf-8"
    )
    return text
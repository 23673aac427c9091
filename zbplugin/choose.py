"""Picking one option out of several for the undecided."""

from __future__ import annotations

import random
from typing import Protocol

SEPARATOR = "还是"


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


def parse_options(args: str) -> list[str]:
    """Split the argument text into options."""
    return args.split(SEPARATOR)


def choose(args: str, nickname: str, rng: _Rng | None = None) -> str:
    """Return the reply listing all options and the one picked."""
    options = parse_options(args)
    picker = rng if rng is not None else random
    result = options[picker.randrange(len(options))]
    numbered = "\n".join(f"{number}, {option}" for number, option in enumerate(options, 1))
    return f"> {nickname}\n你的选项有:\n{numbered}\n你最终会选: {result}"
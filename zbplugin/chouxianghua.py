"""Turning Chinese text into 'abstract speech' emoji."""

from __future__ import annotations

from typing import Callable


def convert(
    text: str,
    pinyin_of: Callable[[str], str],
    emoji_of: Callable[[str], str],
) -> str:
    """Replace characters, or pairs of them, whose pronunciation has an emoji.

    ``pinyin_of`` maps a character to its pronunciation and ``emoji_of`` maps
    a pronunciation to an emoji; both return an empty string when unknown.
    Pairs are tried before single characters.
    """
    out: list[str] = []
    position = 0
    while position < len(text):
        current = text[position]
        if position + 1 < len(text):
            pair = emoji_of(pinyin_of(current) + pinyin_of(text[position + 1]))
            if pair:
                out.append(pair)
                position += 2
                continue
        single = emoji_of(pinyin_of(current))
        out.append(single or current)
        position += 1
    return "".join(out)
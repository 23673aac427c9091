"""Upside-down rendering of English text."""

from __future__ import annotations

_FLIPPED = {
    " ": " ",
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ", "f": "ɟ", "g": "ƃ",
    "h": "ɥ", "i": "ᴉ", "j": "ɾ", "k": "ʞ", "l": "l", "m": "ɯ", "n": "u",
    "o": "o", "p": "d", "q": "b", "r": "ɹ", "s": "s", "t": "ʇ", "u": "n",
    "v": "ʌ", "w": "ʍ", "x": "x", "y": "ʎ", "z": "z",
    "A": "∀", "B": "ᗺ", "C": "Ɔ", "D": "ᗡ", "E": "Ǝ", "F": "Ⅎ", "G": "⅁",
    "H": "H", "I": "I", "J": "ſ", "K": "ʞ", "L": "˥", "M": "W", "N": "N",
    "O": "O", "P": "Ԁ", "Q": "Ò", "R": "ᴚ", "S": "S", "T": "⏊", "U": "∩",
    "V": "Λ", "W": "M", "X": "X", "Y": "⅄", "Z": "Z",
}

_BYTE_MAP = {ord(key): value for key, value in _FLIPPED.items()}


def flip(text: str) -> str:
    """Reverse the text and turn each letter upside down.

    Bytes without an upside-down form become NUL characters.
    """
    return "".join(_BYTE_MAP.get(byte, "\x00") for byte in reversed(text.encode("utf-8")))
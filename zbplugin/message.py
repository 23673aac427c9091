"""Message segments sent back to a OneBot peer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _escape(value: str, *, in_param: bool) -> str:
    value = value.replace("&", "&amp;").replace("[", "&#91;").replace("]", "&#93;")
    if in_param:
        value = value.replace(",", "&#44;")
    return value


@dataclass
class Segment:
    """One piece of a chat message: a type name plus its string parameters."""

    type: str
    data: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.type == "text":
            return _escape(self.data.get("text", ""), in_param=False)
        params = "".join(
            f",{key}={_escape(value, in_param=True)}" for key, value in self.data.items()
        )
        return f"[CQ:{self.type}{params}]"


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def text(*args: Any) -> Segment:
    """Build a text segment.

    Operands are joined directly; a space is put between two neighbours
    only when neither of them is a string.
    """
    parts: list[str] = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_format_value(arg))
        previous_is_str = is_str
    return Segment("text", {"text": "".join(parts)})


def image(file: str) -> Segment:
    """Build an image segment from a URL, path or base64 reference."""
    return Segment("image", {"file": file})


def record(file: str) -> Segment:
    """Build a voice record segment."""
    return Segment("record", {"file": file})


def at(user_id: int) -> Segment:
    """Build a segment that mentions a user."""
    return Segment("at", {"qq": str(user_id)})


def reply(message_id: int | str) -> Segment:
    """Build a segment that quotes an earlier message."""
    return Segment("reply", {"id": str(message_id)})
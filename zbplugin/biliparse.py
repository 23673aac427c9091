"""Recognising links to videos, dynamics, articles and live rooms."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class LinkKind(Enum):
    VIDEO = "video"
    DYNAMIC = "dynamic"
    ARTICLE = "article"
    LIVE = "live"


SHORT_LINK_RE = re.compile(r"((b23|acg).tv|bili2233.cn)/[0-9a-zA-Z]+", re.ASCII)

_PATTERNS = (
    (LinkKind.VIDEO, re.compile(r"bilibili.com\\?/video\\?/(?:av(\d+)|([bB][vV][0-9a-zA-Z]+))", re.ASCII)),
    (LinkKind.DYNAMIC, re.compile(r"(t.bilibili.com|m.bilibili.com\\?/dynamic)\\?/(\d+)", re.ASCII)),
    (LinkKind.ARTICLE, re.compile(r"bilibili.com\\?/read\\?/(?:cv|mobile\\?/)(\d+)", re.ASCII)),
    (LinkKind.LIVE, re.compile(r"live.bilibili.com\\?/(\d+)", re.ASCII)),
)


def video_id(groups: list[str]) -> str:
    """The av number if present, otherwise the BV id."""
    return groups[1] or groups[2]


@dataclass(frozen=True)
class LinkMatch:
    """A recognised link: its kind, the whole match and its groups."""

    kind: LinkKind
    groups: list[str]

    @property
    def id(self) -> str:
        if self.kind is LinkKind.VIDEO:
            return video_id(self.groups)
        if self.kind is LinkKind.DYNAMIC:
            return self.groups[2]
        return self.groups[1]


def match_link(url: str) -> LinkMatch | None:
    """Find the first kind of link the text contains, or None."""
    for kind, pattern in _PATTERNS:
        found = pattern.search(url)
        if found is not None:
            groups = [found.group(0)] + [group or "" for group in found.groups()]
            return LinkMatch(kind, groups)
    return None
"""Short couple stories with names filled in."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CpStory:
    """A story template and the two names it was written with."""

    id: int
    gong: str
    shou: str
    story: str


def fill_story(story: CpStory, gong: str, shou: str) -> str:
    """Put the given names into a story."""
    text = story.story.replace("<攻>", gong)
    text = text.replace("<受>", shou)
    text = text.replace(story.gong, gong)
    return text.replace(story.shou, gong)


def split_names(args: str) -> tuple[str, str]:
    """Take the two space-separated names from the command arguments."""
    params = args.split(" ")
    if len(params) < 2:
        raise ValueError("请用空格分开两个人名")
    return params[0], params[1]
"""Subscribing groups to uploaders and deciding what to push to them."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from zbplugin.bilipushdb import Push, PushDB
from zbplugin.message import Segment, image, text

LIVE_URL = "https://live.bilibili.com/"
LIST_TITLE = "--------B站推送列表--------"
RECENT_WINDOW = 600

ON_MARK = "●"
OFF_MARK = "○"


def subscribe(db: PushDB, buid: int, group_id: int) -> None:
    """Subscribe a group to an uploader's lives and dynamics."""
    db.insert_or_update(
        {"bilibili_uid": buid, "group_id": group_id, "live_disable": 0, "dynamic_disable": 0}
    )


def unsubscribe(db: PushDB, buid: int, group_id: int) -> None:
    """Stop every push of an uploader to a group."""
    db.insert_or_update(
        {"bilibili_uid": buid, "group_id": group_id, "live_disable": 1, "dynamic_disable": 1}
    )


def unsubscribe_dynamic(db: PushDB, buid: int, group_id: int) -> None:
    """Stop pushing an uploader's dynamics to a group."""
    db.insert_or_update({"bilibili_uid": buid, "group_id": group_id, "dynamic_disable": 1})


def unsubscribe_live(db: PushDB, buid: int, group_id: int) -> None:
    """Stop pushing an uploader's live broadcasts to a group."""
    db.insert_or_update({"bilibili_uid": buid, "group_id": group_id, "live_disable": 1})


def format_push_list(pushes: Iterable[Push], ups: Mapping[int, str]) -> str:
    """Describe a group's subscriptions, one line per uploader."""
    lines = [LIST_TITLE]
    for push in pushes:
        dynamic = ON_MARK if push.dynamic_disable == 0 else OFF_MARK
        live = ON_MARK if push.live_disable == 0 else OFF_MARK
        lines.append(
            f"uid:{push.bilibili_uid:<12d} 动态：{dynamic} 直播：{live}"
            f" up主：{ups.get(push.bilibili_uid, '')}"
        )
    return "\n".join(lines)


class LiveTracker:
    """Remembers each uploader's live status and spots when one goes live."""

    def __init__(self) -> None:
        self._status: dict[int, int] = {}
        self._lock = threading.Lock()

    def update(self, uid: int, status: int) -> bool:
        """Record a status; True when the uploader has just started broadcasting.

        Status 2 (round-robin replay) counts as offline. The first status seen
        for an uploader is only recorded.
        """
        if status == 2:
            status = 0
        with self._lock:
            old = self._status.get(uid)
            self._status[uid] = status
        return old is not None and status != old and status == 1


class DynamicTracker:
    """Remembers the newest dynamic time per uploader and finds new ones."""

    def __init__(self, window: int = RECENT_WINDOW) -> None:
        self._window = window
        self._last: dict[int, int] = {}
        self._lock = threading.Lock()

    def new_timestamps(self, buid: int, timestamps: Sequence[int], now: int) -> list[int]:
        """Return the new, recent timestamps in chronological order.

        ``timestamps`` come newest first. The first call for an uploader only
        records the newest time.
        """
        if not timestamps:
            raise ValueError(f"{buid}的历史动态数为0")
        with self._lock:
            last = self._last.get(buid)
            if last is None:
                self._last[buid] = timestamps[0]
                return []
            fresh = [
                stamp
                for stamp in reversed(timestamps)
                if stamp > last and stamp > now - self._window
            ]
            if fresh:
                self._last[buid] = fresh[-1]
        return fresh


def live_message(info: Mapping[str, Any]) -> list[Segment]:
    """Build the 'now live' notice from one entry of the live status answer."""
    room_id = int(info.get("short_id") or 0)
    if room_id == 0:
        room_id = int(info.get("room_id") or 0)
    cover = str(info.get("cover_from_user") or "")
    if not cover:
        cover = str(info.get("keyframe") or "")
    return [
        text(str(info.get("uname", "")) + " 正在直播：\n"),
        text(str(info.get("title", ""))),
        image(cover),
        text("直播链接：", LIVE_URL + str(room_id)),
    ]


def targets(group_ids: Iterable[int]) -> Iterator[tuple[str, int]]:
    """Map stored ids to ('group', id) or ('private', user id); zero is skipped."""
    for gid in group_ids:
        if gid > 0:
            yield "group", gid
        elif gid < 0:
            yield "private", -gid
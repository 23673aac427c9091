"""SQLite store of video-site push subscriptions and uploader names."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

PUSH_TABLE = "bilibili_push"
UP_TABLE = "bilibili_up"

_KEY_FIELDS = ("bilibili_uid", "group_id")
_FLAG_FIELDS = ("live_disable", "dynamic_disable")


@dataclass
class Push:
    """One subscription of a group (or negated user id) to an uploader."""

    id: int
    bilibili_uid: int
    group_id: int
    live_disable: int = 0
    dynamic_disable: int = 0


class PushDB:
    """Subscriptions and known uploader names kept in SQLite."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        with self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {PUSH_TABLE} ("
                "id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "bilibili_uid INTEGER, "
                "group_id INTEGER, "
                "live_disable INTEGER DEFAULT 0, "
                "dynamic_disable INTEGER DEFAULT 0)"
            )
            self._conn.execute(
                f"CREATE INDEX IF NOT EXISTS idx_buid_gid "
                f"ON {PUSH_TABLE} (bilibili_uid, group_id)"
            )
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {UP_TABLE} ("
                "bilibili_uid INTEGER PRIMARY KEY, name TEXT)"
            )

    def __enter__(self) -> PushDB:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def insert_or_update(self, fields: Mapping[str, Any]) -> None:
        """Create the subscription named by uid and group, or update the given flags."""
        unknown = set(fields) - set(_KEY_FIELDS) - set(_FLAG_FIELDS)
        if unknown:
            raise ValueError(f"unknown fields: {sorted(unknown)}")
        missing = [key for key in _KEY_FIELDS if key not in fields]
        if missing:
            raise ValueError(f"missing fields: {missing}")
        buid = int(fields["bilibili_uid"])
        gid = int(fields["group_id"])
        flags = {key: int(fields[key]) for key in _FLAG_FIELDS if key in fields}
        with self._lock, self._conn:
            row = self._conn.execute(
                f"SELECT id FROM {PUSH_TABLE} WHERE bilibili_uid = ? AND group_id = ? "
                "ORDER BY id LIMIT 1",
                (buid, gid),
            ).fetchone()
            if row is None:
                self._conn.execute(
                    f"INSERT INTO {PUSH_TABLE} "
                    "(bilibili_uid, group_id, live_disable, dynamic_disable) "
                    "VALUES (?, ?, ?, ?)",
                    (
                        buid,
                        gid,
                        flags.get("live_disable", 0),
                        flags.get("dynamic_disable", 0),
                    ),
                )
            elif flags:
                assignments = ", ".join(f"{key} = ?" for key in flags)
                self._conn.execute(
                    f"UPDATE {PUSH_TABLE} SET {assignments} "
                    "WHERE bilibili_uid = ? AND group_id = ?",
                    (*flags.values(), buid, gid),
                )

    def _distinct_buids(self, condition: str) -> list[int]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT bilibili_uid FROM {PUSH_TABLE} WHERE {condition} ORDER BY id"
            ).fetchall()
        return list(dict.fromkeys(row[0] for row in rows))

    def _groups(self, buid: int, condition: str) -> list[int]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT group_id FROM {PUSH_TABLE} "
                f"WHERE bilibili_uid = ? AND {condition} ORDER BY id",
                (buid,),
            ).fetchall()
        return [row[0] for row in rows]

    def buids_by_live(self) -> list[int]:
        """Uploaders with at least one live subscription, in first-seen order."""
        return self._distinct_buids("live_disable = 0")

    def buids_by_dynamic(self) -> list[int]:
        """Uploaders with at least one dynamic subscription, in first-seen order."""
        return self._distinct_buids("dynamic_disable = 0")

    def groups_by_buid_and_live(self, buid: int) -> list[int]:
        """Groups subscribed to an uploader's live broadcasts."""
        return self._groups(buid, "live_disable = 0")

    def groups_by_buid_and_dynamic(self, buid: int) -> list[int]:
        """Groups subscribed to an uploader's dynamics."""
        return self._groups(buid, "dynamic_disable = 0")

    def pushes_by_group(self, group_id: int) -> list[Push]:
        """Subscriptions of a group that still push something."""
        with self._lock:
            rows = self._conn.execute(
                "SELECT id, bilibili_uid, group_id, live_disable, dynamic_disable "
                f"FROM {PUSH_TABLE} WHERE group_id = ? "
                "AND (live_disable = 0 OR dynamic_disable = 0) ORDER BY id",
                (group_id,),
            ).fetchall()
        return [Push(*row) for row in rows]

    def insert_up(self, buid: int, name: str) -> None:
        """Remember an uploader's name; an existing entry is kept."""
        with self._lock, self._conn:
            self._conn.execute(
                f"INSERT OR IGNORE INTO {UP_TABLE} (bilibili_uid, name) VALUES (?, ?)",
                (buid, name),
            )

    def all_ups(self) -> dict[int, str]:
        """Every known uploader id with its name."""
        with self._lock:
            rows = self._conn.execute(
                f"SELECT bilibili_uid, name FROM {UP_TABLE}"
            ).fetchall()
        return {buid: name for buid, name in rows}

    def close(self) -> None:
        """Close the database."""
        with self._lock:
            self._conn.close()
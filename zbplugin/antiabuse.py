"""Forbidden word lists per group and the record of temporary bans."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass, field
from pathlib import Path

BAN_DURATION = 600
BAN_TABLE = "__bantime__"
EMPTY_GROUP = "本群还没有违禁词~"

_MIN_LEFT = 60
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def clean_message(msg: str) -> str:
    """Drop line breaks, tabs and semicolons from a message."""
    for char in ("\n", "\r", "\t", ";"):
        msg = msg.replace(char, "")
    return msg


def group_table(gid: int) -> str:
    """Table name of a group: its id in base 36."""
    if gid == 0:
        return "0"
    sign = "-" if gid < 0 else ""
    number = abs(gid)
    digits: list[str] = []
    while number:
        number, rest = divmod(number, 36)
        digits.append(_DIGITS[rest])
    return sign + "".join(reversed(digits))


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


@dataclass
class BanSweep:
    """Bans still running (seconds left) and those that have run out."""

    active: dict[int, int] = field(default_factory=dict)
    expired: list[int] = field(default_factory=list)


class AntiDB:
    """SQLite store of forbidden words and ban times."""

    def __init__(self, path: str | Path) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()

    def __enter__(self) -> AntiDB:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _exists(self, name: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (name,)
        ).fetchone()
        return row is not None

    def is_in_anti_list(self, gid: int, msg: str) -> bool:
        """True if the message contains any of the group's forbidden words."""
        table = group_table(gid)
        with self._lock:
            if not self._exists(table):
                return False
            row = self._conn.execute(
                f"SELECT 1 FROM {_quote(table)} WHERE instr(?, word)>0 LIMIT 1", (msg,)
            ).fetchone()
            return row is not None

    def insert_word(self, gid: int, word: str) -> None:
        """Add a forbidden word to a group."""
        table = _quote(group_table(gid))
        with self._lock, self._conn:
            self._conn.execute(f"CREATE TABLE IF NOT EXISTS {table} (word TEXT PRIMARY KEY)")
            self._conn.execute(f"INSERT OR REPLACE INTO {table} (word) VALUES (?)", (word,))

    def delete_word(self, gid: int, word: str) -> None:
        """Remove a forbidden word; raises ValueError when the group has none."""
        table = group_table(gid)
        with self._lock, self._conn:
            count = 0
            if self._exists(table):
                count = self._conn.execute(f"SELECT COUNT(*) FROM {_quote(table)}").fetchone()[0]
            if count == 0:
                raise ValueError(EMPTY_GROUP)
            self._conn.execute(f"DELETE FROM {_quote(table)} WHERE word=?", (word,))

    def list_words(self, gid: int) -> str:
        """The group's forbidden words as '[a | b]'."""
        table = group_table(gid)
        with self._lock:
            words: list[str] = []
            if self._exists(table):
                words = [
                    row[0]
                    for row in self._conn.execute(
                        f"SELECT word FROM {_quote(table)} ORDER BY rowid"
                    )
                ]
        body = "[" + " | ".join(words)
        if len(body.encode("utf-8")) <= 4:
            return "[]"
        return body + "]"

    def record_ban(self, uid: int, when: int) -> None:
        """Remember that a user was banned at a Unix time."""
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(BAN_TABLE)} "
                "(id INTEGER PRIMARY KEY, time INTEGER)"
            )
            self._conn.execute(
                f"INSERT OR REPLACE INTO {_quote(BAN_TABLE)} (id, time) VALUES (?, ?)",
                (uid, when),
            )

    def clear_ban(self, uid: int) -> None:
        """Forget a user's ban."""
        with self._lock, self._conn:
            if self._exists(BAN_TABLE):
                self._conn.execute(f"DELETE FROM {_quote(BAN_TABLE)} WHERE id=?", (uid,))

    def active_bans(self, now: int) -> BanSweep:
        """Split recorded bans into running and finished ones; drop finished rows."""
        sweep = BanSweep()
        with self._lock, self._conn:
            if not self._exists(BAN_TABLE):
                return sweep
            rows = self._conn.execute(
                f"SELECT id, time FROM {_quote(BAN_TABLE)} ORDER BY rowid"
            ).fetchall()
            for uid, when in rows:
                left = when + BAN_DURATION - now
                if left < _MIN_LEFT:
                    sweep.expired.append(uid)
                else:
                    sweep.active[uid] = left
            self._conn.execute(
                f"DELETE FROM {_quote(BAN_TABLE)} WHERE time<=?",
                (now + _MIN_LEFT - BAN_DURATION,),
            )
        return sweep

    def close(self) -> None:
        """Close the database."""
        with self._lock:
            self._conn.close()
"""Reply mode and text-to-speech voice settings, packed into per-group integers."""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from dataclasses import dataclass

REPLY_MODES = ("青云客", "小爱", "ChatGPT")

LAST_GENSHIN_INDEX = 63
BAIDU_INDEX = 64
MOCKINGBIRD_INDEX = 65

DEFAULT_TTS_KEY = -2905

BAIDU = "百度"
MOCKINGBIRD = "拟声鸟"

_GENSHIN_SLOTS = LAST_GENSHIN_INDEX + 1


def set_reply_mode(store: MutableMapping[int, int], gid: int, name: str) -> None:
    """Store the reply mode called ``name`` for a group (or a negated user id)."""
    try:
        index = REPLY_MODES.index(name)
    except ValueError:
        raise ValueError("no such mode") from None
    store[gid] = (store.get(index, 0) & ~0xFF) | (index & 0xFF)


def reply_mode(store: MutableMapping[int, int], gid: int) -> str:
    """Name of the reply mode chosen for a group; the first mode by default."""
    index = store.get(gid, 0) & 0xFF
    if index < len(REPLY_MODES):
        return REPLY_MODES[index]
    return REPLY_MODES[0]


def format_list(items: Sequence[str], num: int) -> str:
    """Lay items out ``num`` per line, separated by ' | '."""
    parts: list[str] = []
    for position, value in enumerate(items, 1):
        parts.append(value)
        parts.append("\n" if position % num == 0 else " | ")
    return "".join(parts)


@dataclass(frozen=True)
class Speaker:
    """A chosen voice: its name, mode index and engine parameter."""

    name: str
    index: int
    param: int


class TTSModes:
    """Voice choices per group, cached in memory and packed into a store."""

    def __init__(
        self,
        store: MutableMapping[int, int],
        sound_list: Sequence[str] = (),
        api_key: str = "",
    ) -> None:
        if len(sound_list) > _GENSHIN_SLOTS:
            raise ValueError("too many voices")
        self._store = store
        self._sounds = list(sound_list)
        self._modes = self._sounds + [""] * (_GENSHIN_SLOTS - len(self._sounds))
        self._modes += [BAIDU, MOCKINGBIRD]
        self.api_key = api_key
        self._cache: dict[int, int] = {DEFAULT_TTS_KEY: 0}
        index = store.get(DEFAULT_TTS_KEY, 0)
        if self._valid(index & 0xFF):
            self._cache[DEFAULT_TTS_KEY] = index

    def _valid(self, mode: int) -> bool:
        return 0 <= mode < len(self._sounds) or mode in (BAIDU_INDEX, MOCKINGBIRD_INDEX)

    def _index_of(self, name: str) -> int:
        if name in self._sounds:
            return self._sounds.index(name)
        if name == BAIDU:
            return BAIDU_INDEX
        if name == MOCKINGBIRD:
            return MOCKINGBIRD_INDEX
        raise ValueError("不支持设置语音人物" + name)

    def set_sound_mode(self, gid: int, name: str, baiduper: int, mockingsynt: int) -> None:
        """Choose the voice of a group together with its engine parameters."""
        index = self._index_of(name)
        self._cache[gid] = index
        self._store[gid] = (
            (self._store.get(gid, 0) & ~0xFFFF00)
            | ((index << 8) & 0xFF00)
            | ((baiduper << 16) & 0x0F0000)
            | ((mockingsynt << 20) & 0xF00000)
        )

    def sound_mode(self, gid: int) -> Speaker:
        """The voice a group speaks with, falling back to the default voice."""
        value = self._cache.get(gid)
        if value is None:
            value = self._store.get(gid, 0) >> 8
        mode = value & 0xFF
        if not self._valid(mode):
            value = self._cache[DEFAULT_TTS_KEY]
            mode = value & 0xFF
        name = self._modes[mode]
        if name == BAIDU:
            return Speaker(name, mode, (value & 0x0F00) >> 8)
        if name == MOCKINGBIRD:
            return Speaker(name, mode, (value & 0xF000) >> 12)
        if not self.api_key:
            raise ValueError("no valid speaker")
        return Speaker(name, mode, mode)

    def reset_sound_mode(self, gid: int) -> None:
        """Put the group's stored voice settings back to the default ones."""
        index = self._store.get(DEFAULT_TTS_KEY, 0)
        self._store[gid] = (self._store.get(gid, 0) & 0xFF) | ((index & ~0xFF) << 8)

    def set_default_sound_mode(self, name: str, baiduper: int, mockingsynt: int) -> None:
        """Choose the voice used where a group has no valid choice of its own."""
        index = self._index_of(name)
        self._cache[DEFAULT_TTS_KEY] = index
        self._store[DEFAULT_TTS_KEY] = (
            (index & 0xFF)
            | ((baiduper << 8) & 0x0F00)
            | ((mockingsynt << 12) & 0xF000)
        )
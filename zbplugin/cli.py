"""Command line entry: flags, configuration file handling and start-up."""

from __future__ import annotations

import argparse
import json
import logging
import re
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

from zbplugin.banner import BANNER

log = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:6700"
DEFAULT_NICKNAME = "大尾立"
SECOND_NICKNAME = "来伟"
HELP_HINT = '可发送"/服务列表"查看 bot 功能'

_INT64 = re.compile(r"[+-]?[0-9]+")


@dataclass
class WSClient:
    """A websocket connection the bot dials out to."""

    url: str
    access_token: str = ""


@dataclass
class WSServer:
    """A websocket endpoint the bot listens on."""

    url: str
    access_token: str = ""


@dataclass
class BotConfig:
    """Bot settings together with its drivers."""

    nickname: list[str] = field(default_factory=list)
    command_prefix: str = ""
    super_users: list[int] = field(default_factory=list)
    ring_len: int = 0
    latency: timedelta = timedelta(0)
    max_process_time: timedelta = timedelta(0)
    ws: list[WSClient] = field(default_factory=list)
    wss: list[WSServer] = field(default_factory=list)


def _uint(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}")
    return number


def _parse_int64(value: str) -> int | None:
    if not _INT64.fullmatch(value):
        return None
    number = int(value)
    if not -(2**63) <= number < 2**63:
        return None
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line flags; extra numeric arguments become super users."""
    parser = argparse.ArgumentParser(prog="zbplugin")
    parser.add_argument("-d", action="store_true", help="Enable debug level log and higher.")
    parser.add_argument("-w", action="store_true", help="Enable warning level log and higher.")
    parser.add_argument("-t", default="", help="Set AccessToken of WSClient.")
    parser.add_argument("-u", default=DEFAULT_URL, help="Set Url of WSClient.")
    parser.add_argument("-n", default=DEFAULT_NICKNAME, help="Set default nickname.")
    parser.add_argument("-p", default="/", help="Set command prefix.")
    parser.add_argument("-c", default="", help="Run from config file.")
    parser.add_argument("-s", default="", help="Save default config to file and exit.")
    parser.add_argument("-l", type=_uint, default=233, help="Response latency (ms).")
    parser.add_argument("-r", type=_uint, default=4096, help="Receiving buffer ring size.")
    parser.add_argument("-x", type=_uint, default=4, help="Max process time (min).")
    parser.add_argument("rest", nargs="*", help="Super user ids.")
    options = parser.parse_args(argv)
    options.super_users = [
        number for number in map(_parse_int64, options.rest) if number is not None
    ]
    return options


def build_config(options: argparse.Namespace) -> BotConfig:
    """Build the configuration described by parsed flags."""
    return BotConfig(
        nickname=[options.n, SECOND_NICKNAME],
        command_prefix=options.p,
        super_users=list(options.super_users),
        ring_len=options.r,
        latency=timedelta(milliseconds=options.l),
        max_process_time=timedelta(minutes=options.x),
        ws=[WSClient(options.u, options.t)],
        wss=[],
    )


def _to_ns(value: timedelta) -> int:
    return (value // timedelta(microseconds=1)) * 1000


def _from_ns(value: int) -> timedelta:
    return timedelta(microseconds=value // 1000)


def _config_to_dict(config: BotConfig) -> dict[str, Any]:
    return {
        "zero": {
            "nickname": config.nickname,
            "command_prefix": config.command_prefix,
            "super_users": config.super_users,
            "ring_len": config.ring_len,
            "latency": _to_ns(config.latency),
            "max_process_time": _to_ns(config.max_process_time),
        },
        "ws": [{"Url": c.url, "AccessToken": c.access_token} for c in config.ws],
        "wss": [{"Url": s.url, "AccessToken": s.access_token} for s in config.wss],
    }


def _config_from_dict(data: dict[str, Any]) -> BotConfig:
    zero = data.get("zero") or {}
    return BotConfig(
        nickname=list(zero.get("nickname") or []),
        command_prefix=zero.get("command_prefix", ""),
        super_users=[int(u) for u in zero.get("super_users") or []],
        ring_len=int(zero.get("ring_len", 0)),
        latency=_from_ns(int(zero.get("latency", 0))),
        max_process_time=_from_ns(int(zero.get("max_process_time", 0))),
        ws=[
            WSClient(item.get("Url", ""), item.get("AccessToken", ""))
            for item in data.get("ws") or []
        ],
        wss=[
            WSServer(item.get("Url", ""), item.get("AccessToken", ""))
            for item in data.get("wss") or []
        ],
    )


def load_config(path: str | Path) -> BotConfig:
    """Read a configuration file written by save_config."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError("configuration must be a JSON object")
    return _config_from_dict(data)


def save_config(config: BotConfig, path: str | Path) -> None:
    """Write a configuration as JSON."""
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(_config_to_dict(config), handle, ensure_ascii=False)
        handle.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Parse flags, load or save configuration and print the start-up banner."""
    options = parse_args(argv)
    logging.basicConfig(format="%(message)s")
    level = logging.INFO
    if options.d and not options.w:
        level = logging.DEBUG
    if options.w:
        level = logging.WARNING
    logging.getLogger().setLevel(level)

    if options.c:
        config = load_config(options.c)
        log.info("[main] 从 %s 读取配置文件", options.c)
    else:
        config = build_config(options)
        if options.s:
            save_config(config, options.s)
            log.info("[main] 配置文件已保存到 %s", options.s)
            return 0

    print("\n======================[ZeroBot-Plugin]======================")
    print(BANNER)
    print(HELP_HINT)
    print("============================================================\n")
    log.debug(
        "[main] nickname=%s prefix=%s drivers=%d",
        config.nickname,
        config.command_prefix,
        len(config.ws) + len(config.wss),
    )
    return 0
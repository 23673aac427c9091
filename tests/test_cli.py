import json
from datetime import timedelta

import pytest

from zbplugin import cli
from zbplugin.banner import BANNER


def test_parse_args_defaults():
    options = cli.parse_args([])
    assert options.u == "ws://127.0.0.1:6700"
    assert options.p == "/"
    assert options.n == "大尾立"
    assert (options.l, options.r, options.x) == (233, 4096, 4)
    assert options.super_users == []


def test_parse_args_collects_numeric_super_users():
    options = cli.parse_args(["-p", "#", "123", "abc", "456", "9" * 30])
    assert options.super_users == [123, 456]
    assert options.p == "#"


def test_parse_args_rejects_negative_uint():
    with pytest.raises(SystemExit):
        cli.parse_args(["-l", "-5"])


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        cli.parse_args(["-h"])
    assert info.value.code == 0


def test_build_config_from_flags():
    options = cli.parse_args(["-n", "bot", "-t", "token", "-l", "100", "-x", "2", "42"])
    config = cli.build_config(options)
    assert config.nickname == ["bot", "来伟"]
    assert config.super_users == [42]
    assert config.latency == timedelta(milliseconds=100)
    assert config.max_process_time == timedelta(minutes=2)
    assert config.ws == [cli.WSClient("ws://127.0.0.1:6700", "token")]
    assert config.wss == []


def test_save_and_load_round_trip(tmp_path):
    config = cli.build_config(cli.parse_args(["7", "8"]))
    config.wss.append(cli.WSServer("ws://0.0.0.0:6701", "token"))
    path = tmp_path / "config.json"
    cli.save_config(config, path)
    assert cli.load_config(path) == config


def test_saved_file_layout(tmp_path):
    path = tmp_path / "config.json"
    cli.save_config(cli.build_config(cli.parse_args([])), path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"zero", "ws", "wss"}
    assert data["zero"]["ring_len"] == 4096
    assert data["zero"]["latency"] == 233_000_000


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        cli.load_config(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        cli.load_config(tmp_path / "missing.json")


def test_main_save_writes_default_config(tmp_path):
    path = tmp_path / "saved.json"
    assert cli.main(["-s", str(path)]) == 0
    assert cli.load_config(path) == cli.build_config(cli.parse_args([]))


def test_main_prints_banner(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert BANNER in out


def test_main_runs_from_config_file(tmp_path, capsys):
    path = tmp_path / "run.json"
    cli.save_config(cli.build_config(cli.parse_args(["-n", "x"])), path)
    assert cli.main(["-c", str(path)]) == 0
    assert BANNER in capsys.readouterr().out
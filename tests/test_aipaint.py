import json

import pytest

from zbplugin.aipaint import ServerConfig


def test_round_trip(tmp_path):
    path = tmp_path / "cfg.json"
    ServerConfig(path).update("http://localhost:8000", "token", 5)
    loaded = ServerConfig(path)
    loaded.load()
    assert (loaded.base_url, loaded.token, loaded.interval) == ("http://localhost:8000", "token", 5)


def test_file_keys(tmp_path):
    path = tmp_path / "cfg.json"
    ServerConfig(path).update("http://localhost", "token", 3)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"base_url", "token", "interval"}


def test_empty_values_keep_old(tmp_path):
    cfg = ServerConfig(tmp_path / "cfg.json")
    cfg.update("http://localhost", "token", 1)
    cfg.update("", "", 9)
    assert (cfg.base_url, cfg.token, cfg.interval) == ("http://localhost", "token", 9)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="no server config"):
        ServerConfig(tmp_path / "none.json").load()


def test_load_skips_when_complete(tmp_path):
    cfg = ServerConfig(tmp_path / "none.json", "http://localhost", "token", 2)
    cfg.load()
    assert cfg.interval == 2
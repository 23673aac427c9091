"""Server settings for the AI painting service, kept in a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ServerConfig:
    """Base URL, token and send interval of the painting server."""

    file: str | Path
    base_url: str = ""
    token: str = ""
    interval: int = 0

    def update(self, base_url: str, token: str, interval: int) -> None:
        """Change the settings (empty strings keep old values) and save them."""
        if base_url:
            self.base_url = base_url
        if token:
            self.token = token
        self.interval = interval
        data = {"base_url": self.base_url, "token": self.token, "interval": self.interval}
        with open(self.file, "w", encoding="utf-8") as handle:
            handle.write(json.dumps(data, ensure_ascii=False, separators=(",", ":")) + "\n")

    def load(self) -> None:
        """Read the settings from file unless all of them are already set."""
        if self.base_url and self.token and self.interval != 0:
            return
        path = Path(self.file)
        if not path.exists():
            raise FileNotFoundError("no server config")
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("server config must be a JSON object")
        if "base_url" in data:
            self.base_url = str(data["base_url"])
        if "token" in data:
            self.token = str(data["token"])
        if "interval" in data:
            self.interval = int(data["interval"])
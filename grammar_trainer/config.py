from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "host": "127.0.0.1",
    "port": 8766,
    "default_category": "all",
    "default_difficulty": "all",
    "log_level": "INFO",
    "max_sessions": 500,
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Settings:
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]
    default_category: str = DEFAULTS["default_category"]
    default_difficulty: str = DEFAULTS["default_difficulty"]
    log_level: str = DEFAULTS["log_level"]
    max_sessions: int = DEFAULTS["max_sessions"]

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "default_category": self.default_category,
            "default_difficulty": self.default_difficulty,
            "log_level": self.log_level,
            "max_sessions": self.max_sessions,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4, ensure_ascii=False) + "\n")

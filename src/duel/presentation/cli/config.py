"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from duel.ai.types import AITier

_DEFAULT_TIER = int(AITier.SITUATIONAL)
_DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "MonsterDuel"
        return Path.home() / "MonsterDuel"
    return Path.home() / ".config" / "monster_duel"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_tier(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return _DEFAULT_TIER
    if value not in {int(tier) for tier in AITier}:
        return _DEFAULT_TIER
    return value


def _normalize_log_level(value: object) -> str:
    if not isinstance(value, str):
        return _DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    return level if level in LOG_LEVELS else _DEFAULT_LOG_LEVEL


def _defaults() -> Dict[str, object]:
    return {"default_tier": _DEFAULT_TIER, "log_level": _DEFAULT_LOG_LEVEL}


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, json.JSONDecodeError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "default_tier": _normalize_tier(raw.get("default_tier")),
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "default_tier": _normalize_tier(config.get("default_tier")),
        "log_level": _normalize_log_level(config.get("log_level")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")

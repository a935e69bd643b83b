"""Settings for hintline. Stored as JSON at ~/.hintline/settings.json."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from hintline.grammar import DEFAULT_GRAMMARS

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_CAPACITY = 8192


@dataclass
class ShellSettings:
    buffer_capacity: int = DEFAULT_BUFFER_CAPACITY
    # None means $PATH.
    search_path: str | None = None
    log_level: str = "warning"
    commands: list[dict[str, Any]] = field(default_factory=lambda: list(DEFAULT_GRAMMARS))


def settings_from_dict(data: dict[str, Any]) -> ShellSettings:
    """Deserialize settings from a JSON-compatible dict."""
    defaults = ShellSettings()
    commands = data.get("commands")
    if commands is not None and not isinstance(commands, list):
        logger.warning("Ignoring commands setting, expected a list: %r", commands)
    return ShellSettings(
        buffer_capacity=int(data.get("bufferCapacity", defaults.buffer_capacity)),
        search_path=data.get("searchPath", defaults.search_path),
        log_level=data.get("logLevel", defaults.log_level),
        commands=list(commands) if isinstance(commands, list) else defaults.commands,
    )


def settings_to_dict(settings: ShellSettings) -> dict[str, Any]:
    """Serialize settings to a JSON-compatible dict."""
    data: dict[str, Any] = {
        "bufferCapacity": settings.buffer_capacity,
        "logLevel": settings.log_level,
        "commands": settings.commands,
    }
    if settings.search_path is not None:
        data["searchPath"] = settings.search_path
    return data


def get_config_dir() -> Path:
    return Path(os.environ.get("HINTLINE_CONFIG_DIR", Path.home() / ".hintline"))


def get_settings_path() -> Path:
    return get_config_dir() / "settings.json"


def load_settings(path: Path | None = None) -> ShellSettings:
    settings_path = path or get_settings_path()
    if not settings_path.exists():
        return ShellSettings()
    try:
        data = json.loads(settings_path.read_text())
        return settings_from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Error reading settings from %s: %s", settings_path, e)
        return ShellSettings()


def save_settings(settings: ShellSettings, path: Path | None = None) -> None:
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings_to_dict(settings), indent=2))

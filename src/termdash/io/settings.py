"""Settings file I/O for termdash.

Manages a JSON settings file at XDG_CONFIG_HOME/termdash/settings.json and
the typed Config view of it. Unknown keys in the file are preserved on save.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

REFRESH_MIN = 5
REFRESH_MAX = 3600

DEFAULT_COLORS = MappingProxyType({
    "accent": "bold cyan",
    "selected": "reverse",
    "muted": "dim",
    "error": "bold red",
    "status": "on grey23",
    "border": "cyan",
})


@dataclass(frozen=True)
class Config:
    refresh_interval: int = 60
    base_url: str = ""
    demo: bool = True
    show_stale: bool = True
    compact_list: bool = False
    debug: bool = False
    colors: Mapping[str, str] = field(default_factory=lambda: DEFAULT_COLORS, hash=False)

    def with_value(self, key: str, value) -> "Config":
        return replace(self, **{key: value})


def clamp_interval(seconds: int) -> int:
    return max(REFRESH_MIN, min(REFRESH_MAX, int(seconds)))


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / termdash / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "termdash" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def config_from_dict(data: Mapping) -> Config:
    """Build a Config from raw settings, dropping values of the wrong type."""
    defaults = Config()
    interval = data.get("refresh_interval", defaults.refresh_interval)
    if isinstance(interval, bool) or not isinstance(interval, int):
        interval = defaults.refresh_interval
    colors = dict(DEFAULT_COLORS)
    raw_colors = data.get("colors", {})
    if isinstance(raw_colors, dict):
        colors.update({str(k): str(v) for k, v in raw_colors.items() if isinstance(v, str)})

    def _bool(key: str, default: bool) -> bool:
        value = data.get(key, default)
        return value if isinstance(value, bool) else default

    base_url = data.get("base_url", "")
    return Config(
        refresh_interval=clamp_interval(interval),
        base_url=base_url if isinstance(base_url, str) else "",
        demo=_bool("demo", defaults.demo),
        show_stale=_bool("show_stale", defaults.show_stale),
        compact_list=_bool("compact_list", defaults.compact_list),
        debug=_bool("debug", defaults.debug),
        colors=MappingProxyType(colors),
    )


def config_to_dict(config: Config) -> dict:
    # debug is a per-run switch, never persisted
    return {
        "refresh_interval": config.refresh_interval,
        "base_url": config.base_url,
        "demo": config.demo,
        "show_stale": config.show_stale,
        "compact_list": config.compact_list,
        "colors": dict(config.colors),
    }


def load_config() -> Config:
    """Load Config from the settings file; TERMDASH_DEBUG=1 forces debug on."""
    config = config_from_dict(load_settings())
    if _env_flag("TERMDASH_DEBUG"):
        config = replace(config, debug=True)
    return config


def save_config(config: Config) -> Path:
    """Merge config into the settings file and save. Returns the path written."""
    data = load_settings()
    data.update(config_to_dict(config))
    save_settings(data)
    return get_config_path()

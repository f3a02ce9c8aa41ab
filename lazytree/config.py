"""Persistent JSON config for default CLI options.

Stores hidden-file preference, color mode, theme name and depth limit.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
COLOR_MODES = ("auto", "always", "never")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks rendering.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_show_hidden(config: dict[str, object] | None = None) -> bool:
    """Return persisted hidden-file preference; non-booleans mean ``False``."""
    value = (load_config() if config is None else config).get("show_hidden")
    return value if isinstance(value, bool) else False


def load_color_mode(config: dict[str, object] | None = None) -> str:
    """Return persisted color mode, defaulting to ``auto``."""
    value = (load_config() if config is None else config).get("color")
    if isinstance(value, str) and value.strip().lower() in COLOR_MODES:
        return value.strip().lower()
    return "auto"


def load_theme_name(config: dict[str, object] | None = None) -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = (load_config() if config is None else config).get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_max_depth(config: dict[str, object] | None = None) -> int | None:
    """Return persisted depth limit; booleans and negatives are rejected."""
    value = (load_config() if config is None else config).get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def save_defaults(show_hidden: bool, color: str, theme: str | None, max_depth: int | None) -> None:
    """Persist the effective options of one invocation as new defaults."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    config["color"] = color if color in COLOR_MODES else "auto"
    if theme:
        config["theme"] = theme
    else:
        config.pop("theme", None)
    config["max_depth"] = max_depth if max_depth is not None and max_depth >= 0 else None
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "COLOR_MODES",
    "load_config",
    "save_config",
    "load_show_hidden",
    "load_color_mode",
    "load_theme_name",
    "load_max_depth",
    "save_defaults",
]

"""Persistent JSON preferences for prompt rendering and list prompts.

Stores theme name, color preference, default page size, and vim navigation.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .options import DEFAULT_PAGE_SIZE
from .theme import RenderConfig, normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "termsurvey"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class SelectionDefaults:
    page_size: int = DEFAULT_PAGE_SIZE
    vim_mode: bool = False


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

    Filesystem errors are logged and ignored so prompts keep working when
    config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans are accepted; anything else reads as ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _load_page_size(data: dict[str, object]) -> int:
    value = data.get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_PAGE_SIZE
    return value


def load_theme_name() -> str:
    value = load_config().get("theme")
    return normalize_theme_name(value if isinstance(value, str) else None)


def save_theme_name(name: str) -> None:
    config = load_config()
    config["theme"] = normalize_theme_name(name)
    save_config(config)


def load_no_color() -> bool:
    return _load_bool(load_config(), "no_color")


def save_no_color(no_color: bool) -> None:
    config = load_config()
    config["no_color"] = bool(no_color)
    save_config(config)


def load_render_config(theme: str | None = None, no_color: bool | None = None) -> RenderConfig:
    """Build a render config from saved preferences and explicit overrides."""
    if theme is None:
        theme = load_theme_name()
    if no_color is None:
        no_color = load_no_color()
    return RenderConfig.build(theme, no_color=no_color)


def load_selection_defaults() -> SelectionDefaults:
    """Return saved page size and vim mode for list prompts."""
    data = load_config()
    return SelectionDefaults(page_size=_load_page_size(data), vim_mode=_load_bool(data, "vim_mode"))


def save_selection_defaults(defaults: SelectionDefaults) -> None:
    config = load_config()
    config["page_size"] = max(1, int(defaults.page_size))
    config["vim_mode"] = bool(defaults.vim_mode)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "SelectionDefaults",
    "load_config",
    "save_config",
    "load_theme_name",
    "save_theme_name",
    "load_no_color",
    "save_no_color",
    "load_render_config",
    "load_selection_defaults",
    "save_selection_defaults",
]

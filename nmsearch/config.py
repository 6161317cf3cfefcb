"""Persistent JSON config helpers.

Stores search preferences (dependency folder name, last-folder reuse,
discovery strategy) plus display settings (Pygments style, UI theme).
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .discovery import DEFAULT_DISCOVERY, DISCOVERY_STRATEGIES
from .paths import join_relative

logger = logging.getLogger(__name__)

APP_NAME = "nmsearch"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_DEPENDENCY_FOLDER = "node_modules"
DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class SearchPreferences:
    """Options recognized by the search command."""

    use_last_folder: bool = False
    path: str = DEFAULT_DEPENDENCY_FOLDER
    discovery: str = DEFAULT_DISCOVERY

    def with_overrides(
        self,
        *,
        use_last_folder: bool | None = None,
        path: str | None = None,
        discovery: str | None = None,
    ) -> SearchPreferences:
        """Return a copy with every non-``None`` override applied."""
        updated = self
        if use_last_folder is not None:
            updated = replace(updated, use_last_folder=bool(use_last_folder))
        if path is not None:
            normalized = normalize_dependency_folder(path)
            if normalized is not None:
                updated = replace(updated, path=normalized)
        if discovery is not None and discovery in DISCOVERY_STRATEGIES:
            updated = replace(updated, discovery=discovery)
        return updated


def normalize_dependency_folder(value: object) -> str | None:
    """Return a workspace-relative folder name, or ``None`` when unusable."""
    if not isinstance(value, str):
        return None
    normalized = join_relative("", value.strip())
    if not normalized or normalized.startswith("..") or normalized.startswith("/"):
        return None
    return normalized


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("config %s not loaded: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config location never breaks a search.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_preferences() -> SearchPreferences:
    """Load search preferences, dropping values of the wrong type."""
    data = load_config()
    use_last_folder = data.get("use_last_folder")
    path = normalize_dependency_folder(data.get("path"))
    discovery = data.get("discovery")
    return SearchPreferences(
        use_last_folder=use_last_folder if isinstance(use_last_folder, bool) else False,
        path=path if path is not None else DEFAULT_DEPENDENCY_FOLDER,
        discovery=discovery if discovery in DISCOVERY_STRATEGIES else DEFAULT_DISCOVERY,
    )


def save_preferences(preferences: SearchPreferences) -> None:
    """Persist search preferences alongside any other stored keys."""
    config = load_config()
    config["use_last_folder"] = bool(preferences.use_last_folder)
    config["path"] = preferences.path
    config["discovery"] = preferences.discovery
    save_config(config)


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_style() -> str:
    """Load the Pygments style used when displaying files."""
    return _load_name("style") or DEFAULT_STYLE


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_name("theme")


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_DEPENDENCY_FOLDER",
    "DEFAULT_STYLE",
    "SearchPreferences",
    "normalize_dependency_folder",
    "load_config",
    "save_config",
    "load_preferences",
    "save_preferences",
    "load_style",
    "load_theme_name",
]

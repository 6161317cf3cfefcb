"""UI theme definitions and selection helpers.

Themes color the picker chrome and error messages. Syntax highlighting of
opened files is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the picker and notifier."""

    name: str
    reset: str
    reverse: str
    header: str
    query: str
    hint: str
    separator: str
    count: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;38;5;81m",
    query="\033[38;5;229m",
    hint="\033[2;38;5;250m",
    separator="\033[2m",
    count="\033[38;5;109m",
    error="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;38;5;45m",
    query="\033[38;5;153m",
    hint="\033[2;38;5;110m",
    separator="\033[2;38;5;31m",
    count="\033[38;5;73m",
    error="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="\033[7m",
    header="",
    query="",
    hint="",
    separator="",
    count="",
    error="",
)

_THEMES = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

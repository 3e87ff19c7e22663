"""
Terminal color themes.

``THEMES`` is the fixed registry of named themes. The active theme is held by
a ``ThemeState`` cell owned by whoever owns the terminal session; it is
threaded to handlers through the execution context and is only ever replaced
wholesale.
"""

from __future__ import annotations

import logging

from portfolio_terminal.constants import DEFAULT_THEME_NAME
from portfolio_terminal.core.domain.model_bases import ValueObject

logger = logging.getLogger(__name__)


class ThemeColors(ValueObject):
    background: str
    text: str
    accent: str
    error: str
    success: str


class Theme(ValueObject):
    name: str
    colors: ThemeColors


THEMES: dict[str, Theme] = {
    "default": Theme(
        name="default",
        colors=ThemeColors(
            background="#0a0e27",
            text="#e0e0e0",
            accent="#00ff9f",
            error="#ff6b6b",
            success="#51cf66",
        ),
    ),
    "cyberpunk": Theme(
        name="cyberpunk",
        colors=ThemeColors(
            background="#0d0221",
            text="#f72585",
            accent="#7209b7",
            error="#ff006e",
            success="#4cc9f0",
        ),
    ),
    "matrix": Theme(
        name="matrix",
        colors=ThemeColors(
            background="#000000",
            text="#00ff00",
            accent="#00ff00",
            error="#ff0000",
            success="#00ff00",
        ),
    ),
    "dracula": Theme(
        name="dracula",
        colors=ThemeColors(
            background="#282a36",
            text="#f8f8f2",
            accent="#bd93f9",
            error="#ff5555",
            success="#50fa7b",
        ),
    ),
}


def get_theme(name: str) -> Theme | None:
    """Look a theme up by case-insensitive name."""
    return THEMES.get(name.strip().lower())


def theme_names() -> list[str]:
    return list(THEMES)


class ThemeState:
    """Single-owner cell holding the active theme of one terminal session."""

    def __init__(self, initial: Theme | str | None = None) -> None:
        if initial is None:
            initial = DEFAULT_THEME_NAME
        if isinstance(initial, str):
            resolved = get_theme(initial)
            if resolved is None:
                raise ValueError(f"Unknown theme: {initial}")
            initial = resolved
        self._current = initial

    @property
    def current(self) -> Theme:
        return self._current

    def set(self, theme: Theme) -> None:
        logger.debug("Theme changed from %s to %s", self._current.name, theme.name)
        self._current = theme

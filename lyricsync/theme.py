"""Light and dark theme selection."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

_DARK_SUFFIX = "-dark.css"


class ColorScheme(Enum):
    """Which colour scheme the user asked for."""

    LIGHT = "Light"
    DARK = "Dark"
    AUTO = "Auto"


def replace_suffix(value: str, old_suffix: str, new_suffix: str) -> str:
    """Replace ``old_suffix`` at the end of ``value``; otherwise return it unchanged."""
    if value.endswith(old_suffix):
        return value[: len(value) - len(old_suffix)] + new_suffix
    return value


def themed_path(theme_path: Path, dark: bool) -> Path:
    """Return the light or dark variant of a theme stylesheet path."""
    theme_path = Path(theme_path)
    name = theme_path.name
    if not name:
        return theme_path
    if dark:
        if not name.endswith(_DARK_SUFFIX):
            return theme_path.with_name(replace_suffix(name, ".css", _DARK_SUFFIX))
    elif name.endswith(_DARK_SUFFIX):
        return theme_path.with_name(replace_suffix(name, _DARK_SUFFIX, ".css"))
    return theme_path


def prefer_dark(color_scheme: ColorScheme, detected_dark: bool) -> bool:
    """Whether a dark theme is preferred, given what the system reports."""
    if color_scheme is ColorScheme.LIGHT:
        return False
    if color_scheme is ColorScheme.DARK:
        return True
    return detected_dark
"""Choosing what the two lyric labels show."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .model import LyricLine


class LyricDisplayMode(Enum):
    """How the original lyric and its translation share the two labels."""

    SHOW_BOTH = "ShowBoth"
    SHOW_BOTH_REV = "ShowBothRev"
    ORIGIN = "Origin"
    PREFER_TRANSLATION = "PreferTranslation"

    def __str__(self) -> str:
        return self.value


def _text(line: Optional[LyricLine]) -> str:
    return line.text.strip() if line is not None else ""


def lyric_labels(
    mode: LyricDisplayMode,
    translation: Optional[LyricLine],
    origin: Optional[LyricLine],
) -> tuple[str, str]:
    """Return the texts of the upper and the lower label."""
    if mode is LyricDisplayMode.SHOW_BOTH:
        above = translation if translation is not None else origin
        below = origin if translation is not None else None
        return _text(above), _text(below)
    if mode is LyricDisplayMode.SHOW_BOTH_REV:
        return _text(origin), _text(translation)
    if mode is LyricDisplayMode.ORIGIN:
        return _text(origin), ""
    if mode is LyricDisplayMode.PREFER_TRANSLATION:
        return _text(translation if translation is not None else origin), ""
    raise ValueError(f"unknown display mode: {mode!r}")


def reset_labels(
    tip: Optional[str], show_default_text_on_idle: bool, default_text: str
) -> tuple[str, str]:
    """Return the label texts shown when there is no lyric to display."""
    if tip is None:
        tip = default_text if show_default_text_on_idle else ""
    return tip, ""
"""Lyric hints from players and local lyric files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .matching import extract_translated_lyric, filter_original_lyric
from .model import Lyric, LyricLine, TrackMeta

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SongIdHint:
    """The player told which song id a provider knows the track by."""

    song_id: str
    provider: str


@dataclass(frozen=True)
class LyricFileHint:
    """A local lyric file belongs to the track."""

    path: Path


@dataclass(frozen=True)
class MetadataHint:
    """The player offers better metadata than it reports normally."""

    meta: TrackMeta


def get_lrc_path(music_path: Union[str, Path]) -> Optional[Path]:
    """Replace the file extension with ``.lrc``; None when there is no file name."""
    path = Path(music_path)
    if not path.name or path.name == "..":
        return None
    return path.with_suffix(".lrc")


def split_translation(olyric: Lyric) -> tuple[Lyric, Lyric]:
    """Split translation lines merged into a lyric at the same timestamps.

    Returns ``(original, translation)``; the translation is absent when
    there was nothing to split.
    """
    if olyric.lines is None:
        return olyric, Lyric()
    tlyric_lines = extract_translated_lyric(olyric.lines)
    if not tlyric_lines:
        return olyric, Lyric()
    olyric_lines = filter_original_lyric(olyric.lines, tlyric_lines)
    log.debug("extracted original lyric: %r", olyric_lines)
    log.debug("extracted translation lyric: %r", tlyric_lines)
    return Lyric(olyric_lines), Lyric(tlyric_lines)


def load_local_lyric(
    path: Union[str, Path],
    parse_lrc: Callable[[Iterable[str]], list[LyricLine]],
    extract_translated: bool,
) -> Optional[tuple[Lyric, Lyric]]:
    """Load a local LRC file as ``(original, translation)``.

    ``parse_lrc`` receives the lines of the file and raises ValueError on
    bad input. Returns None when nothing could be loaded.
    """
    olyric = Lyric()
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.error("cannot read lyric from hint: %s", exc)
    else:
        try:
            olyric = Lyric(parse_lrc(text.lstrip("\ufeff").splitlines()))
        except ValueError as exc:
            log.error("cannot parse lyric from hint: %s", exc)

    tlyric = Lyric()
    if extract_translated:
        olyric, tlyric = split_translation(olyric)

    if olyric.is_none() and tlyric.is_none():
        return None
    return olyric, tlyric
"""Writing lyrics out as LRC files."""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import Iterable, Optional, Union

from .model import LyricLine, LyricState, TrackMeta
from .timefmt import gettext

log = logging.getLogger(__name__)

_MS = timedelta(milliseconds=1)


def make_lrc_line(text: object, start_time: timedelta) -> str:
    """Format one LRC line as ``[mm:ss.mmm]text``."""
    ms = start_time // _MS
    seconds, ms = divmod(ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    return f"[{minutes:02}:{seconds:02}.{ms:03}]{text}"


def render_lrc(
    lines: Iterable[LyricLine],
    meta: Optional[TrackMeta],
    offset_ms: int,
    version: str,
) -> str:
    """Render lines and track metadata as LRC text."""
    parts = ["[re:lyricsync]\n", f"[ve:{version}]\n"]
    if meta is not None:
        if meta.title is not None:
            parts.append(f"[ti:{meta.title}]\n")
        if meta.artists is not None:
            parts.append(f"[ar:{', '.join(meta.artists)}]\n")
        if meta.album is not None:
            parts.append(f"[al:{meta.album}]\n")
    else:
        log.warning("metainfo not found! will not generate")

    parts.append(f"[offset:{offset_ms}]\n")
    parts.append("\n")
    parts.extend(make_lrc_line(line.text, line.start_time) + "\n" for line in lines)
    return "".join(parts)


def export_lyric(
    path: Union[str, Path],
    lyric_state: LyricState,
    meta: Optional[TrackMeta],
    offset_ms: int,
    is_original: bool,
    version: str,
) -> str:
    """Write the original or translated lyric to ``path`` and return the text.

    Raises ValueError when the chosen lyric has no timed lines.
    """
    log.info("export lyric: original=%s", is_original)
    lyric = lyric_state.origin if is_original else lyric_state.translation
    if lyric.lines is None:
        raise ValueError(gettext("lyric not existing!"))

    output = render_lrc(lyric.lines, meta, offset_ms, version)
    Path(path).write_text(output, encoding="utf-8")
    return output
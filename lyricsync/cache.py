"""On-disk cache of fetched lyrics, keyed by track metadata."""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Optional, Union

from .model import Lyric, LyricLine, LyricState, TrackMeta

log = logging.getLogger(__name__)

_US = timedelta(microseconds=1)


def _debug_str(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _with_fraction(whole: int, frac: int, width: int) -> str:
    digits = f"{frac:0{width}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def _debug_duration(value: timedelta) -> str:
    nanos_total = max(value // _US, 0) * 1000
    secs, nanos = divmod(nanos_total, 1_000_000_000)
    if secs:
        return _with_fraction(secs, nanos, 9) + "s"
    if nanos >= 1_000_000:
        return _with_fraction(nanos // 1_000_000, nanos % 1_000_000, 6) + "ms"
    if nanos >= 1000:
        return _with_fraction(nanos // 1000, nanos % 1000, 3) + "µs"
    return f"{nanos}ns"


def _debug_option(value: Optional[str]) -> str:
    return "None" if value is None else f"Some({value})"


def cache_key(track_meta: TrackMeta) -> Optional[str]:
    """Build the text that identifies a track in the cache.

    Returns None for a track without a title: such a track is not cached.
    """
    if track_meta.title is None:
        return None
    artists = (
        None
        if track_meta.artists is None
        else "[" + ", ".join(_debug_str(a) for a in track_meta.artists) + "]"
    )
    album = None if track_meta.album is None else _debug_str(track_meta.album)
    length = None if track_meta.length is None else _debug_duration(track_meta.length)
    return "-".join(
        [
            track_meta.title,
            _debug_option(artists),
            _debug_option(album),
            _debug_option(length),
        ]
    )


def get_cache_path(
    track_meta: TrackMeta, cache_dir: Union[str, Path]
) -> Optional[Path]:
    """Return the cache file for a track, or None when it has no title.

    The file lives three directory levels deep, one per leading digest byte.
    The directories are not created here.
    """
    key = cache_key(track_meta)
    if key is None:
        return None
    log.debug("get_cache_path: received %s", key)
    digest = hashlib.md5(key.encode("utf-8")).hexdigest()
    return Path(cache_dir, digest[0:2], digest[2:4], digest[4:6], f"{digest}.json")


def _lyric_to_json(lyric: Lyric) -> Optional[list[dict]]:
    if lyric.lines is None:
        return None
    return [
        {"text": line.text, "start_time_us": line.start_time // _US}
        for line in lyric.lines
    ]


def _lyric_from_json(data: object) -> Lyric:
    if data is None:
        return Lyric()
    if not isinstance(data, list):
        raise ValueError("lyric must be a list of lines or null")
    lines = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("lyric line must be an object")
        text, micros = item["text"], item["start_time_us"]
        if not isinstance(text, str) or not isinstance(micros, int):
            raise ValueError("malformed lyric line")
        lines.append(LyricLine(text, timedelta(microseconds=micros)))
    return Lyric(lines)


@dataclass
class LyricCache:
    """Contents of one cache file."""

    olyric: Lyric = field(default_factory=Lyric)
    tlyric: Lyric = field(default_factory=Lyric)
    offset: int = 0

    def to_json(self) -> str:
        return json.dumps(
            {
                "olyric": _lyric_to_json(self.olyric),
                "tlyric": _lyric_to_json(self.tlyric),
                "offset": self.offset,
            },
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, text: str) -> "LyricCache":
        """Parse cache contents; raises ValueError when they are malformed."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("cache must be a JSON object")
        try:
            offset = data["offset"]
            if not isinstance(offset, int) or isinstance(offset, bool):
                raise ValueError("offset must be an integer")
            return cls(
                olyric=_lyric_from_json(data["olyric"]),
                tlyric=_lyric_from_json(data["tlyric"]),
                offset=offset,
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc}") from exc


def load_lyric_cache(path: Union[str, Path]) -> Optional[LyricCache]:
    """Read a cache file; None when it is missing, unreadable or malformed."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    try:
        return LyricCache.from_json(text)
    except ValueError as exc:
        log.error("cache parse error: %s from %s", exc, path)
        return None


def update_lyric_cache(cache_path: Union[str, Path], lyric_state: LyricState) -> bool:
    """Write the lyrics to the cache file; return whether it was written.

    Empty lyrics are never cached. The stored offset is always 0.
    """
    cache_path = Path(cache_path)
    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        log.error("cannot create cache dir %s: %s", cache_path.parent, exc)
        return False

    if lyric_state.origin.is_none() and lyric_state.translation.is_none():
        return False

    content = LyricCache(lyric_state.origin, lyric_state.translation, 0).to_json()
    try:
        cache_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        log.error("cannot write cache %s: %s", cache_path, exc)
        return False
    log.info("cached to %s", cache_path)
    return True
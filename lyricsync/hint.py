"""Lyric hints derived from player metadata."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Union
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

from .tricks import LyricFileHint, SongIdHint, get_lrc_path

NETEASE = "netease"
QQMUSIC = "qqmusic"

Hint = Union[SongIdHint, LyricFileHint]


def _strip_prefix(value: str, prefix: str) -> Optional[str]:
    return value[len(prefix):] if value.startswith(prefix) else None


def _file_url_to_path(url: str) -> Optional[Path]:
    parts = urlsplit(url)
    if parts.scheme != "file" or parts.netloc not in ("", "localhost"):
        return None
    if not parts.path.startswith("/"):
        return None
    return Path(url2pathname(unquote(parts.path)))


def hint_from_metadata(
    identity: str,
    bus_name: str,
    metadata: Mapping[str, object],
    enable_local_lyric: bool,
) -> Optional[Hint]:
    """Work out a lyric hint from a player's identity, bus name and metadata."""
    raw_url = metadata.get("xesam:url")
    url = raw_url if isinstance(raw_url, str) else None

    if identity in ("ElectronNCM", "Qcm") or bus_name in (
        "musicfox",
        "NeteaseCloudMusicGtk4",
    ):
        track_id = metadata.get("mpris:trackid")
        if not isinstance(track_id, str):
            return None
        return SongIdHint(track_id.split("/")[-1], NETEASE)

    if identity == "feeluown":
        if url is None:
            return None
        song_id = _strip_prefix(url, "fuo://netease/songs/")
        if song_id is not None:
            return SongIdHint(song_id, NETEASE)
        song_id = _strip_prefix(url, "fuo://qqmusic/songs/")
        return SongIdHint(song_id, QQMUSIC) if song_id is not None else None

    if identity == "YesPlayMusic":
        if url is None:
            return None
        song_id = _strip_prefix(url, "/trackid/")
        return SongIdHint(song_id, NETEASE) if song_id is not None else None

    if url is None or not url.startswith("file://") or not enable_local_lyric:
        return None
    music_path = _file_url_to_path(url)
    if music_path is None:
        return None
    lyric_path = get_lrc_path(music_path)
    if lyric_path is None or not lyric_path.exists():
        return None
    return LyricFileHint(lyric_path)
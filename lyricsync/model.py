"""Core data types shared by the lyric synchronisation code."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta
from pathlib import Path
from typing import Optional, Sequence


@dataclass(frozen=True)
class TrackMeta:
    """Metadata reported by the connected player."""

    unique_song_id: Optional[str] = None
    title: Optional[str] = None
    album: Optional[str] = None
    artists: Optional[tuple[str, ...]] = None
    length: Optional[timedelta] = None

    def __post_init__(self) -> None:
        if self.artists is not None and not isinstance(self.artists, tuple):
            object.__setattr__(self, "artists", tuple(self.artists))

    def same_track(self, other: "TrackMeta") -> bool:
        """Compare two tracks, ignoring their length.

        Some players report a length that changes while a track plays.
        """
        return replace(self, length=None) == replace(other, length=None)


@dataclass
class TrackState:
    """Playing state of the current track, excluding lyrics."""

    metainfo: Optional[TrackMeta] = None
    paused: bool = False
    cache_path: Optional[Path] = None


@dataclass(frozen=True)
class LyricLine:
    """One line of lyric text and the moment it starts."""

    text: str
    start_time: timedelta


@dataclass
class Lyric:
    """A lyric: either absent (``lines is None``) or a list of timed lines."""

    lines: Optional[list[LyricLine]] = None

    def __post_init__(self) -> None:
        if self.lines is not None and not isinstance(self.lines, list):
            self.lines = list(self.lines)

    def is_none(self) -> bool:
        """Return True when there is no lyric at all."""
        return self.lines is None


@dataclass
class LyricState:
    """Original lyric and its translation for the current track."""

    origin: Lyric = field(default_factory=Lyric)
    translation: Lyric = field(default_factory=Lyric)


@dataclass(frozen=True)
class SongInfo:
    """A single search result returned by a lyric provider."""

    id: str
    title: str
    singer: str
    album: Optional[str]
    length: timedelta


@dataclass(frozen=True)
class PlayerId:
    """A player that can be connected to."""

    player_name: str
    inner_id: str


class PlayerStatusError(Exception):
    """The player cannot currently be synchronised."""


class PlayerMissing(PlayerStatusError):
    """No player is connected, or the player went away."""


class PlayerPaused(PlayerStatusError):
    """The player is paused."""


class PlayerStopped(PlayerStatusError):
    """The player is stopped."""


class PlayerUnsupported(PlayerStatusError):
    """The player does not provide what is needed to follow it."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind


def lines_of(lyric: Lyric) -> Sequence[LyricLine]:
    """Return the lines of a lyric, or an empty sequence when there is none."""
    return lyric.lines if lyric.lines is not None else ()
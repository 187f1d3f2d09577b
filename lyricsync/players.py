"""Following media players: choosing one, reading its state and timing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Iterable, Mapping, Optional

from .model import (
    PlayerMissing,
    PlayerPaused,
    PlayerStopped,
    PlayerUnsupported,
    TrackMeta,
)

log = logging.getLogger(__name__)

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# days from 1601-01-01 to 1970-01-01
_UNIVERSAL_TIME_EPOCH_DIFF = timedelta(days=134774)


class PlaybackStatus(Enum):
    """Playback status reported by a player."""

    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


@dataclass(frozen=True)
class MediaPlayer:
    """A player on the bus; ``status`` is None when its progress cannot be read."""

    identity: str
    bus_name: str
    status: Optional[PlaybackStatus] = None


def find_next_player(
    active: Optional[MediaPlayer],
    players: Iterable[MediaPlayer],
    identity_blacklist: Iterable[str],
    name_blacklist: Iterable[str],
) -> Optional[MediaPlayer]:
    """Find a likely active player, ignoring blacklisted ones."""
    identities = set(identity_blacklist)
    names = set(name_blacklist)

    def allowed(player: MediaPlayer) -> bool:
        return player.identity not in identities and player.bus_name not in names

    if active is None:
        return None
    if allowed(active):
        return active
    return next(
        (p for p in players if p.status is PlaybackStatus.PLAYING and allowed(p)),
        None,
    )


def _apply_offset(start: datetime, offset_ms: int) -> datetime:
    try:
        return start + timedelta(milliseconds=offset_ms)
    except OverflowError as exc:
        raise PlayerUnsupported("infinite offset time") from exc


def playback_start(position: timedelta, now: datetime, offset_ms: int) -> datetime:
    """Moment the track started, from its position at ``now``, shifted by the offset."""
    try:
        start = now - position
    except OverflowError as exc:
        raise PlayerUnsupported("Position is greater than SystemTime") from exc
    return _apply_offset(start, offset_ms)


def universal_time_start(
    universal_time: Optional[int], position: timedelta, offset_ms: int
) -> datetime:
    """Moment the track started, from a position last updated at ``universal_time``.

    ``universal_time`` counts 100 ns ticks since 1601-01-01 UTC; when it is
    None the position is taken as current.
    """
    if universal_time is None:
        return playback_start(position, datetime.now(timezone.utc), offset_ms)
    try:
        update = timedelta(microseconds=universal_time // 10) - _UNIVERSAL_TIME_EPOCH_DIFF
    except OverflowError as exc:
        raise PlayerUnsupported("Bug from WinRT: infinite LastUpdateTime!") from exc
    if update < timedelta(0):
        raise PlayerUnsupported("update_time was not set")
    try:
        updated_at = _UNIX_EPOCH + update
    except OverflowError as exc:
        raise PlayerUnsupported("Bug from WinRT: infinite LastUpdateTime!") from exc
    try:
        start = updated_at - position
    except OverflowError as exc:
        raise PlayerUnsupported("Infinite position!") from exc
    return _apply_offset(start, offset_ms)


def smtc_status(code: int) -> PlaybackStatus:
    """Interpret a media session playback status code.

    Returns PLAYING; raises the matching PlayerStatusError otherwise.
    """
    if code == 0:
        raise PlayerMissing("closed")
    if code in (1, 2, 5):
        raise PlayerPaused("paused")
    if code == 3:
        raise PlayerStopped("stopped")
    if code == 4:
        return PlaybackStatus.PLAYING
    raise ValueError(f"unknown PlaybackStatus {code}!")


def _str(value: object) -> Optional[str]:
    return value if isinstance(value, str) else None


def track_meta_from_mpris(metadata: Mapping[str, object]) -> TrackMeta:
    """Build track metadata from an MPRIS metadata mapping."""
    raw_artists = metadata.get("xesam:artist")
    artists: Optional[tuple[str, ...]] = None
    if isinstance(raw_artists, (list, tuple)):
        artists = tuple(str(a) for a in raw_artists)

    raw_length = metadata.get("mpris:length")
    length: Optional[timedelta] = None
    if isinstance(raw_length, int) and not isinstance(raw_length, bool) and raw_length >= 0:
        length = timedelta(microseconds=raw_length)

    return TrackMeta(
        unique_song_id=_str(metadata.get("mpris:trackid")),
        title=_str(metadata.get("xesam:title")),
        album=_str(metadata.get("xesam:album")),
        artists=artists,
        length=length,
    )


def track_meta_from_smtc(
    title: Optional[str],
    album: Optional[str],
    artist: Optional[str],
    end_time: Optional[timedelta],
) -> TrackMeta:
    """Build track metadata from media session properties.

    A zero end time means the length is unknown.
    """
    length = end_time if end_time else None
    return TrackMeta(
        unique_song_id=None,
        title=title,
        album=album,
        artists=(artist,) if artist is not None else None,
        length=length,
    )
"""Playing state and lyric state of the synchronisation loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from .cache import get_cache_path, update_lyric_cache
from .model import (
    LyricState,
    PlayerMissing,
    PlayerPaused,
    PlayerStatusError,
    PlayerStopped,
    PlayerUnsupported,
    TrackMeta,
    TrackState,
)

log = logging.getLogger(__name__)


def _no_reconnect() -> bool:
    return False


def _no_reset() -> None:
    return None


def _no_labels(above: str, below: str) -> None:
    return None


@dataclass
class SyncState:
    """Everything the synchronisation loop keeps between ticks.

    The callbacks connect the state to the player and the window:
    ``reconnect`` looks for another player, ``reset_labels`` clears the
    lyric labels and ``set_labels`` shows two lines of text.
    """

    cache_dir: Path
    track: TrackState = field(default_factory=TrackState)
    lyric: LyricState = field(default_factory=LyricState)
    lyric_offset_ms: int = 0
    reconnect: Callable[[], bool] = _no_reconnect
    reset_labels: Callable[[], None] = _no_reset
    set_labels: Callable[[str, str], None] = _no_labels

    def need_fetch_lyric(self, track_meta: TrackMeta) -> bool:
        """Record a newly reported track; True when its lyric must be fetched."""
        playing = self.track.metainfo
        need = playing is None or not playing.same_track(track_meta)
        if need:
            self.track.metainfo = track_meta
            self.track.cache_path = get_cache_path(track_meta, self.cache_dir)
        return need

    def clean_lyric(self) -> None:
        """Forget the current lyric and its offset."""
        self.lyric = LyricState()
        self.lyric_offset_ms = 0

    def set_current_lyric(self, lyric: LyricState) -> None:
        self.lyric = lyric

    def apply_status(self, status: Optional[PlayerStatusError]) -> None:
        """React to the outcome of one sync attempt; None means playing."""
        if status is None:
            self.track.paused = False
        elif isinstance(status, PlayerMissing):
            self.reconnect()
            self.reset_labels()
            self.clean_lyric()
            self.track = TrackState()
        elif isinstance(status, PlayerUnsupported):
            self.set_labels("Unsupported Player", status.kind)
            self.clean_lyric()
            log.error("%s", status.kind)
        elif isinstance(status, PlayerPaused):
            self.track.paused = True
        elif isinstance(status, PlayerStopped):
            self.reset_labels()
            self.clean_lyric()
            self.track = TrackState()
        else:
            self.track.paused = False

    def lyric_cache_path(self) -> Optional[Path]:
        return self.track.cache_path

    def update_cache(self) -> bool:
        """Write the current lyric to the track's cache file, if it has one."""
        cache_path = self.track.cache_path
        if cache_path is None:
            return False
        return update_lyric_cache(cache_path, self.lyric)
"""Searching the configured lyric providers for the track playing."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .matching import match_likely_lyric
from .model import Lyric, LyricState, SongInfo, TrackMeta

log = logging.getLogger(__name__)


class FetchError(Exception):
    """No lyric could be found for the track."""


class LyricProvider(ABC):
    """A source of lyrics that can be searched and queried."""

    @property
    @abstractmethod
    def unique_name(self) -> str:
        """Name that identifies the provider."""

    @abstractmethod
    async def search_song_detailed(
        self, album: str, artists: Sequence[str], title: str
    ) -> list[SongInfo]:
        """Search for songs matching the given album, artists and title."""

    @abstractmethod
    async def query_lyric(self, song_id: str) -> object:
        """Fetch the raw lyric of a song."""

    @abstractmethod
    def parse_lyric(self, raw: object) -> Lyric:
        """Extract the original lyric from a raw lyric."""

    @abstractmethod
    def parse_translated_lyric(self, raw: object) -> Lyric:
        """Extract the translated lyric from a raw lyric."""


def _make_state(origin: Lyric, translation: Lyric, title: str, artists: str) -> LyricState:
    log.debug("original lyric: %r", origin)
    log.debug("translated lyric: %r", translation)
    if origin.lines is None:
        log.info("No lyric for %s - %s", artists, title)
    if translation.lines is None:
        log.info("No translated lyric for %s - %s", artists, title)
    return LyricState(origin=origin, translation=translation)


async def fetch_lyric(
    track_meta: TrackMeta,
    providers: Sequence[LyricProvider],
    length_toleration_ms: int,
    hint_result: Optional[tuple[Lyric, Lyric]] = None,
) -> LyricState:
    """Find the lyric of a track.

    A lyric already obtained from a player hint is used as it is. Otherwise
    every provider is searched at once, and the matched songs are queried in
    the configured provider order until one lyric is fetched.
    Raises FetchError when nothing was found.
    """
    title = track_meta.title if track_meta.title is not None else "Unknown"
    album = track_meta.album
    artists = list(track_meta.artists or ())
    artists_str = (
        ",".join(track_meta.artists) if track_meta.artists is not None else "Unknown"
    )

    if hint_result is not None:
        log.info("fetched lyrics by player hint")
        origin, translation = hint_result
        return _make_state(origin, translation, title, artists_str)

    providers = list(providers)
    singer = ",".join(artists) if artists else None

    async def search(provider: LyricProvider) -> Optional[tuple[str, int]]:
        songs = await provider.search_song_detailed(album or "", artists, title)
        return match_likely_lyric(
            album, title, singer, track_meta.length, songs, length_toleration_ms
        )

    outcomes = await asyncio.gather(
        *(search(provider) for provider in providers), return_exceptions=True
    )

    candidates: list[tuple[LyricProvider, str, int]] = []
    for provider, outcome in zip(providers, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            log.debug("search failed on %s: %s", provider.unique_name, outcome)
            continue
        if outcome is None:
            continue
        song_id, weight = outcome
        candidates.append((provider, song_id, weight))

    if not candidates:
        log.info("Failed searching for %s - %s", artists_str, title)
        raise FetchError("no result")

    for provider, song_id, weight in candidates:
        try:
            raw = await provider.query_lyric(song_id)
        except Exception as exc:
            log.error("%s when get lyric for %s on %s", exc, title, provider.unique_name)
            continue
        origin = provider.parse_lyric(raw)
        translation = provider.parse_translated_lyric(raw)
        log.info(
            "fetched %s from %s with weight %s", song_id, provider.unique_name, weight
        )
        return _make_state(origin, translation, title, artists_str)

    raise FetchError("no result")
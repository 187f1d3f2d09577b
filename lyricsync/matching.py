"""Choosing the best search result and splitting merged translations."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import timedelta
from itertools import pairwise
from typing import Iterable, Optional, Sequence

from .model import LyricLine, SongInfo

log = logging.getLogger(__name__)

_MS = timedelta(milliseconds=1)


def _bigrams(seq: Sequence) -> Counter:
    return Counter(zip(seq, seq[1:]))


def sorensen_similarity(a: Sequence, b: Sequence) -> float:
    """Sørensen–Dice coefficient of two sequences over their bigrams.

    Returns a value in [0, 1]; 1 means the sequences match.
    """
    a, b = list(a), list(b)
    if len(a) < 2 or len(b) < 2:
        return 1.0 if a == b else 0.0
    first, second = _bigrams(a), _bigrams(b)
    common = sum((first & second).values())
    return 2.0 * common / (sum(first.values()) + sum(second.values()))


def fuzzy_match_song(
    title: Sequence,
    album: Optional[Sequence],
    singer: Optional[Sequence],
    r_title: Sequence,
    r_album: Optional[Sequence],
    r_singer: Sequence,
) -> float:
    """Weighted likelihood that a search result is the track playing."""
    title_likelihood = sorensen_similarity(title, r_title)

    def singer_likelihood() -> float:
        return sorensen_similarity(singer or "", r_singer)

    def album_likelihood() -> float:
        return sorensen_similarity(album or "", r_album or "")

    if singer is not None and album is not None:
        return title_likelihood * 0.4 + singer_likelihood() * 0.2 + album_likelihood() * 0.4
    if singer is not None:
        return title_likelihood * 0.7 + singer_likelihood() * 0.3
    if album is not None:
        return title_likelihood * 0.8 + album_likelihood() * 0.2
    return title_likelihood


def _as_millis(value: timedelta) -> int:
    return value // _MS


def match_likely_lyric(
    album: Optional[str],
    title: str,
    singer: Optional[str],
    length: Optional[timedelta],
    search_result: Sequence[SongInfo],
    length_toleration_ms: int,
) -> Optional[tuple[str, int]]:
    """Pick the most likely song id from search results.

    Returns ``(song_id, weight)`` where weight is 1 for a length match,
    0 for a fuzzy match and 2 when falling back to the first result.
    """
    if length is not None:
        wanted = _as_millis(length)
        for song in search_result:
            if abs(_as_millis(song.length) - wanted) <= length_toleration_ms:
                return song.id, 1

    # A bare title is usually messy; fuzzy matching it is not worth it.
    if album is not None or singer is not None:
        best: Optional[SongInfo] = None
        best_key = -1
        for song in search_result:
            likelihood = fuzzy_match_song(
                title, album, singer, song.title, song.album, song.singer
            )
            log.debug("p=%s for %r", likelihood, song)
            key = max(int(likelihood * 1024.0), 0)
            # ties keep the later result
            if key >= best_key:
                best, best_key = song, key
        if best is not None:
            return best.id, 0

    if search_result:
        return search_result[0].id, 2
    return None


def extract_translated_lyric(lyric: Iterable[LyricLine]) -> list[LyricLine]:
    """Return the second of every pair of adjacent lines sharing a timestamp.

    The lines must be sorted by start time.
    """
    return [b for a, b in pairwise(lyric) if a.start_time == b.start_time]


def filter_original_lyric(
    lyric: Iterable[LyricLine], tlyric: Iterable[LyricLine]
) -> list[LyricLine]:
    """Drop lines of ``lyric`` that appear in ``tlyric`` at the same time."""
    translated = {line.start_time: line.text for line in tlyric}
    return [
        line
        for line in lyric
        if line.start_time not in translated or translated[line.start_time] != line.text
    ]
from datetime import timedelta
from pathlib import Path

import pytest

from lyricsync.model import (
    Lyric,
    LyricLine,
    LyricState,
    PlayerId,
    PlayerMissing,
    PlayerPaused,
    PlayerStatusError,
    PlayerStopped,
    PlayerUnsupported,
    SongInfo,
    TrackMeta,
    TrackState,
)


def test_same_track_ignores_length():
    a = TrackMeta(title="Song", album="Album", artists=["A"], length=timedelta(seconds=10))
    b = TrackMeta(title="Song", album="Album", artists=["A"], length=timedelta(seconds=99))
    assert a.same_track(b)
    assert a != b


def test_same_track_detects_different_title():
    a = TrackMeta(title="Song")
    b = TrackMeta(title="Other")
    assert not a.same_track(b)


def test_artists_list_is_normalised_to_tuple():
    meta = TrackMeta(artists=["x", "y"])
    assert meta.artists == ("x", "y")
    assert meta == TrackMeta(artists=("x", "y"))


def test_lyric_default_is_none():
    assert Lyric().is_none()


def test_lyric_with_empty_lines_is_not_none():
    assert not Lyric(lines=[]).is_none()


def test_lyric_lines_accept_iterables():
    line = LyricLine("a", timedelta(seconds=1))
    lyric = Lyric(lines=(line,))
    assert lyric.lines == [line]


def test_lyric_state_defaults_are_independent():
    first = LyricState()
    second = LyricState()
    assert first.origin.is_none() and first.translation.is_none()
    assert first.origin is not second.origin


def test_track_state_defaults():
    state = TrackState()
    assert state.metainfo is None
    assert state.paused is False
    assert state.cache_path is None
    state.cache_path = Path("x.json")
    assert TrackState().cache_path is None


def test_song_info_and_player_id_equality():
    song = SongInfo("1", "t", "s", None, timedelta(seconds=3))
    assert song == SongInfo("1", "t", "s", None, timedelta(seconds=3))
    assert PlayerId("name", "id").inner_id == "id"


@pytest.mark.parametrize("exc", [PlayerMissing, PlayerPaused, PlayerStopped])
def test_player_status_hierarchy(exc):
    err = exc()
    caught = None
    try:
        raise err
    except PlayerStatusError as status:
        caught = status
    assert caught is err


def test_player_unsupported_keeps_kind():
    err = PlayerUnsupported("cannot fetch progress")
    assert err.kind == "cannot fetch progress"
    assert str(err) == "cannot fetch progress"
    caught = None
    try:
        raise err
    except PlayerStatusError as status:
        caught = status
    assert caught is err
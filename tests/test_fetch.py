from datetime import timedelta

import pytest

from lyricsync.fetch import FetchError, LyricProvider, fetch_lyric
from lyricsync.model import Lyric, LyricLine, SongInfo, TrackMeta


class FakeProvider(LyricProvider):
    def __init__(self, name, songs=(), lyrics=None, search_error=None, query_error=None):
        self._name = name
        self.songs = list(songs)
        self.lyrics = lyrics or {}
        self.search_error = search_error
        self.query_error = query_error
        self.searches = []
        self.queries = []

    @property
    def unique_name(self):
        return self._name

    async def search_song_detailed(self, album, artists, title):
        self.searches.append((album, list(artists), title))
        if self.search_error is not None:
            raise self.search_error
        return self.songs

    async def query_lyric(self, song_id):
        self.queries.append(song_id)
        if self.query_error is not None:
            raise self.query_error
        return self.lyrics[song_id]

    def parse_lyric(self, raw):
        return Lyric([LyricLine(raw, timedelta(0))])

    def parse_translated_lyric(self, raw):
        return Lyric()


def song(song_id, seconds, title="Song", singer="Singer", album="Album"):
    return SongInfo(song_id, title, singer, album, timedelta(seconds=seconds))


META = TrackMeta(
    title="Song", album="Album", artists=("Singer",), length=timedelta(seconds=200)
)


@pytest.mark.asyncio
async def test_hint_result_is_used_without_searching():
    provider = FakeProvider("p", search_error=RuntimeError("must not search"))
    origin = Lyric([LyricLine("hello", timedelta(seconds=1))])
    state = await fetch_lyric(META, [provider], 1000, (origin, Lyric()))
    assert state.origin == origin
    assert state.translation.is_none()
    assert provider.searches == []


@pytest.mark.asyncio
async def test_length_match_is_queried():
    provider = FakeProvider(
        "p",
        songs=[song("far", 100), song("near", 200)],
        lyrics={"near": "near text", "far": "far text"},
    )
    state = await fetch_lyric(META, [provider], 1000, None)
    assert provider.queries == ["near"]
    assert state.origin.lines[0].text == "near text"


@pytest.mark.asyncio
async def test_search_arguments_for_unknown_track():
    provider = FakeProvider("p", songs=[song("a", 10)], lyrics={"a": "x"})
    await fetch_lyric(TrackMeta(), [provider], 1000, None)
    assert provider.searches == [("", [], "Unknown")]


@pytest.mark.asyncio
async def test_no_results_raises():
    provider = FakeProvider("p", songs=[])
    with pytest.raises(FetchError):
        await fetch_lyric(META, [provider], 1000, None)


@pytest.mark.asyncio
async def test_failed_search_is_skipped():
    broken = FakeProvider("broken", search_error=RuntimeError("offline"))
    working = FakeProvider("working", songs=[song("w", 200)], lyrics={"w": "found"})
    state = await fetch_lyric(META, [broken, working], 1000, None)
    assert state.origin.lines[0].text == "found"


@pytest.mark.asyncio
async def test_failed_query_falls_back_to_next_provider():
    first = FakeProvider("first", songs=[song("a", 200)], query_error=RuntimeError("x"))
    second = FakeProvider("second", songs=[song("b", 200)], lyrics={"b": "second"})
    state = await fetch_lyric(META, [first, second], 1000, None)
    assert first.queries == ["a"]
    assert second.queries == ["b"]
    assert state.origin.lines[0].text == "second"


@pytest.mark.asyncio
async def test_providers_are_tried_in_configured_order():
    first = FakeProvider("first", songs=[song("a", 200)], lyrics={"a": "from first"})
    second = FakeProvider("second", songs=[song("b", 200)], lyrics={"b": "from second"})
    state = await fetch_lyric(META, [first, second], 1000, None)
    assert state.origin.lines[0].text == "from first"
    assert second.queries == []


@pytest.mark.asyncio
async def test_all_queries_failing_raises():
    first = FakeProvider("first", songs=[song("a", 200)], query_error=RuntimeError("x"))
    with pytest.raises(FetchError):
        await fetch_lyric(META, [first], 1000, None)
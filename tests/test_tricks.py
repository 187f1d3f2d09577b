import re
from datetime import timedelta
from pathlib import Path

from lyricsync.model import Lyric, LyricLine
from lyricsync.tricks import get_lrc_path, load_local_lyric, split_translation

_TAG = re.compile(r"\[(\d+):(\d+)\.(\d+)\](.*)")


def parse_lrc(lines):
    result = []
    for line in lines:
        if not line:
            continue
        match = _TAG.fullmatch(line)
        if match is None:
            raise ValueError(f"bad line {line!r}")
        minutes, seconds, millis, text = match.groups()
        start = timedelta(
            minutes=int(minutes), seconds=int(seconds), milliseconds=int(millis)
        )
        result.append(LyricLine(text, start))
    return result


def test_get_lrc_path_replaces_extension():
    assert get_lrc_path("/music/song.mp3") == Path("/music/song.lrc")
    assert get_lrc_path("/music/song") == Path("/music/song.lrc")


def test_get_lrc_path_without_file_name():
    assert get_lrc_path("/") is None
    assert get_lrc_path("") is None


def test_split_translation():
    t = timedelta(seconds=1)
    u = timedelta(seconds=2)
    lyric = Lyric(
        [LyricLine("a", t), LyricLine("A", t), LyricLine("b", u), LyricLine("B", u)]
    )
    origin, translation = split_translation(lyric)
    assert origin.lines == [LyricLine("a", t), LyricLine("b", u)]
    assert translation.lines == [LyricLine("A", t), LyricLine("B", u)]


def test_split_translation_nothing_to_split():
    lyric = Lyric([LyricLine("a", timedelta(seconds=1))])
    origin, translation = split_translation(lyric)
    assert origin == lyric
    assert translation.is_none()


def test_load_local_lyric_strips_bom(tmp_path):
    path = tmp_path / "song.lrc"
    path.write_text("\ufeff[00:01.000]hello\n[00:02.000]world\n", encoding="utf-8")
    origin, translation = load_local_lyric(path, parse_lrc, False)
    assert [line.text for line in origin.lines] == ["hello", "world"]
    assert translation.is_none()


def test_load_local_lyric_extracts_translation(tmp_path):
    path = tmp_path / "song.lrc"
    path.write_text("[00:01.000]hello\n[00:01.000]salut\n", encoding="utf-8")
    origin, translation = load_local_lyric(path, parse_lrc, True)
    assert [line.text for line in origin.lines] == ["hello"]
    assert [line.text for line in translation.lines] == ["salut"]


def test_load_local_lyric_missing_file(tmp_path):
    assert load_local_lyric(tmp_path / "none.lrc", parse_lrc, True) is None


def test_load_local_lyric_parse_error(tmp_path):
    path = tmp_path / "song.lrc"
    path.write_text("garbage\n", encoding="utf-8")
    assert load_local_lyric(path, parse_lrc, False) is None
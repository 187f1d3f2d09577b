from lyricsync.hint import NETEASE, QQMUSIC, hint_from_metadata
from lyricsync.tricks import LyricFileHint, SongIdHint


def test_electron_ncm_trackid():
    meta = {"mpris:trackid": "/org/mpris/MediaPlayer2/123"}
    assert hint_from_metadata("ElectronNCM", "x", meta, False) == SongIdHint(
        "123", NETEASE
    )


def test_musicfox_bus_name():
    meta = {"mpris:trackid": "/com/github/go_musicfox/777"}
    assert hint_from_metadata("any", "musicfox", meta, False) == SongIdHint(
        "777", NETEASE
    )


def test_trackid_missing():
    assert hint_from_metadata("Qcm", "x", {}, False) is None


def test_feeluown_netease_and_qqmusic():
    netease = {"xesam:url": "fuo://netease/songs/42"}
    qq = {"xesam:url": "fuo://qqmusic/songs/abc"}
    assert hint_from_metadata("feeluown", "x", netease, False) == SongIdHint(
        "42", NETEASE
    )
    assert hint_from_metadata("feeluown", "x", qq, False) == SongIdHint("abc", QQMUSIC)


def test_feeluown_other_url():
    meta = {"xesam:url": "fuo://local/songs/1"}
    assert hint_from_metadata("feeluown", "x", meta, True) is None


def test_yesplaymusic():
    meta = {"xesam:url": "/trackid/99"}
    assert hint_from_metadata("YesPlayMusic", "x", meta, False) == SongIdHint(
        "99", NETEASE
    )


def test_local_file_hint(tmp_path):
    music = tmp_path / "my song.flac"
    music.write_bytes(b"")
    lrc = tmp_path / "my song.lrc"
    lrc.write_text("[00:01.00]x", encoding="utf-8")
    meta = {"xesam:url": music.as_uri()}
    assert hint_from_metadata("vlc", "vlc", meta, True) == LyricFileHint(lrc)


def test_local_file_disabled(tmp_path):
    music = tmp_path / "song.flac"
    (tmp_path / "song.lrc").write_text("", encoding="utf-8")
    meta = {"xesam:url": music.as_uri()}
    assert hint_from_metadata("vlc", "vlc", meta, False) is None


def test_local_file_without_lrc(tmp_path):
    meta = {"xesam:url": (tmp_path / "song.flac").as_uri()}
    assert hint_from_metadata("vlc", "vlc", meta, True) is None


def test_remote_url_gives_no_hint():
    meta = {"xesam:url": "https://example.com/song.mp3"}
    assert hint_from_metadata("vlc", "vlc", meta, True) is None
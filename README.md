# lyricsync

`lyricsync` holds the logic of a desktop lyric display: what happens between a
media player reporting a track and the two lines of lyric shown on screen. It
depends on nothing outside the standard library.

## Modules

- `lyricsync.model`: the data types. `TrackMeta` (with `same_track`, which
  compares two tracks while ignoring their length), `TrackState`, `LyricLine`,
  `Lyric` (`lines is None` means no lyric; see `is_none`), `LyricState`,
  `SongInfo`, `PlayerId`, and the exceptions `PlayerStatusError`,
  `PlayerMissing`, `PlayerPaused`, `PlayerStopped` and `PlayerUnsupported`.
- `lyricsync.matching`: `sorensen_similarity` (Sørensen–Dice coefficient over
  bigrams), `fuzzy_match_song` and `match_likely_lyric`, which picks a search
  result by length first (weight 1), then by fuzzy match of title, singer and
  album (weight 0), and finally falls back to the first result (weight 2).
  `extract_translated_lyric` and `filter_original_lyric` split a lyric whose
  translation lines share timestamps with the original lines.
- `lyricsync.timefmt`: `parse_time` reads durations such as `"1.5s"` or
  `"200ms"` into a `timedelta` of whole milliseconds and raises `ParseError`
  (with `kind` set to `"InvalidDecimal"`, `"ExceedsLimits"` or `"IllFormed"`).
  `gettext` translates a message through the standard `gettext` module.
- `lyricsync.lrc`: `make_lrc_line`, `render_lrc` and `export_lyric`, which
  writes the original or translated lyric as an LRC file with `re`, `ve`,
  `ti`, `ar`, `al` and `offset` tags.
- `lyricsync.cache`: `cache_key`, `get_cache_path`, `LyricCache`,
  `load_lyric_cache` and `update_lyric_cache`. A cache file is JSON, named by
  the MD5 digest of the track's key and placed three directories deep, one per
  leading digest byte. Tracks without a title are not cached, empty lyrics are
  never written, and the stored offset is always 0.
- `lyricsync.tricks`: the hint types `SongIdHint`, `LyricFileHint` and
  `MetadataHint`, `get_lrc_path`, `split_translation`, and `load_local_lyric`,
  which reads an `.lrc` file using an LRC parser passed in by the caller.
- `lyricsync.hint`: `hint_from_metadata` recognises players that report a song
  id (giving a `SongIdHint` for provider `"netease"` or `"qqmusic"`) and, when
  local lyrics are enabled, a `file://` URL with an `.lrc` file beside it.
- `lyricsync.state`: `SyncState` keeps the playing track and its lyric between
  sync ticks: `need_fetch_lyric`, `clean_lyric`, `set_current_lyric`,
  `apply_status`, `lyric_cache_path` and `update_cache`.
- `lyricsync.display`: `LyricDisplayMode`, `lyric_labels` (the texts of the
  upper and lower label) and `reset_labels`.
- `lyricsync.theme`: `ColorScheme`, `replace_suffix`, `themed_path` (switches
  between `name.css` and `name-dark.css`) and `prefer_dark`.
- `lyricsync.actions`: `ActionKind`, `PlayAction`, `action_target` (the
  application action name and parameter for a play action) and
  `search_prefill`.
- `lyricsync.instance`: `gen_instance_name` and `choose_instance_name`, which
  returns the application id if it is not already taken, otherwise a
  generated `<app_id>._<8 hex digits>` name.
- `lyricsync.fetch`: the abstract `LyricProvider`, `FetchError`, and the
  coroutine `fetch_lyric`, which searches all providers concurrently and
  queries the matched songs in provider order until one lyric is fetched.
- `lyricsync.players`: `PlaybackStatus`, `MediaPlayer`, `find_next_player`,
  `playback_start`, `universal_time_start`, `smtc_status`,
  `track_meta_from_mpris` and `track_meta_from_smtc`.

## Example

```python
from datetime import timedelta

from lyricsync.matching import match_likely_lyric
from lyricsync.model import SongInfo

results = [
    SongInfo(id="1", title="Song", singer="Someone", album="Album",
             length=timedelta(seconds=200)),
    SongInfo(id="2", title="Song", singer="Singer", album="Album",
             length=timedelta(seconds=180)),
]
print(match_likely_lyric("Album", "Song", "Singer", timedelta(seconds=180), results, 1000))
# ('2', 1): matched by length
```

## What it does not do

`lyricsync` is a library with no command and no window. It does not talk to
media players on the session bus or through a media session API: callers pass
in player identities, metadata mappings, positions and status codes. It has no
built-in lyric providers, only the `LyricProvider` interface, and no LRC
parser of its own: `load_local_lyric` takes one as an argument. It shows no
tray icon, applies no stylesheets and detects no system theme.

## Installation

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```
"""Lyric synchronisation: track state, lyric matching, caching, LRC export and player timing."""

__version__ = "0.1.0"
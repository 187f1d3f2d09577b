"""Play actions and the application actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .model import TrackMeta


class ActionKind(Enum):
    """Kinds of play actions that can be requested."""

    CONNECT = "Connect"
    DISCONNECT = "Disconnect"
    RELOAD_LYRIC = "ReloadLyric"
    REFETCH_LYRIC = "RefetchLyric"
    REMOVE_LYRIC = "RemoveLyric"
    SEARCH_LYRIC = "SearchLyric"
    IMPORT_ORIGINAL_LYRIC = "ImportOriginalLyric"
    IMPORT_TRANSLATED_LYRIC = "ImportTranslatedLyric"
    EXPORT_ORIGINAL_LYRIC = "ExportOriginalLyric"
    EXPORT_TRANSLATED_LYRIC = "ExportTranslatedLyric"


@dataclass(frozen=True)
class PlayAction:
    """A play action; only ``CONNECT`` carries a player id."""

    kind: ActionKind
    player_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.CONNECT:
            if self.player_id is None:
                raise ValueError("a connect action needs a player id")
        elif self.player_id is not None:
            raise ValueError(f"{self.kind.value} takes no player id")

    @classmethod
    def connect(cls, player_id: str) -> "PlayAction":
        return cls(ActionKind.CONNECT, player_id)


_TARGETS: dict[ActionKind, tuple[str, Optional[bool]]] = {
    ActionKind.DISCONNECT: ("disconnect", None),
    ActionKind.RELOAD_LYRIC: ("reload-lyric", None),
    ActionKind.REFETCH_LYRIC: ("refetch-lyric", None),
    ActionKind.REMOVE_LYRIC: ("remove-lyric", None),
    ActionKind.SEARCH_LYRIC: ("search-lyric", None),
    ActionKind.IMPORT_ORIGINAL_LYRIC: ("import-lyric", True),
    ActionKind.IMPORT_TRANSLATED_LYRIC: ("import-lyric", False),
    ActionKind.EXPORT_ORIGINAL_LYRIC: ("export-lyric", True),
    ActionKind.EXPORT_TRANSLATED_LYRIC: ("export-lyric", False),
}


def action_target(action: PlayAction) -> tuple[str, Union[str, bool, None]]:
    """Return the application action name and its parameter for a play action."""
    if action.kind is ActionKind.CONNECT:
        return "connect", action.player_id
    return _TARGETS[action.kind]


def search_prefill(track_meta: Optional[TrackMeta]) -> tuple[str, str, str]:
    """Return title, album and ``/``-joined artists to prefill a lyric search."""
    if track_meta is None:
        return "", "", ""
    artists = "/".join(track_meta.artists) if track_meta.artists is not None else ""
    return track_meta.title or "", track_meta.album or "", artists
"""m3u8parser - Parse, filter and rewrite extended M3U8 playlists.

Entries keep the exact source lines they were built from, so a parsed
playlist can be written back out unchanged or reduced to some groups.
"""

from .errors import FetchFailure, InvalidPlaylistFormat, PlaylistError, ValidationFailure
from .models import (
    Playlist,
    PlaylistHeader,
    PlaylistItem,
    PlaylistItemCatchup,
    PlaylistItemGroup,
    PlaylistItemHttp,
    PlaylistItemTvg,
)
from .parser import Attribute, Option, Parameter
from .playlist import M3U8Parser
from .writer import write_playlist

__all__ = [
    "M3U8Parser",
    "Playlist",
    "PlaylistHeader",
    "PlaylistItem",
    "PlaylistItemCatchup",
    "PlaylistItemGroup",
    "PlaylistItemHttp",
    "PlaylistItemTvg",
    "Attribute",
    "Option",
    "Parameter",
    "PlaylistError",
    "InvalidPlaylistFormat",
    "FetchFailure",
    "ValidationFailure",
    "write_playlist",
]

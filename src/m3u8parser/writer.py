"""Playlist text output."""

from collections.abc import Iterable

from .models import Playlist, PlaylistHeader, PlaylistItem


def write_items(header: PlaylistHeader, items: Iterable[PlaylistItem]) -> str:
    """Join the header line and each entry's raw text with newlines.

    Nothing is re-derived from parsed fields; output is a replay of the
    captured source lines.
    """
    body = "\n".join(item.raw for item in items)
    return f"{header.raw}\n{body}"


def write_playlist(playlist: Playlist) -> str:
    return write_items(playlist.header, playlist.items)

"""Parsing of the #EXTM3U header line."""

from ..errors import InvalidPlaylistFormat
from ..models import PlaylistHeader
from .attributes import EXTM3U, HEADER_ATTRIBUTES, get_attribute


def parse_header(line: str | None) -> PlaylistHeader:
    """Parse the first playlist line.

    Args:
        line: The first line of the playlist, untouched

    Returns:
        PlaylistHeader with the supported attributes that carry a value

    Raises:
        InvalidPlaylistFormat: If the line does not start with #EXTM3U
    """
    if line is None or not line.startswith(EXTM3U):
        raise InvalidPlaylistFormat("Playlist is not valid: missing #EXTM3U header", line_number=1)

    attrs = {}
    for attr in HEADER_ATTRIBUTES:
        value = get_attribute(attr, line)
        if value:
            attrs[attr.value] = value

    return PlaylistHeader(attrs=attrs, raw=line)

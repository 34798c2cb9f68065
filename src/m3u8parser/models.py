"""Pydantic data models for m3u8parser.

Every playlist entry crossing a module boundary is an instance of these
models, so field shapes are checked at construction time. Strict field types
are used so that values are never silently coerced.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class PlaylistModel(BaseModel):
    """Base model with the shared validation contract."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        revalidate_instances="always",
    )


class PlaylistHeader(PlaylistModel):
    """The `#EXTM3U` line and the attributes recognised on it."""

    attrs: dict[StrictStr, StrictStr] = Field(
        default_factory=dict, description="Supported header attributes (x-tvg-url / url-tvg)"
    )
    raw: StrictStr = Field(description="Header line exactly as read")


class PlaylistItemTvg(PlaylistModel):
    """Guide metadata taken from the `tvg-*` attributes."""

    id: StrictStr
    name: StrictStr
    url: StrictStr
    logo: StrictStr
    rec: StrictStr


class PlaylistItemGroup(PlaylistModel):
    title: StrictStr


class PlaylistItemHttp(PlaylistModel):
    """Transport overrides applied when the stream is requested."""

    referrer: StrictStr
    user_agent: StrictStr = Field(alias="user-agent")


class PlaylistItemCatchup(PlaylistModel):
    type: StrictStr
    source: StrictStr
    days: StrictStr


class PlaylistItem(PlaylistModel):
    """A single playlist entry.

    `raw` holds every source line folded into the entry, newline-joined, and
    is the only input used when writing the playlist back out.
    """

    name: StrictStr = Field(description="Display name (text after the last comma)")
    index: StrictInt = Field(description="Source line number of the #EXTINF line, 1-based")
    tvg: PlaylistItemTvg
    group: PlaylistItemGroup
    http: PlaylistItemHttp
    url: StrictStr | None = Field(default=None, description="Stream URL once a locator line is seen")
    raw: StrictStr
    timeshift: StrictStr
    catchup: PlaylistItemCatchup

    def revise(self, **changes) -> "PlaylistItem":
        """Return a validated copy with `changes` applied.

        Nested fields may be given as models or as plain dicts.
        """
        data = self.model_dump()
        data.update(changes)
        return PlaylistItem.model_validate(data)

    def with_raw(self, line: str) -> "PlaylistItem":
        """Return a copy with `line` appended to the raw text."""
        return self.revise(raw=f"{self.raw}\n{line}" if self.raw else line)


class Playlist(PlaylistModel):
    """A header plus its entries in source order."""

    header: PlaylistHeader
    items: list[PlaylistItem] = Field(default_factory=list)
    raw: StrictStr | None = Field(default=None, description="Source text the playlist was parsed from")


class ExcludedItem(PlaylistModel):
    """An entry left out by a filter."""

    name: str = Field(description="Display name of the entry")
    group: str = Field(description="Category title of the entry")
    reason: str = Field(description="Reason for exclusion")
    filter_name: str | None = Field(default=None, description="Filter that caused exclusion")

"""M3U8Parser: parse, filter and write extended M3U playlists.

Each parser instance owns its items, group index and filter cache. An
instance is not safe to use from several threads or tasks at once.
"""

from collections.abc import Iterable
from pathlib import Path

from .cache import FilterCache
from .filters import GroupFilter
from .groups import GroupIndex
from .logging import get_logger
from .models import Playlist, PlaylistHeader, PlaylistItem
from .parser import EntryStateMachine, parse_header, split_lines
from .sources import FileSource, HttpSource, PlaylistSource, fetch_text_async
from .writer import write_items

logger = get_logger(__name__)


class M3U8Parser:
    """Parser for extended M3U8 playlists.

    Examples:
        parser = M3U8Parser(playlist=text)
        parser = M3U8Parser(url="http://example.com/playlist.m3u8")

        news = parser.get_playlist_by_group("news")
        parser.filter_playlist(["sports", "movies"])
        text = parser.write()

    Raises:
        InvalidPlaylistFormat: If the text does not start with #EXTM3U
        FetchFailure: If `url` could not be retrieved
        ValidationFailure: If an entry does not match the model contract
    """

    def __init__(
        self,
        playlist: str | None = None,
        url: str | None = None,
        source: PlaylistSource | None = None,
    ):
        """Initialize the parser.

        Args:
            playlist: Playlist text to parse; an empty string parses nothing
            url: Location to retrieve and parse
            source: Source used for `url`, defaults to an HTTP source
        """
        self.raw_playlist = ""
        self.header = PlaylistHeader(raw="")
        self.items: dict[int, PlaylistItem] = {}
        self.groups = GroupIndex()
        self.filtered_cache = FilterCache()

        if playlist:
            self.parse(playlist)

        if url:
            self.fetch_playlist(url, source=source)

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> "M3U8Parser":
        """Read and parse a playlist file."""
        text = FileSource(encoding=encoding).read(str(path))
        parser = cls()
        parser.parse(text)
        return parser

    def parse(self, raw: str) -> None:
        """Parse `raw`, replacing all current state.

        Nothing is replaced if the header is invalid or an entry fails
        validation.
        """
        lines = split_lines(raw)
        header = parse_header(lines[0].raw if lines else None)

        groups = GroupIndex()
        machine = EntryStateMachine(groups=groups)
        items = machine.run(lines[1:])

        self.raw_playlist = raw
        self.header = header
        self.items = items
        self.groups = groups
        self.filtered_cache.clear()

        logger.info("playlist_parsed", items=len(items), groups=len(groups))

    def fetch_playlist(self, url: str, source: PlaylistSource | None = None) -> None:
        """Retrieve the playlist at `url` and parse it."""
        if source is not None:
            logger.debug("reading_from_source", source=source.name, location=url)
            self.parse(source.read(url))
            return
        with HttpSource() as http:
            text = http.read(url)
        self.parse(text)

    async def fetch_playlist_async(self, url: str, client=None) -> None:
        """Retrieve the playlist at `url` with an async client and parse it.

        Args:
            url: Playlist location
            client: Optional `httpx.AsyncClient` to reuse
        """
        text = await fetch_text_async(url, client=client)
        self.parse(text)

    def get_playlist(self) -> Playlist:
        return Playlist(
            header=self.header,
            items=list(self.items.values()),
            raw=self.raw_playlist,
        )

    @property
    def playlist_groups(self) -> list[str]:
        """Group titles in the order they were first seen."""
        return self.groups.titles

    def _filter(self, prefixes: Iterable[str]) -> list[PlaylistItem]:
        return GroupFilter(prefixes).select(list(self.items.values()))

    def get_playlist_by_group(self, group: str) -> Playlist:
        """Return entries whose group starts with `group`, ignoring case.

        The prefix is first resolved against the known groups, so several
        groups can match. Results are cached per prefix.
        """
        key = FilterCache.key("group", group)
        cached = self.filtered_cache.get(key)
        if cached is not None:
            return cached

        resolved = self.groups.matching(group)
        playlist = Playlist(header=self.header, items=self._filter(resolved))
        self.filtered_cache.set(key, playlist)

        logger.debug("group_filtered", group=group, matched_groups=resolved, items=len(playlist.items))
        return playlist

    def get_playlists_by_groups(self, groups: list[str]) -> Playlist:
        """Return entries whose group starts with any of `groups`, ignoring case.

        Entries are listed prefix by prefix in the order requested, each
        entry once. Results are cached per requested list.
        """
        key = FilterCache.key("groups", groups)
        cached = self.filtered_cache.get(key)
        if cached is not None:
            return cached

        playlist = Playlist(header=self.header, items=self._filter(groups))
        self.filtered_cache.set(key, playlist)

        logger.debug("groups_filtered", groups=groups, items=len(playlist.items))
        return playlist

    def filter_playlist(self, filters: list[str] | None = None) -> None:
        """Keep only entries in groups matching `filters`.

        Each filter is resolved against the known groups first. `None`
        leaves the playlist untouched.
        """
        if filters is None:
            return

        resolved: list[str] = []
        for prefix in filters:
            for title in self.groups.matching(prefix):
                if title not in resolved:
                    resolved.append(title)

        self.update_playlist(self.get_playlists_by_groups(resolved))

    def update_items(self, items: dict[int, PlaylistItem]) -> None:
        """Replace the items as given.

        The filter cache is kept; see `clear_filter_cache()`.
        """
        self.items = items

    def update_playlist(self, playlist: Playlist) -> None:
        """Replace the items with the playlist's entries, keyed from 0.

        Every entry is validated. The filter cache is kept; see
        `clear_filter_cache()`.
        """
        self.items = {
            i: PlaylistItem.model_validate(item) for i, item in enumerate(playlist.items)
        }
        logger.debug("playlist_updated", items=len(self.items))

    def clear_filter_cache(self) -> None:
        self.filtered_cache.clear()

    def write(self) -> str:
        """Return the playlist text rebuilt from each entry's raw lines."""
        return write_items(self.header, [self.items[key] for key in sorted(self.items)])

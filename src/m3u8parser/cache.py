"""In-memory cache of filtered playlists.

Results are keyed by the requested group names. Entries are NOT
invalidated when the parser's items are replaced through
`update_items()` / `update_playlist()`; a lookup after such a bulk
update can return the result computed from the previous items. A full
re-parse, or an explicit `clear()`, empties the cache.
"""

from collections.abc import Sequence

from .logging import get_logger
from .models import Playlist

logger = get_logger(__name__)

CacheKey = tuple[str, ...]


class FilterCache:
    """Memoizes filtered playlists per requested group selection."""

    def __init__(self):
        self._entries: dict[CacheKey, Playlist] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(kind: str, groups: str | Sequence[str]) -> CacheKey:
        """Build a key from the query kind and the requested names.

        Single-group queries use the group name itself; a set query uses
        the names in the order requested.
        """
        if isinstance(groups, str):
            return (kind, groups)
        return (kind, *groups)

    def get(self, key: CacheKey) -> Playlist | None:
        cached = self._entries.get(key)
        if cached is None:
            self.misses += 1
            return None
        self.hits += 1
        logger.debug("filter_cache_hit", key=key)
        return cached

    def set(self, key: CacheKey, playlist: Playlist) -> None:
        self._entries[key] = playlist

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

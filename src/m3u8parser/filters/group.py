"""Group title prefix filter."""

from collections.abc import Iterable

from ..models import ExcludedItem, PlaylistItem
from . import BaseFilter, FilterResult


def matches_group(title: str, prefix: str) -> bool:
    """Case-insensitive prefix match of a group title."""
    return title.lower().startswith(prefix.lower())


class GroupFilter(BaseFilter):
    """Keep entries whose group title starts with any of the given prefixes.

    Matching ignores case: a title of "Sports" matches "sports" and "Sp"
    but not "ports". Results follow the order of the prefixes, each
    prefix contributing its entries in source order; an entry matched by
    an earlier prefix is not repeated.

    Examples:
        GroupFilter(["news"])
        GroupFilter(["Sports", "Movies"])
    """

    def __init__(self, prefixes: Iterable[str]):
        self.prefixes = list(prefixes)

    @property
    def name(self) -> str:
        return f"group({','.join(self.prefixes)})"

    def _selected_positions(self, items: list[PlaylistItem]) -> list[int]:
        positions: list[int] = []
        seen: set[int] = set()
        for prefix in self.prefixes:
            for pos, item in enumerate(items):
                if pos not in seen and matches_group(item.group.title, prefix):
                    seen.add(pos)
                    positions.append(pos)
        return positions

    def select(self, items: list[PlaylistItem]) -> list[PlaylistItem]:
        """Return the matching entries without an exclusion report."""
        return [items[pos] for pos in self._selected_positions(items)]

    def apply(self, items: list[PlaylistItem]) -> FilterResult:
        positions = self._selected_positions(items)
        kept = set(positions)

        excluded = [
            ExcludedItem(
                name=item.name,
                group=item.group.title,
                reason=f"Group '{item.group.title}' does not match {self.prefixes}",
                filter_name=self.name,
            )
            for pos, item in enumerate(items)
            if pos not in kept
        ]
        return FilterResult(included=[items[pos] for pos in positions], excluded=excluded)

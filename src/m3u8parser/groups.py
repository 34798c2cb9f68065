"""Ordered index of the category (group) titles seen in a playlist."""

from collections.abc import Iterator


class GroupIndex:
    """Insertion-ordered set of distinct group titles.

    Titles are added when an entry is finalized by its locator line and are
    only dropped by `clear()`, which a full re-parse calls.
    """

    def __init__(self, titles: list[str] | None = None):
        self._titles: dict[str, None] = {}
        for title in titles or []:
            self.add(title)

    def add(self, title: str) -> None:
        self._titles.setdefault(title, None)

    def clear(self) -> None:
        self._titles.clear()

    def matching(self, prefix: str) -> list[str]:
        """Return every known title starting with `prefix`, ignoring case."""
        needle = prefix.lower()
        return [title for title in self._titles if title.lower().startswith(needle)]

    @property
    def titles(self) -> list[str]:
        return list(self._titles)

    def __contains__(self, title: object) -> bool:
        return title in self._titles

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._titles))

    def __len__(self) -> int:
        return len(self._titles)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GroupIndex):
            return self.titles == other.titles
        if isinstance(other, (set, frozenset)):
            return set(self._titles) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"GroupIndex({self.titles!r})"

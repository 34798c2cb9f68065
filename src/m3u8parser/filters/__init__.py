"""Filters that select playlist entries.

Filters operate on parsed PlaylistItem records and report the entries
they leave out together with a reason.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..models import ExcludedItem, PlaylistItem


@dataclass
class FilterResult:
    """Result of applying a filter."""

    included: list[PlaylistItem] = field(default_factory=list)
    excluded: list[ExcludedItem] = field(default_factory=list)


@runtime_checkable
class Filter(Protocol):
    """Protocol for entry filters."""

    @property
    def name(self) -> str:
        """Unique identifier for this filter."""
        ...

    def apply(self, items: list[PlaylistItem]) -> FilterResult:
        """Apply the filter, keeping the order of `items`."""
        ...


class BaseFilter(ABC):
    """Abstract base class for filters."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def apply(self, items: list[PlaylistItem]) -> FilterResult:
        pass


from .group import GroupFilter

__all__ = [
    "Filter",
    "FilterResult",
    "BaseFilter",
    "GroupFilter",
]

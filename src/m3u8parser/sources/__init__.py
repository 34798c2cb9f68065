"""Playlist sources.

A source turns a location (a path or a URL) into playlist text. Parsing
starts only once the whole text has been read.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..errors import FetchFailure
from ..logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class PlaylistSource(Protocol):
    """Protocol for anything that can supply playlist text."""

    @property
    def name(self) -> str:
        """Unique identifier for this source."""
        ...

    def read(self, location: str) -> str:
        """Return the full playlist text found at `location`.

        Raises:
            FetchFailure: If the text could not be retrieved
        """
        ...


class BaseSource(ABC):
    """Abstract base class for playlist sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def read(self, location: str) -> str:
        pass


class FileSource(BaseSource):
    """Reads playlists from the local filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @property
    def name(self) -> str:
        return "file"

    def read(self, location: str) -> str:
        path = Path(location)
        logger.info("reading_playlist", path=str(path))
        try:
            # newline="" keeps carriage returns so CRLF files write back unchanged
            with open(path, encoding=self.encoding, newline="") as f:
                return f.read()
        except OSError as e:
            raise FetchFailure(str(path), reason=str(e)) from e


def is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


from .http import HttpSource, fetch_text_async


def source_for(location: str) -> PlaylistSource:
    """Pick the source able to read `location`."""
    if is_url(location):
        return HttpSource()
    return FileSource()


__all__ = [
    "PlaylistSource",
    "BaseSource",
    "FileSource",
    "HttpSource",
    "fetch_text_async",
    "is_url",
    "source_for",
]

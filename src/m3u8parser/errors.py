"""Exceptions raised by m3u8parser."""

from pydantic import ValidationError

# Raised unchanged when an entry does not match the model contract.
ValidationFailure = ValidationError


class PlaylistError(Exception):
    """Base class for playlist errors."""


class InvalidPlaylistFormat(PlaylistError, ValueError):
    """The playlist text does not follow the extended M3U layout."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FetchFailure(PlaylistError):
    """The playlist text could not be retrieved."""

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"Failed to fetch playlist: {status_code}"
        else:
            message = f"Failed to fetch playlist: {reason or 'unknown error'}"
        super().__init__(f"{message} ({url})")


__all__ = [
    "PlaylistError",
    "InvalidPlaylistFormat",
    "FetchFailure",
    "ValidationFailure",
]

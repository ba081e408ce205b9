"""Errors raised while fetching and extracting YouTube data.

Every error carries a human-readable message that the MCP tools
return to the caller unchanged (apart from an operation prefix).
"""

from __future__ import annotations

from typing import Optional


class YouTubeError(Exception):
    """Base class for all expected failures of the three operations."""


class InvalidInputError(YouTubeError):
    """The input is neither a video ID nor a recognised YouTube URL."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid YouTube video ID or URL: {value}")
        self.value = value


class FetchError(YouTubeError):
    """An HTTP request failed or returned a non-success status."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status

    @classmethod
    def from_status(cls, status: int) -> "FetchError":
        return cls(f"HTTP error! status: {status}", status=status)


class ExtractionError(YouTubeError):
    """The embedded JSON variable was missing or could not be parsed."""

    def __init__(self, message: str = "could not extract video data from page") -> None:
        super().__init__(message)


class StructureMissingError(YouTubeError):
    """A required node is absent from an otherwise valid page model."""

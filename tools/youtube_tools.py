"""MCP tools for searching YouTube and reading video data.

This module exposes three tools:

* ``search`` – Search YouTube videos by keyword.  Returns up to
  ``limit`` results, each with ``videoId``, ``title``, ``url``,
  ``thumbnailUrl``, ``description``, ``channel`` (``name`` and
  ``url``), ``viewCount`` and ``publishedTime``.
* ``get-video-info`` – Detailed information about one video:
  ``title``, ``description``, ``viewCount``, ``publishDate``,
  ``channel``, ``thumbnailUrl`` and ``url``.
* ``get-transcript`` – The video's captions as a list of
  ``{time, text}`` entries plus ``videoInfo`` (``title``,
  ``channel.name``, ``duration``).  English captions are preferred;
  otherwise the first available track is used.

The video tools accept either an 11‑character video ID or a YouTube
URL (watch, ``youtu.be``, embed, mobile or music).  Results are
returned as pretty‑printed JSON.  Failures are raised as
``ToolError`` so the client receives an error result with a
descriptive message.
"""

import json
import logging
from typing import Annotated, Any, Callable

from anyio import to_thread
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from server import mcp  # Shared FastMCP instance
from utils import config, youtube_service
from utils.errors import YouTubeError

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No results found for the given query."


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


async def _run(error_prefix: str, operation: Callable[[], Any]) -> Any:
    """Run ``operation`` in a worker thread, converting failures to ``ToolError``.

    The HTTP client blocks, so the event loop stays free for other calls.
    """
    try:
        return await to_thread.run_sync(operation)
    except YouTubeError as e:
        logger.warning("%s%s", error_prefix, e)
        raise ToolError(f"{error_prefix}{e}") from e
    except Exception as e:
        logger.exception("Unexpected failure")
        raise ToolError(f"{error_prefix}{str(e) or 'An unknown error occurred'}") from e


@mcp.tool(name="search")
async def search(
    query: Annotated[str, Field(min_length=1, description="Search query")],
    limit: Annotated[
        int,
        Field(ge=1, le=config.MAX_SEARCH_LIMIT, description="Maximum number of results"),
    ] = config.DEFAULT_SEARCH_LIMIT,
) -> str:
    """Search for YouTube videos.

    Args:
        query: Free‑text search terms.
        limit: Number of results to return (1–10, default 5).

    Returns:
        A JSON array of video results, or a short message when the
        search found nothing.
    """
    results = await _run(
        "Error performing search: ",
        lambda: youtube_service.search_videos(query, limit),
    )
    if not results:
        return NO_RESULTS_MESSAGE
    return _to_json(results)


@mcp.tool(name="get-video-info")
async def get_video_info(
    input: Annotated[str, Field(min_length=1, description="YouTube video ID or URL")],
) -> str:
    """Get detailed information about a YouTube video.

    Args:
        input: A video ID (e.g. ``dQw4w9WgXcQ``) or a YouTube URL.

    Returns:
        A JSON object with ``videoId``, ``title``, ``description``,
        ``viewCount``, ``publishDate``, ``channel``, ``thumbnailUrl``
        and ``url``.
    """
    info = await _run(
        "Error fetching video info: ",
        lambda: youtube_service.get_video_info(input),
    )
    return _to_json(info)


@mcp.tool(name="get-transcript")
async def get_transcript(
    input: Annotated[str, Field(min_length=1, description="YouTube video ID or URL")],
) -> str:
    """Get the transcript of a YouTube video.

    Args:
        input: A video ID or a YouTube URL.

    Returns:
        A JSON object with ``videoId``, ``videoInfo`` and
        ``transcript``.  Each transcript entry has ``time`` (seconds
        from the start, two decimals) and ``text``.
    """
    transcript = await _run(
        "Error fetching transcript: ",
        lambda: youtube_service.get_video_transcript(input),
    )
    return _to_json(transcript)

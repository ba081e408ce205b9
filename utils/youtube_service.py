"""
Fetch-extract-project pipelines behind the three MCP tools.

Each function downloads the relevant YouTube page, decodes the
embedded JSON and projects it into a plain dictionary (or list of
dictionaries) ready to be serialised.  Expected failures are raised
as subclasses of :class:`~utils.errors.YouTubeError`.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Dict, List

from utils import config, http_client
from utils.errors import ExtractionError, InvalidInputError
from utils.page_data import INITIAL_DATA, PLAYER_RESPONSE, extract_embedded_json
from utils.video_ids import resolve_video_id
from utils.video_info import project_video_info
from utils.video_search import project_search
from utils.video_transcript import project_transcript

logger = logging.getLogger(__name__)


def _require_video_id(value: str) -> str:
    video_id = resolve_video_id(value)
    if not video_id:
        raise InvalidInputError(value)
    return video_id


def _fetch_watch_page(video_id: str) -> str:
    return http_client.fetch_text(
        config.WATCH_PAGE_URL.format(video_id=video_id),
        referer=config.SEARCH_URL,
    )


def search_videos(query: str, limit: int = config.DEFAULT_SEARCH_LIMIT) -> List[Dict[str, Any]]:
    """Search YouTube and return up to ``limit`` video results."""
    html = http_client.fetch_text(
        config.SEARCH_URL,
        referer=config.YOUTUBE_BASE_URL,
        params={"search_query": query, "sp": config.SEARCH_FILTER},
    )
    model = extract_embedded_json(html, INITIAL_DATA)
    if model is None:
        raise ExtractionError()
    results = project_search(model, limit)
    logger.info("Search %r returned %d result(s)", query, len(results))
    return results


def get_video_info(value: str) -> Dict[str, Any]:
    """Return title, description, statistics and channel of a video.

    Args:
        value: A video ID or any supported YouTube URL.
    """
    video_id = _require_video_id(value)
    model = extract_embedded_json(_fetch_watch_page(video_id), INITIAL_DATA)
    if model is None:
        raise ExtractionError()
    return project_video_info(model, video_id)


def get_video_transcript(value: str) -> Dict[str, Any]:
    """Return the transcript of a video together with basic video info.

    Args:
        value: A video ID or any supported YouTube URL.

    Returns:
        A dictionary with ``videoId``, ``videoInfo`` and ``transcript``.
    """
    video_id = _require_video_id(value)
    player_model = extract_embedded_json(_fetch_watch_page(video_id), PLAYER_RESPONSE)
    if player_model is None:
        raise ExtractionError()
    fetch_captions = functools.partial(
        http_client.fetch_json, referer=config.WATCH_PAGE_URL.format(video_id=video_id)
    )
    projected = project_transcript(player_model, fetch_captions)
    logger.info("Transcript for %s has %d entries", video_id, len(projected["transcript"]))
    return {
        "videoId": video_id,
        "videoInfo": projected["videoInfo"],
        "transcript": projected["transcript"],
    }

"""Turn a search results page model into a list of video results."""

from __future__ import annotations

from typing import Any, Dict, List

from utils import config
from utils.page_data import get_path


def _search_items(model: Dict[str, Any]) -> List[Any]:
    items = get_path(
        model,
        "contents",
        "twoColumnSearchResultsRenderer",
        "primaryContents",
        "sectionListRenderer",
        "contents",
        0,
        "itemSectionRenderer",
        "contents",
        default=[],
    )
    return items if isinstance(items, list) else []


def _project_video_renderer(renderer: Dict[str, Any]) -> Dict[str, Any]:
    video_id = get_path(renderer, "videoId")
    owner_run = get_path(renderer, "ownerText", "runs", 0, default={})
    return {
        "videoId": video_id,
        "title": get_path(renderer, "title", "runs", 0, "text"),
        "url": config.VIDEO_URL.format(video_id=video_id),
        "thumbnailUrl": get_path(renderer, "thumbnail", "thumbnails", 0, "url"),
        "description": get_path(renderer, "descriptionSnippet", "runs", 0, "text"),
        "channel": {
            "name": get_path(owner_run, "text"),
            "url": get_path(
                owner_run, "navigationEndpoint", "commandMetadata", "webCommandMetadata", "url"
            ),
        },
        "viewCount": get_path(renderer, "viewCountText", "simpleText"),
        "publishedTime": get_path(renderer, "publishedTimeText", "simpleText"),
    }


def project_search(model: Dict[str, Any], limit: int = config.DEFAULT_SEARCH_LIMIT) -> List[Dict[str, Any]]:
    """Collect up to ``limit`` video results from a search page model.

    Items that are not videos (shelves, ads, channels) are skipped, as
    are videos without an ID or title.  Scanning stops once ``limit``
    results have been collected.

    Args:
        model: Decoded ``ytInitialData`` of a search results page.
        limit: Maximum number of results to return.

    Returns:
        Result dictionaries in page order.
    """
    results: List[Dict[str, Any]] = []
    for item in _search_items(model):
        if len(results) >= limit:
            break
        renderer = get_path(item, "videoRenderer", default=None)
        if not isinstance(renderer, dict):
            continue
        result = _project_video_renderer(renderer)
        if result["videoId"] and result["title"]:
            results.append(result)
    return results

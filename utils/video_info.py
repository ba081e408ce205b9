"""Build the video detail result from a watch page model."""

from __future__ import annotations

from typing import Any, Dict

from utils import config
from utils.errors import StructureMissingError
from utils.page_data import get_path, watch_info_nodes


def _join_runs(runs: Any) -> str:
    if not isinstance(runs, list):
        return ""
    return "".join(str(get_path(run, "text")) for run in runs)


def project_video_info(model: Dict[str, Any], video_id: str) -> Dict[str, Any]:
    """Map a decoded watch page to the video info dictionary.

    The primary info node is mandatory; without it there is no title
    or view count to report.  The secondary info node only supplies
    the description and channel, which default to empty strings.

    Args:
        model: Decoded ``ytInitialData`` of a watch page.
        video_id: The canonical ID the page was fetched for.

    Raises:
        StructureMissingError: If the primary info node is absent.
    """
    nodes = watch_info_nodes(model)
    if nodes.primary is None:
        raise StructureMissingError("video data not found")
    primary = nodes.primary
    secondary = nodes.secondary or {}
    owner = get_path(secondary, "owner", "videoOwnerRenderer", default={})
    return {
        "videoId": video_id,
        "title": get_path(primary, "title", "runs", 0, "text"),
        "description": _join_runs(get_path(secondary, "description", "runs", default=[])),
        "viewCount": get_path(primary, "viewCount", "videoViewCountRenderer", "viewCount", "simpleText"),
        "publishDate": get_path(primary, "dateText", "simpleText"),
        "channel": {
            "name": get_path(owner, "title", "runs", 0, "text"),
            "url": get_path(
                owner, "navigationEndpoint", "commandMetadata", "webCommandMetadata", "url"
            ),
        },
        "thumbnailUrl": config.THUMBNAIL_URL.format(video_id=video_id),
        "url": config.VIDEO_URL.format(video_id=video_id),
    }

"""
Configuration constants for the YouTube search MCP server.

Values that callers may want to tweak without editing code can be
overridden through environment variables:

* ``YOUTUBE_MCP_LOG_LEVEL`` – logging level name (default ``INFO``).
* ``YOUTUBE_MCP_TIMEOUT`` – per-request HTTP timeout in seconds
  (default ``10``).
"""

from __future__ import annotations

import os

# Name the server announces to MCP clients
SERVER_NAME = "youtube-search"

# YouTube endpoints and URL templates
YOUTUBE_BASE_URL = "https://www.youtube.com/"
SEARCH_URL = "https://www.youtube.com/results"
WATCH_PAGE_URL = "https://www.youtube.com/watch?v={video_id}"
VIDEO_URL = "https://youtube.com/watch?v={video_id}"
THUMBNAIL_URL = "https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"

# Search filter: videos only
SEARCH_FILTER = "CAISAhAB"

DEFAULT_SEARCH_LIMIT = 5
MAX_SEARCH_LIMIT = 10

# Caption tracks in this language win; otherwise the first track is used
DEFAULT_CAPTION_LANGUAGE = "en"
CAPTION_FORMAT_SUFFIX = "&fmt=json3"

REQUEST_TIMEOUT = float(os.environ.get("YOUTUBE_MCP_TIMEOUT", "10"))
LOG_LEVEL = os.environ.get("YOUTUBE_MCP_LOG_LEVEL", "INFO").upper()

# Headers of a common desktop browser.  The ``Referer`` is added per
# request by the HTTP client.
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/webp,image/apng,*/*;q=0.8"
    ),
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-User": "?1",
    "Sec-Fetch-Dest": "document",
    "Sec-Ch-Ua": '"Not A(Brand";v="99", "Google Chrome";v="121", "Chromium";v="121"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "max-age=0",
}

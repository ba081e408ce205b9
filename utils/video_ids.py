"""Normalise free-form video references into 11-character video IDs."""

from __future__ import annotations

import re
from typing import Optional

VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")

# Tried in order; the first match wins.  The combined short/standard
# pattern duplicates the first two and is kept for compatibility.
URL_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=)([^\"&?/\s]{11})"),
    re.compile(r"(?:youtu\.be/)([^\"&?/\s]{11})"),
    re.compile(r"(?:youtube\.com/embed/)([^\"&?/\s]{11})"),
    re.compile(r"(?:youtu\.be/|youtube\.com/watch\?v=)([^\"&?/\s]{11})"),
    re.compile(r"(?:m\.youtube\.com/watch\?v=)([^\"&?/\s]{11})"),
    re.compile(r"(?:music\.youtube\.com/watch\?v=)([^\"&?/\s]{11})"),
]


def is_video_id(value: str) -> bool:
    return bool(VIDEO_ID_PATTERN.fullmatch(value))


def resolve_video_id(value: str) -> Optional[str]:
    """Return the video ID contained in ``value``.

    ``value`` may be a bare video ID or a watch, short, embed, mobile
    or music URL.

    Returns:
        The 11-character video ID, or ``None`` if nothing matches.

    Examples::

        >>> resolve_video_id("dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> resolve_video_id("https://youtu.be/dQw4w9WgXcQ?t=42")
        'dQw4w9WgXcQ'
    """
    if is_video_id(value):
        return value
    for pattern in URL_PATTERNS:
        match = pattern.search(value)
        # The capture excludes only separators, so check the charset too
        if match and is_video_id(match.group(1)):
            return match.group(1)
    return None

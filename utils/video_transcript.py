"""Utility functions to build a YouTube video transcript.

The caption tracks of a video are listed in its player response
(``ytInitialPlayerResponse``).  This module picks one track, fetches
its cues in YouTube's ``json3`` format and turns them into timed
transcript entries.

Track selection is deliberately simple: the English track if there
is one, otherwise whichever track is listed first.

Functions:
    select_caption_track(tracks) -> Optional[dict]:
        Choose the caption track to download.

    build_transcript(events) -> List[dict]:
        Convert ``json3`` caption events into ``{time, text}`` entries.

    project_transcript(player_model, fetch_json) -> dict:
        Produce the transcript and accompanying video info.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, List, Optional

from utils import config
from utils.errors import StructureMissingError
from utils.page_data import get_path

_CENTISECOND = Decimal("0.01")


def format_offset(start_ms: Any) -> str:
    """Format a millisecond offset as seconds with two decimals.

    Halves round up, so 125 ms is ``"0.13"``.
    """
    seconds = Decimal(str(start_ms or 0)) / 1000
    return str(seconds.quantize(_CENTISECOND, rounding=ROUND_HALF_UP))


def caption_tracks(player_model: Dict[str, Any]) -> List[Dict[str, Any]]:
    tracks = get_path(
        player_model, "captions", "playerCaptionsTracklistRenderer", "captionTracks", default=[]
    )
    return tracks if isinstance(tracks, list) else []


def select_caption_track(tracks: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the English track, or the first track if none is English.

    Returns ``None`` only when ``tracks`` is empty.
    """
    for track in tracks:
        if get_path(track, "languageCode") == config.DEFAULT_CAPTION_LANGUAGE:
            return track
    return tracks[0] if tracks else None


def caption_url(player_model: Dict[str, Any]) -> str:
    """Return the ``json3`` download URL of the selected caption track.

    Raises:
        StructureMissingError: If the video has no caption tracks or
            the selected track has no URL.
    """
    track = select_caption_track(caption_tracks(player_model))
    if track is None:
        raise StructureMissingError("no transcript available for this video")
    base_url = get_path(track, "baseUrl")
    if not base_url:
        raise StructureMissingError("caption track URL not found")
    return base_url + config.CAPTION_FORMAT_SUFFIX


def build_transcript(events: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Convert caption events to transcript entries.

    Events without text segments (window and positioning cues) are
    dropped.  The remaining events keep their original order.

    Args:
        events: The ``events`` list of a ``json3`` caption document.

    Returns:
        A list of ``{"time": "12.34", "text": "..."}`` dictionaries,
        where ``time`` is the start offset in seconds.
    """
    entries: List[Dict[str, str]] = []
    for event in events:
        segments = get_path(event, "segs", default=None)
        if not isinstance(segments, list):
            continue
        text = " ".join(str(get_path(seg, "utf8")) for seg in segments).strip()
        entries.append({"time": format_offset(get_path(event, "tStartMs", default=0)), "text": text})
    return entries


def transcript_video_info(player_model: Dict[str, Any]) -> Dict[str, Any]:
    """Read title, author and duration from ``videoDetails``.

    ``duration`` is the raw ``lengthSeconds`` string.
    """
    details = get_path(player_model, "videoDetails", default={})
    return {
        "title": get_path(details, "title"),
        "channel": {"name": get_path(details, "author")},
        "duration": get_path(details, "lengthSeconds"),
    }


def project_transcript(
    player_model: Dict[str, Any],
    fetch_json: Callable[[str], Any],
) -> Dict[str, Any]:
    """Download the selected caption track and build the transcript.

    Args:
        player_model: Decoded ``ytInitialPlayerResponse``.
        fetch_json: Callable that downloads a URL and returns the
            decoded JSON body.

    Returns:
        A dictionary with ``transcript`` (list of entries) and
        ``videoInfo``.
    """
    url = caption_url(player_model)
    events = get_path(fetch_json(url), "events", default=[])
    return {
        "transcript": build_transcript(events if isinstance(events, list) else []),
        "videoInfo": transcript_video_info(player_model),
    }

import pytest

from utils.errors import StructureMissingError
from utils.video_transcript import (
    build_transcript,
    caption_url,
    project_transcript,
    select_caption_track,
    transcript_video_info,
)


class RecordingFetch:
    def __init__(self, payload):
        self.payload = payload
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        return self.payload


def test_selects_english_track_when_present():
    tracks = [{"languageCode": "en", "baseUrl": "en-url"}, {"languageCode": "fr", "baseUrl": "fr-url"}]

    assert select_caption_track(tracks)["languageCode"] == "en"
    assert select_caption_track(list(reversed(tracks)))["languageCode"] == "en"


def test_falls_back_to_first_track_without_english():
    tracks = [{"languageCode": "fr", "baseUrl": "fr-url"}, {"languageCode": "de", "baseUrl": "de-url"}]

    assert select_caption_track(tracks)["languageCode"] == "fr"


def test_regional_english_variant_is_not_treated_as_english():
    tracks = [{"languageCode": "es"}, {"languageCode": "en-GB"}]

    assert select_caption_track(tracks)["languageCode"] == "es"


def test_select_caption_track_of_empty_list_is_none():
    assert select_caption_track([]) is None


def test_caption_url_requests_json3_format(player_model):
    assert caption_url(player_model) == "https://www.youtube.com/api/timedtext?v=x&lang=en&fmt=json3"


@pytest.mark.parametrize(
    "model",
    [
        {},
        {"captions": {}},
        {"captions": {"playerCaptionsTracklistRenderer": {"captionTracks": []}}},
    ],
)
def test_no_caption_tracks_means_no_transcript(model):
    with pytest.raises(StructureMissingError, match="no transcript available for this video"):
        caption_url(model)


def test_selected_track_without_url_fails():
    model = {
        "captions": {
            "playerCaptionsTracklistRenderer": {
                "captionTracks": [{"languageCode": "en"}, {"languageCode": "fr", "baseUrl": "fr-url"}]
            }
        }
    }

    with pytest.raises(StructureMissingError, match="caption track URL not found"):
        caption_url(model)


def test_build_transcript_formats_time_and_joins_segments():
    events = [
        {"tStartMs": 2500, "segs": [{"utf8": "hello"}, {"utf8": "world "}]},
        {"tStartMs": 0, "segs": [{"utf8": " first "}]},
    ]

    assert build_transcript(events) == [
        {"time": "2.50", "text": "hello world"},
        {"time": "0.00", "text": "first"},
    ]


@pytest.mark.parametrize(
    "start_ms, expected",
    [(125, "0.13"), (625, "0.63"), (1125, "1.13"), (2500, "2.50"), (1, "0.00"), (None, "0.00")],
)
def test_build_transcript_rounds_half_hundredths_up(start_ms, expected):
    (entry,) = build_transcript([{"tStartMs": start_ms, "segs": [{"utf8": "x"}]}])

    assert entry["time"] == expected


def test_build_transcript_drops_events_without_segments_and_keeps_order():
    events = [
        {"tStartMs": 0, "dDurationMs": 5000, "wWinId": 1},
        {"tStartMs": 1000, "segs": [{"utf8": "one"}]},
        {"tStartMs": 1500},
        {"tStartMs": 3333, "segs": [{"utf8": "two"}]},
        {"tStartMs": 12340, "segs": [{"utf8": "three"}]},
    ]

    entries = build_transcript(events)

    assert [e["text"] for e in entries] == ["one", "two", "three"]
    assert [e["time"] for e in entries] == ["1.00", "3.33", "12.34"]


def test_transcript_video_info_reads_video_details(player_model):
    assert transcript_video_info(player_model) == {
        "title": "Demo",
        "channel": {"name": "Channel"},
        "duration": "213",
    }


def test_transcript_video_info_defaults_to_empty_strings():
    assert transcript_video_info({}) == {"title": "", "channel": {"name": ""}, "duration": ""}


def test_project_transcript_fetches_selected_track(player_model):
    fetch = RecordingFetch({"events": [{"tStartMs": 2500, "segs": [{"utf8": "hi"}]}]})

    result = project_transcript(player_model, fetch)

    assert fetch.urls == ["https://www.youtube.com/api/timedtext?v=x&lang=en&fmt=json3"]
    assert result == {
        "transcript": [{"time": "2.50", "text": "hi"}],
        "videoInfo": {"title": "Demo", "channel": {"name": "Channel"}, "duration": "213"},
    }


def test_project_transcript_without_events_is_empty(player_model):
    result = project_transcript(player_model, RecordingFetch({}))

    assert result["transcript"] == []


def test_project_transcript_does_not_fetch_when_no_tracks():
    fetch = RecordingFetch({"events": []})

    with pytest.raises(StructureMissingError):
        project_transcript({"videoDetails": {"title": "x"}}, fetch)
    assert fetch.urls == []

import json

import pytest


def video_renderer(video_id, title, **extra):
    renderer = {"videoId": video_id}
    if title is not None:
        renderer["title"] = {"runs": [{"text": title}]}
    renderer.update(extra)
    return {"videoRenderer": renderer}


def search_model(items):
    return {
        "contents": {
            "twoColumnSearchResultsRenderer": {
                "primaryContents": {
                    "sectionListRenderer": {
                        "contents": [{"itemSectionRenderer": {"contents": items}}]
                    }
                }
            }
        }
    }


def watch_model(contents):
    return {
        "contents": {
            "twoColumnWatchNextResults": {"results": {"results": {"contents": contents}}}
        }
    }


def initial_data_page(model):
    return f"<html><script>var ytInitialData = {json.dumps(model)};</script></html>"


def player_response_page(model):
    return f"<html><script>var ytInitialPlayerResponse = {json.dumps(model)};var meta = 1;</script></html>"


@pytest.fixture
def primary_info():
    return {
        "videoPrimaryInfoRenderer": {
            "title": {"runs": [{"text": "Never Gonna Give You Up"}]},
            "viewCount": {
                "videoViewCountRenderer": {"viewCount": {"simpleText": "1,234 views"}}
            },
            "dateText": {"simpleText": "Oct 25, 2009"},
        }
    }


@pytest.fixture
def secondary_info():
    return {
        "videoSecondaryInfoRenderer": {
            "description": {
                "runs": [{"text": "Official video "}, {"text": "for the song"}, {"text": "\nLyrics"}]
            },
            "owner": {
                "videoOwnerRenderer": {
                    "title": {"runs": [{"text": "Rick Astley"}]},
                    "navigationEndpoint": {
                        "commandMetadata": {"webCommandMetadata": {"url": "/@RickAstleyYT"}}
                    },
                }
            },
        }
    }


@pytest.fixture
def player_model():
    return {
        "videoDetails": {"title": "Demo", "author": "Channel", "lengthSeconds": "213"},
        "captions": {
            "playerCaptionsTracklistRenderer": {
                "captionTracks": [
                    {"languageCode": "fr", "baseUrl": "https://www.youtube.com/api/timedtext?v=x&lang=fr"},
                    {"languageCode": "en", "baseUrl": "https://www.youtube.com/api/timedtext?v=x&lang=en"},
                ]
            }
        },
    }

"""
Pytest configuration and fixtures for paging tests.
Provides JSON payload builders for paging objects and playlists.
"""

import json
from collections.abc import Callable
from typing import Any

import pytest
from pydantic import StrictStr

from spotify_paging.models.base import SpotifyModel

PAGE_HREF = "https://api.spotify.com/v1/browse/featured-playlists?offset=0&limit=20"


class Item(SpotifyModel):
    """Minimal element model used to exercise Page."""

    id: StrictStr


@pytest.fixture
def item_model() -> type[Item]:
    return Item


@pytest.fixture
def offset_page_payload() -> dict[str, Any]:
    return {
        "href": "https://x/y",
        "items": [{"id": "a"}, {"id": "b"}, {"id": "c"}],
        "limit": 20,
        "next": "https://x/y?offset=20&limit=20",
        "offset": 0,
        "previous": None,
        "total": 45,
    }


@pytest.fixture
def cursor_page_payload() -> dict[str, Any]:
    return {
        "href": "https://api.spotify.com/v1/me/player/recently-played?limit=2",
        "items": [{"id": "t1"}, {"id": "t2"}],
        "limit": 2,
        "next": "https://api.spotify.com/v1/me/player/recently-played?before=1700&limit=2",
        "cursors": {"before": "1700", "after": "1800"},
    }


@pytest.fixture
def to_json() -> Callable[[Any], bytes]:
    def _to_json(payload: Any) -> bytes:
        return json.dumps(payload).encode("utf-8")

    return _to_json


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return {
        "display_name": "Spotify",
        "external_urls": {"spotify": "https://open.spotify.com/user/spotify"},
        "href": "https://api.spotify.com/v1/users/spotify",
        "id": "spotify",
        "type": "user",
        "uri": "spotify:user:spotify",
    }


@pytest.fixture
def simplified_playlist_payload(user_payload) -> dict[str, Any]:
    return {
        "collaborative": False,
        "external_urls": {"spotify": "https://open.spotify.com/playlist/37i9dQZF1DX"},
        "href": "https://api.spotify.com/v1/playlists/37i9dQZF1DX",
        "id": "37i9dQZF1DX",
        "images": [
            {"url": "https://i.scdn.co/image/ab67706f0000", "height": 300, "width": 300},
        ],
        "name": "Today's Top Hits",
        "owner": user_payload,
        "public": None,
        "snapshot_id": "MTY5NzA0MDAwMCwwMDAw",
        "tracks": {
            "href": "https://api.spotify.com/v1/playlists/37i9dQZF1DX/tracks",
            "total": 50,
        },
        "type": "playlist",
        "uri": "spotify:playlist:37i9dQZF1DX",
    }


@pytest.fixture
def playlist_track_payload(user_payload) -> dict[str, Any]:
    return {
        "added_at": "2024-01-15T10:42:31Z",
        "added_by": user_payload,
        "is_local": False,
        "track": {
            "id": "4uLU6hMCjMI75M1A2tKUQC",
            "name": "Never Gonna Give You Up",
            "href": "https://api.spotify.com/v1/tracks/4uLU6hMCjMI75M1A2tKUQC",
            "uri": "spotify:track:4uLU6hMCjMI75M1A2tKUQC",
            "duration_ms": 213573,
            "explicit": False,
            "type": "track",
        },
    }


@pytest.fixture
def full_playlist_payload(
    simplified_playlist_payload,
    playlist_track_payload,
) -> dict[str, Any]:
    payload = dict(simplified_playlist_payload)
    payload["description"] = "The hottest 50."
    payload["followers"] = {"href": None, "total": 34000000}
    payload["tracks"] = {
        "href": "https://api.spotify.com/v1/playlists/37i9dQZF1DX/tracks?offset=0&limit=100",
        "items": [playlist_track_payload],
        "limit": 100,
        "next": None,
        "offset": 0,
        "previous": None,
        "total": 1,
    }
    return payload

"""
Playlist models.

Playlists come in a simplified form (in listings such as featured
playlists, where ``tracks`` is only a ``{href, total}`` reference) and a
full form (with ``description``, ``followers`` and a page of tracks).
"""

from datetime import datetime
from typing import Literal

from pydantic import Field, HttpUrl, StrictBool, StrictInt, StrictStr

from spotify_paging.models.base import SpotifyModel
from spotify_paging.models.paging import Page
from spotify_paging.models.user import Followers, Image, User


class Track(SpotifyModel):
    """Simplified track. Local files have no ID or href."""

    id: StrictStr | None = Field(None, description="Spotify track ID")
    name: StrictStr = Field(..., description="Track name")
    url: HttpUrl | None = Field(None, alias="href")
    uri: StrictStr = Field(..., description="Spotify URI for the track")
    duration_ms: StrictInt = Field(..., description="Track length in milliseconds")
    explicit: StrictBool = False
    is_local: StrictBool = False
    resource_type: Literal["track"] = Field(..., alias="type")


class PlaylistTrack(SpotifyModel):
    """A track entry within a playlist."""

    added_at: datetime | None = Field(None, description="When the track was added (ISO-8601)")
    added_by: User | None = Field(None, description="Who added the track")
    is_local: StrictBool = False
    track: Track | None = None


class PlaylistTracksRef(SpotifyModel):
    """Reference to a playlist's tracks, returned with simplified playlists."""

    url: HttpUrl = Field(..., alias="href")
    total: StrictInt


class Playlist(SpotifyModel):
    """A Spotify playlist, simplified or full."""

    is_collaborative: StrictBool = Field(..., alias="collaborative")
    user_description: StrictStr | None = Field(None, alias="description")
    external_urls: dict[str, HttpUrl] = Field(..., description="Known external URLs")
    followers: Followers | None = None
    url: HttpUrl = Field(..., alias="href", description="Web API endpoint for the playlist")
    id: StrictStr = Field(..., description="Spotify playlist ID")
    images: tuple[Image, ...] = Field(..., description="Up to three images, largest first")
    name: StrictStr
    owner: User
    is_public: StrictBool | None = Field(None, alias="public")
    snapshot_id: StrictStr = Field(..., description="Version identifier of the playlist")
    # A full tracks page with a broken element still decodes, as a
    # PlaylistTracksRef: the page is tried first and only href and total
    # are required by the fallback.
    tracks: Page[PlaylistTrack] | PlaylistTracksRef = Field(..., union_mode="left_to_right")
    resource_type: Literal["playlist"] = Field(..., alias="type")
    uri: StrictStr

    @property
    def tracks_page(self) -> Page[PlaylistTrack] | None:
        """The page of tracks for full playlists, None for simplified ones."""
        if isinstance(self.tracks, Page):
            return self.tracks
        return None

    @property
    def tracks_url(self) -> HttpUrl:
        return self.tracks.url

    @property
    def total_tracks(self) -> int | None:
        return self.tracks.total

    @property
    def is_simplified(self) -> bool:
        return (
            self.user_description is None
            and self.followers is None
            and self.tracks_page is None
        )


class FeaturedPlaylists(SpotifyModel):
    """Featured playlists, accompanied by a localized message."""

    localized_message: StrictStr = Field(..., alias="message")
    playlists: Page[Playlist]

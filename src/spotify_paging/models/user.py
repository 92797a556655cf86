"""Shared user, image and follower models."""

from typing import Literal

from pydantic import Field, HttpUrl, StrictInt, StrictStr

from spotify_paging.models.base import SpotifyModel


class Image(SpotifyModel):
    """Artwork or profile image. Dimensions are unknown for some sources."""

    url: HttpUrl = Field(..., description="Source URL of the image")
    height: StrictInt | None = Field(None, description="Image height in pixels")
    width: StrictInt | None = Field(None, description="Image width in pixels")


class Followers(SpotifyModel):
    url: HttpUrl | None = Field(None, alias="href", description="Always null in current API versions")
    total: StrictInt = Field(..., description="Total number of followers")


class User(SpotifyModel):
    """Public user profile, as embedded in playlists and playlist tracks."""

    display_name: StrictStr | None = Field(None, description="Name displayed on the profile")
    external_urls: dict[str, HttpUrl] = Field(..., description="Known external URLs for the user")
    followers: Followers | None = None
    url: HttpUrl = Field(..., alias="href", description="Web API endpoint for the user")
    id: StrictStr = Field(..., description="Spotify user ID")
    images: tuple[Image, ...] | None = None
    resource_type: Literal["user"] = Field(..., alias="type")
    uri: StrictStr = Field(..., description="Spotify URI for the user")

"""Spotify Web API Paging Package."""

__version__ = "1.0.0"
__description__ = (
    "Generic paging objects and pagination parameters for the Spotify Web API"
)

__all__ = ["spotify_paging"]

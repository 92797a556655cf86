"""Base model for objects decoded from Spotify Web API responses."""

from typing import TypeVar

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, ValidationError

from spotify_paging.utils.decoding import translate_validation_error

ModelT = TypeVar("ModelT", bound="SpotifyModel")

logger = Logger(utc=True)


class SpotifyModel(BaseModel):
    """
    Immutable model decoded from a JSON response body.

    Attributes use Python names; the wire names are declared as aliases.
    Only the wire names are accepted, so a payload keyed by attribute
    names is rejected.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def decode(cls: type[ModelT], raw: bytes | str) -> ModelT:
        """Decode raw JSON into this model, raising DecodeError on failure."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            error = translate_validation_error(exc)
            logger.warning(
                "Failed to decode response",
                extra={
                    "model": cls.__name__,
                    "kind": error.kind,
                    "path": error.dotted_path,
                },
            )
            raise error from exc

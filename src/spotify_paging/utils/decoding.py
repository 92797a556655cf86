"""Translation of pydantic validation failures into decode errors."""

from typing import Any

from pydantic import ValidationError

from spotify_paging.models.errors import (
    DecodeError,
    MalformedInputError,
    MissingRequiredFieldError,
)
from spotify_paging.utils.constants import MISSING_ERROR_TYPES


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Reduce pydantic error dicts to field, message and type.

    The raw `input` is dropped so large payloads are never copied into
    error details or logs.
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        msg = err.get("msg", "Invalid value").replace("Value error,", "").strip()

        sanitized.append(
            {
                "field": field,
                "message": msg,
                "type": err.get("type", "unknown"),
            }
        )

    return sanitized


def is_missing_error(err: dict[str, Any]) -> bool:
    return err.get("type") in MISSING_ERROR_TYPES


def is_top_level_missing(exc: ValidationError) -> bool:
    """Return True when every failure is a required key absent at the top level.

    A missing key one or more levels down (for example ``items.0.id``)
    belongs to an element and never qualifies.
    """
    errors = exc.errors(include_url=False)
    return bool(errors) and all(
        is_missing_error(err) and len(err["loc"]) == 1 for err in errors
    )


def translate_validation_error(exc: ValidationError) -> DecodeError:
    """
    Convert a pydantic ValidationError into the matching DecodeError.

    The first reported failure decides the error kind:
    - a missing key becomes MissingRequiredFieldError
    - anything else (invalid JSON, wrong type, wrong literal) becomes
      MalformedInputError

    Args:
        exc: Error raised by pydantic while validating a payload

    Returns:
        A DecodeError carrying the failing path and sanitized details
    """
    errors = exc.errors(include_url=False)
    first = errors[0]
    path = tuple(first.get("loc", ()))
    details: dict[str, Any] = {
        "model": exc.title,
        "errors": sanitize_validation_errors(errors),
    }

    if is_missing_error(first):
        dotted = ".".join(str(step) for step in path)
        return MissingRequiredFieldError(
            message=f"Missing required field '{dotted}' in {exc.title}",
            path=path,
            details=details,
        )

    if "input" in first:
        details["found"] = type(first["input"]).__name__

    return MalformedInputError(
        message=f"Invalid {exc.title} payload: {first.get('msg', 'invalid value')}",
        path=path,
        details=details,
    )

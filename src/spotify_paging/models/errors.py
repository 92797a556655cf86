"""Custom exception classes for the paging library."""

from typing import Any

from spotify_paging.utils.constants import (
    ERROR_CODE_DECODE_FAILED,
    ERROR_CODE_EMPTY_WRAPPED_OBJECT,
    ERROR_CODE_INDEX_OUT_OF_RANGE,
    ERROR_CODE_MALFORMED_INPUT,
    ERROR_CODE_MISSING_REQUIRED_FIELD,
    KIND_EMPTY_WRAPPED_OBJECT,
    KIND_MALFORMED_INPUT,
    KIND_MISSING_REQUIRED_FIELD,
)

Path = tuple[str | int, ...]


class SpotifyPagingError(Exception):
    """
    Base exception for all paging library errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class DecodeError(SpotifyPagingError):
    """
    Raised when a JSON payload cannot be decoded into a model.

    Carries the error `kind` and the structural `path` (field names and
    list indices) at which decoding failed, so callers can tell a broken
    element apart from an unexpected envelope shape.
    """

    kind: str
    path: Path

    def __init__(
        self,
        *,
        message: str,
        kind: str,
        path: Path = (),
        error_code: str = ERROR_CODE_DECODE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.path = tuple(path)
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

    @property
    def depth(self) -> int:
        """Number of steps between the top-level object and the failure."""
        return len(self.path)

    @property
    def dotted_path(self) -> str:
        return ".".join(str(step) for step in self.path)


class MalformedInputError(DecodeError):
    """Raised when input is not valid JSON or violates type expectations."""

    def __init__(
        self,
        *,
        message: str,
        path: Path = (),
        error_code: str = ERROR_CODE_MALFORMED_INPUT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            kind=KIND_MALFORMED_INPUT,
            path=path,
            error_code=error_code,
            details=details,
        )


class MissingRequiredFieldError(DecodeError):
    """Raised when a required key is absent from the payload."""

    def __init__(
        self,
        *,
        message: str,
        path: Path = (),
        error_code: str = ERROR_CODE_MISSING_REQUIRED_FIELD,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            kind=KIND_MISSING_REQUIRED_FIELD,
            path=path,
            error_code=error_code,
            details=details,
        )


class EmptyWrappedObjectError(DecodeError):
    """Raised when a wrapped paging envelope turns out to be an empty object."""

    def __init__(
        self,
        *,
        message: str,
        path: Path = (),
        error_code: str = ERROR_CODE_EMPTY_WRAPPED_OBJECT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            kind=KIND_EMPTY_WRAPPED_OBJECT,
            path=path,
            error_code=error_code,
            details=details,
        )


class PageIndexError(SpotifyPagingError, IndexError):
    """Raised when a page is accessed outside of its valid index range."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INDEX_OUT_OF_RANGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )

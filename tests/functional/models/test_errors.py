"""
Unit tests for spotify_paging.models.errors
"""

from spotify_paging.models.errors import (
    DecodeError,
    EmptyWrappedObjectError,
    MalformedInputError,
    MissingRequiredFieldError,
    PageIndexError,
    SpotifyPagingError,
)


class TestSpotifyPagingError:
    def test_base_error(self) -> None:
        err = SpotifyPagingError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert isinstance(err, Exception)
        assert str(err) == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}

    def test_details_default_to_empty_dict(self) -> None:
        err = SpotifyPagingError(message="x", error_code="X")

        assert err.details == {}


class TestDecodeErrors:
    def test_decode_error_path(self) -> None:
        err = DecodeError(message="bad", kind="custom", path=["items", 0, "id"])

        assert err.path == ("items", 0, "id")
        assert err.depth == 3
        assert err.dotted_path == "items.0.id"
        assert err.error_code == "DECODE_FAILED"

    def test_malformed_input_defaults(self) -> None:
        err = MalformedInputError(message="Invalid JSON")

        assert isinstance(err, DecodeError)
        assert err.kind == "malformed_input"
        assert err.error_code == "MALFORMED_INPUT"
        assert err.path == ()

    def test_missing_required_field_defaults(self) -> None:
        err = MissingRequiredFieldError(message="Missing", path=("href",))

        assert err.kind == "missing_required_field"
        assert err.error_code == "MISSING_REQUIRED_FIELD"
        assert err.depth == 1

    def test_empty_wrapped_object_defaults(self) -> None:
        err = EmptyWrappedObjectError(message="JSON object is empty")

        assert err.kind == "empty_wrapped_object"
        assert err.error_code == "EMPTY_WRAPPED_OBJECT"


class TestPageIndexError:
    def test_is_index_error(self) -> None:
        err = PageIndexError(message="Page index 5 out of range")

        assert isinstance(err, IndexError)
        assert isinstance(err, SpotifyPagingError)
        assert err.error_code == "INDEX_OUT_OF_RANGE"

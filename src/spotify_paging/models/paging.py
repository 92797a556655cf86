"""
Generic paging object returned by Spotify Web API collection endpoints.

A page is either offset-based (``offset`` is set) or cursor-based
(``cursors`` is set), and may arrive directly or nested one level under a
response-specific key, e.g. ``{"albums": {...paging object...}}``.
"""

import operator
from collections.abc import Iterator, Sequence
from functools import lru_cache
from typing import Any, Generic, TypeVar

from aws_lambda_powertools import Logger
from pydantic import Field, HttpUrl, StrictInt, StrictStr, TypeAdapter, ValidationError

from spotify_paging.models.base import SpotifyModel
from spotify_paging.models.errors import EmptyWrappedObjectError, PageIndexError
from spotify_paging.models.pagination import Pagination
from spotify_paging.utils.constants import CURSOR_DIRECTIONS, QUERY_PARAM_CURSOR_AFTER
from spotify_paging.utils.decoding import (
    is_top_level_missing,
    sanitize_validation_errors,
    translate_validation_error,
)

ElementT = TypeVar("ElementT")

logger = Logger(utc=True)


class Cursors(SpotifyModel):
    """Keys used to find the adjacent pages of a cursor-based page."""

    before: StrictStr | None = Field(None, description="Key to the previous page of items")
    after: StrictStr | None = Field(None, description="Key to the next page of items")


class Page(SpotifyModel, Generic[ElementT]):
    """
    One page of a larger collection.

    The page is an ordered, random-access sequence of its elements:
    ``len(page)``, ``page[i]``, iteration and ``reversed(page)`` all follow
    the order of the source response. Negative indices are not supported.

    Note:
        ``total`` is the size of the whole collection and may be None when
        the endpoint does not report it. Use ``len(page)`` for the number of
        items actually returned; neither is guaranteed to equal ``limit``.

        URL fields are pydantic ``HttpUrl`` values and are normalized on
        decode, so ``"https://api.spotify.com"`` reads back as
        ``"https://api.spotify.com/"``. Query strings and paths are kept.
    """

    url: HttpUrl = Field(..., alias="href", description="Endpoint returning this exact page")
    elements: tuple[ElementT, ...] = Field(..., alias="items", repr=False)
    limit: StrictInt = Field(..., description="Maximum number of items in the response")
    next_url: HttpUrl | None = Field(None, alias="next", description="Next page, if any")
    offset: StrictInt | None = Field(None, description="None for cursor-based pages")
    previous_url: HttpUrl | None = Field(None, alias="previous", description="Previous page, if any")
    cursors: Cursors | None = Field(None, description="Set for cursor-based pages")
    total: StrictInt | None = Field(None, description="Total items available, if reported")

    @classmethod
    def decode(cls, raw: bytes | str) -> "Page[ElementT]":
        """
        Decode a paging object from raw JSON.

        The payload is first decoded as a paging object. When the only
        failures are required keys missing at the top level, it is decoded
        again as a single-key object wrapping the paging object, and the
        wrapped value is returned.

        A missing key inside an element (e.g. ``items.0.id``) is a data
        error and is raised as-is without trying the wrapped shape.

        Raises:
            MalformedInputError: invalid JSON or unexpected value types
            MissingRequiredFieldError: a required key is absent
            EmptyWrappedObjectError: the payload is an empty object
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            if not is_top_level_missing(exc):
                error = translate_validation_error(exc)
                logger.warning(
                    "Failed to decode paging object",
                    extra={"model": cls.__name__, "kind": error.kind, "path": error.dotted_path},
                )
                raise error from exc
            original = exc

        missing = sanitize_validation_errors(original.errors(include_url=False))
        logger.debug(
            "Paging keys missing at top level, decoding as wrapped object",
            extra={"model": cls.__name__, "missing": [err["field"] for err in missing]},
        )

        try:
            wrapped = _wrapped_adapter(cls).validate_json(raw)
        except ValidationError as exc:
            error = translate_validation_error(exc)
            logger.warning(
                "Failed to decode wrapped paging object",
                extra={"model": cls.__name__, "kind": error.kind, "path": error.dotted_path},
            )
            raise error from exc

        if not wrapped:
            raise EmptyWrappedObjectError(
                message="JSON object is empty",
                path=tuple(original.errors(include_url=False)[0]["loc"]),
                details={"model": cls.__name__, "errors": missing},
            ) from original

        return next(iter(wrapped.values()))

    # ------------------------------------------------------------------
    # Sequence interface
    # ------------------------------------------------------------------

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        """Position one past the last element."""
        return len(self.elements)

    def index_after(self, position: int) -> int:
        """Return the position following `position`."""
        position = operator.index(position)
        if not self.start_index <= position < self.end_index:
            raise self._out_of_range(position)
        return position + 1

    def index_before(self, position: int) -> int:
        """Return the position preceding `position`."""
        position = operator.index(position)
        if not self.start_index < position <= self.end_index:
            raise self._out_of_range(position)
        return position - 1

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, position: int) -> ElementT:
        position = operator.index(position)

        if not self.start_index <= position < self.end_index:
            raise self._out_of_range(position)

        return self.elements[position]

    def __iter__(self) -> Iterator[ElementT]:  # type: ignore[override]
        return iter(self.elements)

    def __reversed__(self) -> Iterator[ElementT]:
        return reversed(self.elements)

    def __contains__(self, value: object) -> bool:
        return value in self.elements

    def index(self, value: object, start: int = 0, stop: int | None = None) -> int:
        """Return the position of the first element equal to `value`.

        Raises ValueError when no such element exists.
        """
        if stop is None:
            stop = len(self.elements)
        return self.elements.index(value, start, stop)

    def count(self, value: object) -> int:
        return self.elements.count(value)

    def _out_of_range(self, position: int) -> PageIndexError:
        return PageIndexError(
            message=f"Page index {position} out of range",
            details={"index": position, "length": len(self.elements)},
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def is_cursor_based(self) -> bool:
        return self.cursors is not None

    def next_pagination(self) -> Pagination | None:
        """Parameters for requesting the next page, or None on the last page."""
        if self.next_url is None:
            return None

        if self.cursors is not None:
            return self._next_cursor_pagination()

        return Pagination(limit=self.limit, offset=(self.offset or 0) + self.limit)

    def _next_cursor_pagination(self) -> Pagination:
        # The next link decides the direction: recently-played moves with
        # `before`, followed artists with `after`.
        for key, value in self.next_url.query_params():
            if key in CURSOR_DIRECTIONS:
                return Pagination.from_cursor(self.limit, value, direction=key)

        return Pagination.from_cursor(
            self.limit, self.cursors.after, direction=QUERY_PARAM_CURSOR_AFTER
        )

    def previous_pagination(self) -> Pagination | None:
        """Parameters for requesting the previous page.

        Cursor-based pages only link forward, so this is None for them.
        """
        if self.previous_url is None or self.cursors is not None:
            return None

        return Pagination(limit=self.limit, offset=max((self.offset or 0) - self.limit, 0))


Sequence.register(Page)


@lru_cache(maxsize=None)
def _wrapped_adapter(page_type: type[Page[Any]]) -> TypeAdapter[dict[str, Page[Any]]]:
    return TypeAdapter(dict[str, page_type])  # type: ignore[valid-type]

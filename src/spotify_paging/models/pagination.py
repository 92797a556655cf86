"""Pagination request parameters."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

from spotify_paging.utils.constants import (
    FIRST_PAGE,
    MAX_LIMIT,
    QUERY_PARAM_CURSOR_AFTER,
    QUERY_PARAM_LIMIT,
    QUERY_PARAM_OFFSET,
)


class Pagination(BaseModel):
    """
    Parameters for paginating the elements of a larger collection.

    Three construction modes are supported:
    - limit and offset: ``Pagination(limit=20, offset=40)``
    - limit and 1-based page number: ``Pagination.from_page(20, 3)``
    - limit and cursor: ``Pagination.from_cursor(20, "abc")``, sent as
      ``after`` by default or as ``before`` with ``direction="before"``

    The Web API accepts at most 50 items per request (MAX_LIMIT). This is
    not validated here; callers are expected to pass sane values.

    Offset and cursor are mutually exclusive. Setting both, on construction
    or by assignment, raises a ValidationError.
    """

    model_config = ConfigDict(validate_assignment=True)

    limit: StrictInt = Field(
        ...,
        description=f"Number of items to be contained in the page (API maximum {MAX_LIMIT})",
    )
    offset: StrictInt | None = Field(
        None,
        description="Index of the first item in the page; None starts at the beginning",
    )
    cursor: StrictStr | None = Field(
        None,
        description="Cursor identifying the last item of the previous page",
    )
    direction: Literal["after", "before"] = Field(
        QUERY_PARAM_CURSOR_AFTER,
        description="Query key the cursor is sent under",
    )

    @classmethod
    def from_page(cls, limit: int, page: int) -> "Pagination":
        """Create parameters from a 1-based page number.

        With a limit of 20, page 1 holds items 0-19, page 2 holds 20-39,
        and so on. Page 1 and anything below it start at the beginning.
        """
        offset = limit * (page - 1) if page > FIRST_PAGE else None
        return cls(limit=limit, offset=offset)

    @classmethod
    def from_cursor(
        cls,
        limit: int,
        cursor: str | None = None,
        direction: Literal["after", "before"] = QUERY_PARAM_CURSOR_AFTER,
    ) -> "Pagination":
        return cls(limit=limit, cursor=cursor, direction=direction)

    @model_validator(mode="after")
    def validate_single_mode(self) -> "Pagination":
        """Ensure offset and cursor are not both set."""
        if self.offset is not None and self.cursor is not None:
            raise ValueError("offset and cursor are mutually exclusive")
        return self

    @property
    def is_cursor_based(self) -> bool:
        return self.cursor is not None

    def to_query_params(self) -> dict[str, int | str]:
        """Return the query parameters understood by the Web API.

        `limit` is always present. `offset` is added for offset-based
        requests, and the cursor under `after` or `before` (per `direction`)
        for cursor-based ones.
        """
        params: dict[str, int | str] = {QUERY_PARAM_LIMIT: self.limit}

        if self.offset is not None:
            params[QUERY_PARAM_OFFSET] = self.offset

        if self.cursor is not None:
            params[self.direction] = self.cursor

        return params

"""Global constants used throughout the library.

This module centralizes error codes, pagination limits and the wire-level
names used by the Spotify Web API paging objects.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Decode Errors
ERROR_CODE_DECODE_FAILED = "DECODE_FAILED"
ERROR_CODE_MALFORMED_INPUT = "MALFORMED_INPUT"
ERROR_CODE_MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
ERROR_CODE_EMPTY_WRAPPED_OBJECT = "EMPTY_WRAPPED_OBJECT"

# Sequence Errors
ERROR_CODE_INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

# ============================================================================
# Decode Error Kinds
# ============================================================================

KIND_MALFORMED_INPUT: Final = "malformed_input"
KIND_MISSING_REQUIRED_FIELD: Final = "missing_required_field"
KIND_EMPTY_WRAPPED_OBJECT: Final = "empty_wrapped_object"

# pydantic error types that mean a required key was absent
MISSING_ERROR_TYPES: Final[frozenset[str]] = frozenset({"missing"})

# ============================================================================
# Pagination Constraints
# ============================================================================

# Maximum page size accepted by the Web API for any single request.
# Documented contract only: Pagination does not enforce it.
MAX_LIMIT = 50
FIRST_PAGE = 1

# ============================================================================
# Query Parameter Names
# ============================================================================

QUERY_PARAM_LIMIT = "limit"
QUERY_PARAM_OFFSET = "offset"
QUERY_PARAM_CURSOR_AFTER = "after"
QUERY_PARAM_CURSOR_BEFORE = "before"
CURSOR_DIRECTIONS: Final[tuple[str, ...]] = (QUERY_PARAM_CURSOR_AFTER, QUERY_PARAM_CURSOR_BEFORE)

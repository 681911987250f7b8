"""
Foodie Finds API: Route Helpers
=================================

What:  Parameter coercion and result → response translation shared by the
       restaurant and dish routers.
"""

import re
from typing import Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from foodie_finds.schemas.common import ErrorResponse
from foodie_finds.schemas.results import Found, NotFound, QueryResult

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be bound
_SQLITE_INT_MIN = -(2 ** 63)
_SQLITE_INT_MAX = 2 ** 63 - 1

# OpenAPI documentation of the two error statuses every data route can return
ERROR_RESPONSES = {
    404: {"description": "No rows matched", "model": ErrorResponse},
    500: {"description": "Database unavailable or query failed", "model": ErrorResponse},
}


def parse_int_param(raw: str) -> Optional[int]:
    """
    Coerce a path segment to an integer the lenient way.

    Leading whitespace and an optional sign are accepted, then as many
    ASCII digits as follow; anything after them is ignored ("12abc" → 12).
    Returns None when no digits lead the segment ("abc" → None) or when the
    value does not fit a SQLite INTEGER. Callers bind None as SQL NULL,
    which matches no row, so a malformed id ends up as a 404 rather than a
    validation error.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    value = int(match.group(1))
    if not _SQLITE_INT_MIN <= value <= _SQLITE_INT_MAX:
        return None
    return value


def to_response(result: QueryResult) -> JSONResponse:
    """
    Translate a query result into the HTTP response.

        Found        → 200, envelope as body
        NotFound     → 404, {"message": ...}
        QueryFailed  → 500, {"message": ...}
    """
    if isinstance(result, Found):
        return JSONResponse(status_code=200, content=jsonable_encoder(result.envelope))
    if isinstance(result, NotFound):
        return JSONResponse(status_code=404, content={"message": result.message})
    return JSONResponse(status_code=500, content={"message": result.message})

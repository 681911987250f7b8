"""
Foodie Finds API: Restaurant Envelopes
========================================

What:  Response bodies of the /restaurants endpoints.
How:   Rows are passed through exactly as stored (column name → value), so
       each restaurant is a plain mapping rather than a declared model. The
       table is defined outside this service and may carry more columns
       than the ones the filters touch (id, name, cuisine, rating, isVeg,
       hasOutdoorSeating, isLuxury).
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

RestaurantRow = Dict[str, Any]


class RestaurantListResponse(BaseModel):
    """Returned by every endpoint that can match several restaurants."""
    restaurants: List[RestaurantRow] = Field(description="Matching rows in query order")


class RestaurantResponse(BaseModel):
    """Returned by GET /restaurants/details/{id}."""
    restaurant: RestaurantRow = Field(description="First row matching the id")

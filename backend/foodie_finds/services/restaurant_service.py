"""
Foodie Finds API: Restaurant Queries
======================================

What:  The five read operations over the `restaurants` table.
Who:   Called by the /restaurants route handlers.

Statements:
    fetch_all_restaurants              SELECT * FROM restaurants
    fetch_restaurant_by_id             ... WHERE id = :id
    fetch_restaurants_by_cuisine       ... WHERE cuisine = :cuisine
    fetch_restaurants_by_filter        ... WHERE isVeg = :isVeg AND hasOutdoorSeating = ... AND isLuxury = ...
    fetch_restaurants_sorted_by_rating ... ORDER BY rating DESC

Filter values are bound exactly as received. The flag filters are raw query
string text ("true", "1", ...) and compare against whatever the column holds.
"""

from typing import Any, Optional, Union

from foodie_finds.database import Database
from foodie_finds.schemas.restaurant import RestaurantListResponse, RestaurantResponse
from foodie_finds.schemas.results import QueryResult
from foodie_finds.services.base import QueryService

SELECT_ALL = "SELECT * FROM restaurants"
SELECT_BY_ID = "SELECT * FROM restaurants WHERE id = :id"
SELECT_BY_CUISINE = "SELECT * FROM restaurants WHERE cuisine = :cuisine"
SELECT_BY_FILTER = (
    "SELECT * FROM restaurants "
    "WHERE isVeg = :isVeg AND hasOutdoorSeating = :hasOutdoorSeating AND isLuxury = :isLuxury"
)
SELECT_SORTED_BY_RATING = "SELECT * FROM restaurants ORDER BY rating DESC"


def _many(rows) -> RestaurantListResponse:
    return RestaurantListResponse(restaurants=rows)


def _first(rows) -> RestaurantResponse:
    # ids are not guaranteed unique by the schema; the first row wins
    return RestaurantResponse(restaurant=rows[0])


class RestaurantService(QueryService):

    async def fetch_all_restaurants(self, db: Database) -> QueryResult:
        return await self._query(
            db, SELECT_ALL, None,
            not_found_message="No Restaurants found",
            wrap=_many,
        )

    async def fetch_restaurant_by_id(
        self,
        db: Database,
        restaurant_id: Optional[int],
        label: Union[int, str, None] = None,
    ) -> QueryResult:
        """
        Args:
            restaurant_id: Coerced path id; None binds NULL and matches nothing.
            label:         How the id is named in the not-found message
                           (defaults to restaurant_id).
        """
        shown = restaurant_id if label is None else label
        return await self._query(
            db, SELECT_BY_ID, {"id": restaurant_id},
            not_found_message=f"No Restaurant found with id: {shown}",
            wrap=_first,
        )

    async def fetch_restaurants_by_cuisine(self, db: Database, cuisine: str) -> QueryResult:
        return await self._query(
            db, SELECT_BY_CUISINE, {"cuisine": cuisine},
            not_found_message=f"No Restaurant found with cuisine: {cuisine}",
            wrap=_many,
        )

    async def fetch_restaurants_by_filter(
        self,
        db: Database,
        is_veg: Any,
        has_outdoor_seating: Any,
        is_luxury: Any,
    ) -> QueryResult:
        """All three flags must match; a missing flag (None) matches nothing."""
        return await self._query(
            db,
            SELECT_BY_FILTER,
            {
                "isVeg": is_veg,
                "hasOutdoorSeating": has_outdoor_seating,
                "isLuxury": is_luxury,
            },
            not_found_message="No Restaurant found with provided filter",
            wrap=_many,
        )

    async def fetch_restaurants_sorted_by_rating(self, db: Database) -> QueryResult:
        return await self._query(
            db, SELECT_SORTED_BY_RATING, None,
            not_found_message="No Restaurants found",
            wrap=_many,
        )


restaurant_service = RestaurantService()

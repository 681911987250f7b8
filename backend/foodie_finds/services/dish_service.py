"""
Foodie Finds API: Dish Queries
================================

What:  The four read operations over the `dishes` table.
Who:   Called by the /dishes route handlers.
"""

from typing import Any, Optional, Union

from foodie_finds.database import Database
from foodie_finds.schemas.dish import DishListResponse, DishResponse
from foodie_finds.schemas.results import QueryResult
from foodie_finds.services.base import QueryService

SELECT_ALL = "SELECT * FROM dishes"
SELECT_BY_ID = "SELECT * FROM dishes WHERE id = :id"
SELECT_BY_FILTER = "SELECT * FROM dishes WHERE isVeg = :isVeg"
SELECT_SORTED_BY_PRICE = "SELECT * FROM dishes ORDER BY price"


def _many(rows) -> DishListResponse:
    return DishListResponse(dishes=rows)


def _first(rows) -> DishResponse:
    return DishResponse(dish=rows[0])


class DishService(QueryService):

    async def fetch_all_dishes(self, db: Database) -> QueryResult:
        return await self._query(
            db, SELECT_ALL, None,
            not_found_message="No Dishes found",
            wrap=_many,
        )

    async def fetch_dish_by_id(
        self,
        db: Database,
        dish_id: Optional[int],
        label: Union[int, str, None] = None,
    ) -> QueryResult:
        shown = dish_id if label is None else label
        return await self._query(
            db, SELECT_BY_ID, {"id": dish_id},
            not_found_message=f"No Dishes found with id: {shown}",
            wrap=_first,
        )

    async def fetch_dishes_by_filter(self, db: Database, is_veg: Any) -> QueryResult:
        return await self._query(
            db, SELECT_BY_FILTER, {"isVeg": is_veg},
            not_found_message="No Dishes found with provided filter",
            wrap=_many,
        )

    async def fetch_dishes_sorted_by_price(self, db: Database) -> QueryResult:
        return await self._query(
            db, SELECT_SORTED_BY_PRICE, None,
            not_found_message="No Dishes found",
            wrap=_many,
        )


dish_service = DishService()

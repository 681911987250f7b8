"""
Foodie Finds API: Dish Envelopes
==================================

What:  Response bodies of the /dishes endpoints. Rows are unmodified
       projections of the dishes table (id, name, price, isVeg, ...).
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

DishRow = Dict[str, Any]


class DishListResponse(BaseModel):
    dishes: List[DishRow] = Field(description="Matching rows in query order")


class DishResponse(BaseModel):
    dish: DishRow = Field(description="First row matching the id")

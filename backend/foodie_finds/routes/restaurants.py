"""
Foodie Finds API: Restaurant Route Handlers
=============================================

What:  GET endpoints over the restaurants table.
How:   Each handler extracts its parameters, calls exactly one
       RestaurantService operation, and returns `to_response(result)`.

Route Inventory:
    GET /restaurants                       all restaurants
    GET /restaurants/details/{id}          one restaurant by id
    GET /restaurants/cuisine/{cuisine}     exact cuisine match
    GET /restaurants/filter                isVeg & hasOutdoorSeating & isLuxury
    GET /restaurants/sort-by-rating        all restaurants, best rated first
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from foodie_finds.database import Database, get_database
from foodie_finds.routes.common import ERROR_RESPONSES, parse_int_param, to_response
from foodie_finds.schemas.restaurant import RestaurantListResponse, RestaurantResponse
from foodie_finds.services.restaurant_service import restaurant_service

router = APIRouter(prefix="/restaurants", tags=["Restaurants"])


@router.get(
    "",
    responses={200: {"model": RestaurantListResponse}, **ERROR_RESPONSES},
    summary="List all restaurants",
)
async def get_all_restaurants(db: Database = Depends(get_database)) -> JSONResponse:
    result = await restaurant_service.fetch_all_restaurants(db)
    return to_response(result)


@router.get(
    "/details/{id}",
    responses={200: {"model": RestaurantResponse}, **ERROR_RESPONSES},
    summary="Get a restaurant by id",
)
async def get_restaurant_by_id(id: str, db: Database = Depends(get_database)) -> JSONResponse:
    """
    The id is taken as text and coerced with `parse_int_param`; a segment
    without leading ASCII digits, or one too large for a SQLite INTEGER,
    matches nothing and answers 404.
    """
    restaurant_id = parse_int_param(id)
    result = await restaurant_service.fetch_restaurant_by_id(
        db, restaurant_id, label=id if restaurant_id is None else restaurant_id
    )
    return to_response(result)


@router.get(
    "/cuisine/{cuisine}",
    responses={200: {"model": RestaurantListResponse}, **ERROR_RESPONSES},
    summary="List restaurants serving a cuisine",
)
async def get_restaurants_by_cuisine(
    cuisine: str,
    db: Database = Depends(get_database),
) -> JSONResponse:
    result = await restaurant_service.fetch_restaurants_by_cuisine(db, cuisine)
    return to_response(result)


@router.get(
    "/filter",
    responses={200: {"model": RestaurantListResponse}, **ERROR_RESPONSES},
    summary="Filter restaurants by veg, outdoor seating and luxury flags",
    description=(
        "All three flags are compared for equality against the stored columns. "
        "Values are passed through unchanged; a flag left out matches nothing."
    ),
)
async def get_restaurants_by_filter(
    isVeg: Optional[str] = Query(default=None),
    hasOutdoorSeating: Optional[str] = Query(default=None),
    isLuxury: Optional[str] = Query(default=None),
    db: Database = Depends(get_database),
) -> JSONResponse:
    result = await restaurant_service.fetch_restaurants_by_filter(
        db, isVeg, hasOutdoorSeating, isLuxury
    )
    return to_response(result)


@router.get(
    "/sort-by-rating",
    responses={200: {"model": RestaurantListResponse}, **ERROR_RESPONSES},
    summary="List restaurants ordered by rating, highest first",
)
async def get_restaurants_sorted_by_rating(db: Database = Depends(get_database)) -> JSONResponse:
    result = await restaurant_service.fetch_restaurants_sorted_by_rating(db)
    return to_response(result)

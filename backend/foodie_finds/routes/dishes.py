"""
Foodie Finds API: Dish Route Handlers
=======================================

Route Inventory:
    GET /dishes                    all dishes
    GET /dishes/details/{id}       one dish by id
    GET /dishes/filter             isVeg match
    GET /dishes/sort-by-price      all dishes, cheapest first
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from foodie_finds.database import Database, get_database
from foodie_finds.routes.common import ERROR_RESPONSES, parse_int_param, to_response
from foodie_finds.schemas.dish import DishListResponse, DishResponse
from foodie_finds.services.dish_service import dish_service

router = APIRouter(prefix="/dishes", tags=["Dishes"])


@router.get(
    "",
    responses={200: {"model": DishListResponse}, **ERROR_RESPONSES},
    summary="List all dishes",
)
async def get_all_dishes(db: Database = Depends(get_database)) -> JSONResponse:
    result = await dish_service.fetch_all_dishes(db)
    return to_response(result)


@router.get(
    "/details/{id}",
    responses={200: {"model": DishResponse}, **ERROR_RESPONSES},
    summary="Get a dish by id",
)
async def get_dish_by_id(id: str, db: Database = Depends(get_database)) -> JSONResponse:
    dish_id = parse_int_param(id)
    result = await dish_service.fetch_dish_by_id(
        db, dish_id, label=id if dish_id is None else dish_id
    )
    return to_response(result)


@router.get(
    "/filter",
    responses={200: {"model": DishListResponse}, **ERROR_RESPONSES},
    summary="Filter dishes by the isVeg flag",
)
async def get_dishes_by_filter(
    isVeg: Optional[str] = Query(default=None),
    db: Database = Depends(get_database),
) -> JSONResponse:
    result = await dish_service.fetch_dishes_by_filter(db, isVeg)
    return to_response(result)


@router.get(
    "/sort-by-price",
    responses={200: {"model": DishListResponse}, **ERROR_RESPONSES},
    summary="List dishes ordered by price, cheapest first",
)
async def get_dishes_sorted_by_price(db: Database = Depends(get_database)) -> JSONResponse:
    result = await dish_service.fetch_dishes_sorted_by_price(db)
    return to_response(result)

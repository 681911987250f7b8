# Routes package init
"""
Foodie Finds API: Routes Package
==================================

Route Inventory:
    - restaurants.py:  GET /restaurants, /restaurants/details/{id},
                       /restaurants/cuisine/{cuisine}, /restaurants/filter,
                       /restaurants/sort-by-rating
    - dishes.py:       GET /dishes, /dishes/details/{id}, /dishes/filter,
                       /dishes/sort-by-price
    - health.py:       GET /health

Routes are thin: extract parameters, call one query operation, translate the
QueryResult with common.to_response.
"""

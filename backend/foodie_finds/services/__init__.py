# Services package init
"""
Foodie Finds API: Query Layer
===============================

What:  One async operation per endpoint, each running a single fixed SQL
       statement and returning a QueryResult (Found / NotFound / QueryFailed).

Service Inventory:
    - QueryService (base): execute, inspect row count, wrap in envelope
    - RestaurantService: five operations over `restaurants`
    - DishService: four operations over `dishes`

Services never touch HTTP. They take the storage handle as their first
argument so routes can inject it and tests can pass a mock.
"""

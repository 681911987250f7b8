"""
Foodie Finds API: Restaurant Service Unit Tests
=================================================

What:  Tests for the five restaurant query operations.
How:   A mock storage handle (no database) checks the statement, bound
       parameters and result variant of each operation.
"""

import pytest

from foodie_finds.exceptions import DatabaseError, DatabaseUnavailableError
from foodie_finds.schemas.restaurant import RestaurantListResponse, RestaurantResponse
from foodie_finds.schemas.results import Found, NotFound, QueryFailed
from foodie_finds.services import restaurant_service as module
from foodie_finds.services.restaurant_service import RestaurantService

ROWS = [
    {"id": 7, "name": "A", "cuisine": "Italian", "rating": 4.5},
    {"id": 7, "name": "A duplicate", "cuisine": "Italian", "rating": 3.0},
]


class TestFetchAllRestaurants:

    def setup_method(self):
        self.service = RestaurantService()

    @pytest.mark.asyncio
    async def test_found_wraps_all_rows(self, mock_db):
        mock_db.fetch_all.return_value = ROWS

        result = await self.service.fetch_all_restaurants(mock_db)

        assert isinstance(result, Found)
        assert isinstance(result.envelope, RestaurantListResponse)
        assert result.envelope.restaurants == ROWS
        mock_db.fetch_all.assert_awaited_once_with(module.SELECT_ALL, None)

    @pytest.mark.asyncio
    async def test_empty_is_not_found(self, mock_db):
        result = await self.service.fetch_all_restaurants(mock_db)
        assert result == NotFound(message="No Restaurants found")

    @pytest.mark.asyncio
    async def test_storage_unavailable_is_query_failed(self, mock_db):
        mock_db.fetch_all.side_effect = DatabaseUnavailableError()

        result = await self.service.fetch_all_restaurants(mock_db)

        assert isinstance(result, QueryFailed)
        assert result.message == "Database connection is not established"

    @pytest.mark.asyncio
    async def test_every_call_hits_the_database(self, mock_db):
        mock_db.fetch_all.return_value = ROWS
        await self.service.fetch_all_restaurants(mock_db)
        await self.service.fetch_all_restaurants(mock_db)
        assert mock_db.fetch_all.await_count == 2


class TestFetchRestaurantById:

    def setup_method(self):
        self.service = RestaurantService()

    @pytest.mark.asyncio
    async def test_takes_first_matching_row(self, mock_db):
        """ids are not enforced unique, so only the first row is returned."""
        mock_db.fetch_all.return_value = ROWS

        result = await self.service.fetch_restaurant_by_id(mock_db, 7)

        assert isinstance(result.envelope, RestaurantResponse)
        assert result.envelope.restaurant == ROWS[0]
        mock_db.fetch_all.assert_awaited_once_with(module.SELECT_BY_ID, {"id": 7})

    @pytest.mark.asyncio
    async def test_not_found_names_the_id(self, mock_db):
        result = await self.service.fetch_restaurant_by_id(mock_db, 5)
        assert result.message == "No Restaurant found with id: 5"

    @pytest.mark.asyncio
    async def test_label_overrides_message(self, mock_db):
        result = await self.service.fetch_restaurant_by_id(mock_db, None, label="abc")

        assert result.message == "No Restaurant found with id: abc"
        mock_db.fetch_all.assert_awaited_once_with(module.SELECT_BY_ID, {"id": None})


class TestRestaurantFilters:

    def setup_method(self):
        self.service = RestaurantService()

    @pytest.mark.asyncio
    async def test_cuisine_is_bound_not_formatted(self, mock_db):
        await self.service.fetch_restaurants_by_cuisine(mock_db, "Thai")
        mock_db.fetch_all.assert_awaited_once_with(
            module.SELECT_BY_CUISINE, {"cuisine": "Thai"}
        )
        assert "Thai" not in module.SELECT_BY_CUISINE

    @pytest.mark.asyncio
    async def test_cuisine_not_found_message(self, mock_db):
        result = await self.service.fetch_restaurants_by_cuisine(mock_db, "French")
        assert result == NotFound(message="No Restaurant found with cuisine: French")

    @pytest.mark.asyncio
    async def test_flags_passed_through_unchanged(self, mock_db):
        mock_db.fetch_all.return_value = ROWS[:1]

        result = await self.service.fetch_restaurants_by_filter(mock_db, "true", "1", None)

        assert isinstance(result, Found)
        mock_db.fetch_all.assert_awaited_once_with(
            module.SELECT_BY_FILTER,
            {"isVeg": "true", "hasOutdoorSeating": "1", "isLuxury": None},
        )

    @pytest.mark.asyncio
    async def test_filter_not_found_message(self, mock_db):
        result = await self.service.fetch_restaurants_by_filter(mock_db, "x", "y", "z")
        assert result.message == "No Restaurant found with provided filter"

    @pytest.mark.asyncio
    async def test_sorted_by_rating_statement(self, mock_db):
        await self.service.fetch_restaurants_sorted_by_rating(mock_db)
        statement, params = mock_db.fetch_all.await_args.args
        assert statement.endswith("ORDER BY rating DESC")
        assert params is None

    @pytest.mark.asyncio
    async def test_driver_error_message_is_kept(self, mock_db):
        mock_db.fetch_all.side_effect = DatabaseError(message="database is locked")
        result = await self.service.fetch_restaurants_sorted_by_rating(mock_db)
        assert result == QueryFailed(message="database is locked")

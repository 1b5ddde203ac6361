"""
Restaurant persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.sql import FilterBuilder

from .schemas import RestaurantFilters

RESTAURANT_COLUMNS = "restaurant_id, name, cuisine, city, rating, is_open, created_at"


def build_list_query(filters: RestaurantFilters) -> tuple[str, list[Any]]:
    """
    SQL and parameters for the filtered restaurant list, best rated first.
    """
    builder = FilterBuilder()
    builder.add("city = {}", filters.city)
    builder.add("cuisine ILIKE {}", filters.cuisine)
    builder.add("rating >= {}", filters.min_rating)
    where = builder.where_clause()
    page = builder.pagination(filters.limit, filters.offset)

    sql = f"""
        SELECT {RESTAURANT_COLUMNS}
        FROM restaurant_schema.restaurants
        {where}
        ORDER BY rating DESC NULLS LAST
        {page}
        """
    return sql, builder.params


async def list_restaurants(database: Database, filters: RestaurantFilters) -> list[dict]:
    sql, params = build_list_query(filters)
    return await database.fetch_all(sql, *params)


async def get_restaurant(database: Database, restaurant_id: int) -> dict | None:
    return await database.fetch_one(
        f"""
        SELECT {RESTAURANT_COLUMNS}
        FROM restaurant_schema.restaurants
        WHERE restaurant_id = $1
        """,
        restaurant_id,
    )


async def set_open(database: Database, restaurant_id: int, *, is_open: bool) -> dict | None:
    return await database.fetch_one(
        """
        UPDATE restaurant_schema.restaurants
        SET is_open = $1
        WHERE restaurant_id = $2
        RETURNING restaurant_id, is_open
        """,
        is_open,
        restaurant_id,
    )

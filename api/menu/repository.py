"""
Menu persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.sql import FilterBuilder, placeholders

from .schemas import MenuFilters


def build_menu_query(filters: MenuFilters) -> tuple[str, list[Any]]:
    """
    SQL and parameters for one restaurant's menu, ordered by item name.

    The restaurant id is always $1; optional filters follow.
    """
    builder = FilterBuilder(required=[("restaurant_id = {}", filters.restaurant_id)])
    builder.add("is_available = {}", filters.available)
    builder.add("category ILIKE {}", filters.category)
    where = builder.where_clause()
    page = builder.pagination(filters.limit, filters.offset)

    sql = f"""
        SELECT item_id, restaurant_id, name, category, price, is_available, created_at
        FROM restaurant_schema.menu_items
        {where}
        ORDER BY name
        {page}
        """
    return sql, builder.params


def build_validate_query(item_ids: list[int]) -> tuple[str, list[Any]]:
    sql = f"""
        SELECT item_id, restaurant_id, name, price, is_available
        FROM restaurant_schema.menu_items
        WHERE item_id IN ({placeholders(len(item_ids))})
        """
    return sql, list(item_ids)


async def list_menu(database: Database, filters: MenuFilters) -> list[dict]:
    sql, params = build_menu_query(filters)
    return await database.fetch_all(sql, *params)


async def validate_items(database: Database, item_ids: list[int]) -> list[dict]:
    sql, params = build_validate_query(item_ids)
    return await database.fetch_all(sql, *params)

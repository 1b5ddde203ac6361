"""
Restaurant business logic.

Database failures stop here: they are logged with full context and turned
into a generic 500 so no SQL or driver detail reaches the client.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository
from .schemas import RestaurantFilters

logger = logging.getLogger(__name__)


async def list_restaurants(database: Database, filters: RestaurantFilters) -> list[dict]:
    try:
        return await repository.list_restaurants(database, filters)
    except Exception as exc:
        logger.exception("restaurant_list_failed filters=%s", filters.model_dump())
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch restaurants.",
        ) from exc


async def get_restaurant(database: Database, restaurant_id: int) -> dict:
    try:
        row = await repository.get_restaurant(database, restaurant_id)
    except Exception as exc:
        logger.exception("restaurant_fetch_failed restaurant_id=%s", restaurant_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch restaurant.",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found.")
    return row


async def set_open(database: Database, restaurant_id: int, *, is_open: bool) -> dict:
    try:
        row = await repository.set_open(database, restaurant_id, is_open=is_open)
    except Exception as exc:
        logger.exception("restaurant_update_failed restaurant_id=%s is_open=%s", restaurant_id, is_open)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update restaurant.",
        ) from exc

    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found.")
    logger.info("restaurant_open_set restaurant_id=%s is_open=%s", restaurant_id, row["is_open"])
    return row

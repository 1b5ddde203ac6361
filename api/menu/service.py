"""
Menu business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository
from .schemas import MenuFilters

logger = logging.getLogger(__name__)


async def list_menu(database: Database, filters: MenuFilters) -> list[dict]:
    try:
        return await repository.list_menu(database, filters)
    except Exception as exc:
        logger.exception("menu_list_failed filters=%s", filters.model_dump())
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch menu.",
        ) from exc


async def validate_items(database: Database, item_ids: list[int]) -> list[dict]:
    """
    Current price and availability for the given item ids.

    Unknown ids are simply absent from the result.
    """
    try:
        return await repository.validate_items(database, item_ids)
    except Exception as exc:
        logger.exception("menu_validate_failed item_count=%s", len(item_ids))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Validation failed.",
        ) from exc

"""
Menu API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from core.db import Database
from core.dependencies import get_database, optional_text
from core.sql import MAX_ID, MAX_LIMIT, MAX_OFFSET

from . import schemas, service

router = APIRouter(prefix="/v1")


def menu_filters(
    restaurant_id: int = Path(ge=1, le=MAX_ID),
    available: bool | None = Query(default=None),
    category: str | None = Query(default=None, max_length=200),
    limit: int = Query(default=100, ge=1, le=MAX_LIMIT),
    offset: int = Query(default=0, ge=0, le=MAX_OFFSET),
) -> schemas.MenuFilters:
    return schemas.MenuFilters(
        restaurant_id=restaurant_id,
        available=available,
        category=optional_text(category),
        limit=limit,
        offset=offset,
    )


@router.get("/restaurants/{restaurant_id}/menu", response_model=list[schemas.MenuItem])
async def list_menu(
    filters: schemas.MenuFilters = Depends(menu_filters),
    database: Database = Depends(get_database),
) -> list[dict]:
    return await service.list_menu(database, filters)


@router.post("/menu/validate", response_model=list[schemas.ValidatedMenuItem])
async def validate_items(
    request: schemas.ValidateItemsRequest,
    database: Database = Depends(get_database),
) -> list[dict]:
    """
    Check availability and pricing for a list of item ids.
    """
    return await service.validate_items(database, request.item_ids)

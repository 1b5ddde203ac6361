"""
Restaurant API endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, Path, Query

from core.db import Database
from core.dependencies import get_database, optional_text
from core.sql import MAX_ID, MAX_LIMIT, MAX_OFFSET

from . import schemas, service

router = APIRouter(prefix="/v1")


def restaurant_filters(
    city: str | None = Query(default=None, max_length=200),
    cuisine: str | None = Query(default=None, max_length=200),
    min_rating: Decimal | None = Query(default=None, ge=0),
    limit: int = Query(default=50, ge=1, le=MAX_LIMIT),
    offset: int = Query(default=0, ge=0, le=MAX_OFFSET),
) -> schemas.RestaurantFilters:
    return schemas.RestaurantFilters(
        city=optional_text(city),
        cuisine=optional_text(cuisine),
        min_rating=min_rating,
        limit=limit,
        offset=offset,
    )


@router.get("/restaurants", response_model=list[schemas.Restaurant])
async def list_restaurants(
    filters: schemas.RestaurantFilters = Depends(restaurant_filters),
    database: Database = Depends(get_database),
) -> list[dict]:
    return await service.list_restaurants(database, filters)


@router.get("/restaurants/{restaurant_id}", response_model=schemas.Restaurant)
async def get_restaurant(
    restaurant_id: int = Path(ge=1, le=MAX_ID),
    database: Database = Depends(get_database),
) -> dict:
    return await service.get_restaurant(database, restaurant_id)


@router.put("/restaurants/{restaurant_id}/open", response_model=schemas.OpenStatus)
async def set_restaurant_open(
    request: schemas.SetOpenRequest,
    restaurant_id: int = Path(ge=1, le=MAX_ID),
    database: Database = Depends(get_database),
) -> dict:
    """
    Admin toggle for the open/closed flag. The only write endpoint.
    """
    return await service.set_open(database, restaurant_id, is_open=request.is_open)

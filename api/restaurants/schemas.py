"""
Restaurant API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, StrictBool


class RestaurantFilters(BaseModel):
    city: str | None = None
    cuisine: str | None = None
    min_rating: Decimal | None = None
    limit: int = 50
    offset: int = 0


class Restaurant(BaseModel):
    restaurant_id: int
    name: str
    cuisine: str | None = None
    city: str | None = None
    rating: float | None = None
    is_open: bool
    created_at: datetime | None = None


class SetOpenRequest(BaseModel):
    # Strict: "yes", 1 or "true" are rejected, only JSON true/false pass.
    is_open: StrictBool


class OpenStatus(BaseModel):
    restaurant_id: int
    is_open: bool

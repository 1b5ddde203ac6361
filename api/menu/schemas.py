"""
Menu API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

from core.sql import MAX_ID

# Upper bound on ids per validation call; each id is one bound parameter.
MAX_VALIDATE_ITEMS = 1000


class MenuFilters(BaseModel):
    restaurant_id: int
    available: bool | None = None
    category: str | None = None
    limit: int = 100
    offset: int = 0


class MenuItem(BaseModel):
    item_id: int
    restaurant_id: int
    name: str
    category: str | None = None
    price: float
    is_available: bool
    created_at: datetime | None = None


class ValidateItemsRequest(BaseModel):
    item_ids: list[Annotated[StrictInt, Field(ge=1, le=MAX_ID)]] = Field(
        ..., min_length=1, max_length=MAX_VALIDATE_ITEMS
    )


class ValidatedMenuItem(BaseModel):
    item_id: int
    restaurant_id: int
    name: str
    price: float
    is_available: bool

"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from .db import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def optional_text(value: str | None) -> str | None:
    # Blank query values count as absent.
    value = (value or "").strip()
    return value or None

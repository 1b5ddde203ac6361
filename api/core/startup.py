"""
Startup gate: block until the database accepts connections.

The database container may come up after this service, so the first
connection is retried a bounded number of times before giving up.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .db import Database
from .errors import ConnectivityError

logger = logging.getLogger(__name__)


async def wait_for_ready(
    database: Database,
    *,
    max_attempts: int = 15,
    delay_ms: int = 2000,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> int:
    """
    Acquire and release one connection, retrying on failure.

    Returns the number of failed attempts before the database answered.
    Raises ConnectivityError once `max_attempts` attempts have failed.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    for attempt in range(1, max_attempts + 1):
        try:
            async with database.acquire():
                pass
        except ConnectivityError as exc:
            if attempt == max_attempts:
                logger.error("DB connect attempt %s/%s failed: %s", attempt, max_attempts, exc)
                break
            logger.warning(
                "DB connect attempt %s/%s failed, retrying in %sms: %s",
                attempt,
                max_attempts,
                delay_ms,
                exc,
            )
            await sleep(delay_ms / 1000)
            continue

        logger.info("Database reachable after %s attempt(s)", attempt)
        return attempt - 1

    raise ConnectivityError(f"Unable to connect to DB after {max_attempts} attempts")

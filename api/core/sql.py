"""
Helpers for building parameterized SQL.

Values never go into SQL text. Fragments only reference positional
placeholders ($1, $2, ...) and the values travel in a parallel list that is
handed to the driver, so placeholder N always binds params[N - 1].
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def placeholders(count: int, *, start: int = 1) -> str:
    """
    Comma-separated placeholders for an IN list: placeholders(3) -> "$1, $2, $3".
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    if start < 1:
        raise ValueError("start must be >= 1")
    return ", ".join(f"${i}" for i in range(start, start + count))


class FilterBuilder:
    """
    Collect optional WHERE conditions together with their bound values.

    Templates use `{}` where the placeholder goes, e.g. "city = {}".
    """

    def __init__(self, required: Iterable[tuple[str, Any]] = ()) -> None:
        self.conditions: list[str] = []
        self.params: list[Any] = []
        for template, value in required:
            self._bind(template, value)

    def _bind(self, template: str, value: Any) -> None:
        self.params.append(value)
        self.conditions.append(template.format(f"${len(self.params)}"))

    def add(self, template: str, value: Any) -> "FilterBuilder":
        # Absent filters (None or empty string) add nothing.
        if value is None or value == "":
            return self
        self._bind(template, value)
        return self

    def where_clause(self) -> str:
        if not self.conditions:
            return ""
        return "WHERE " + " AND ".join(self.conditions)

    def pagination(self, limit: int, offset: int) -> str:
        """
        Bind limit and offset as the last two parameters.

        Call this once, after every condition has been added.
        """
        self.params.append(limit)
        self.params.append(offset)
        n = len(self.params)
        return f"LIMIT ${n - 1} OFFSET ${n}"


# Request bounds for offset/limit pagination.
MAX_LIMIT = 200
MAX_OFFSET = 100_000

# Ids are int4 columns; larger values cannot be bound by the driver.
MAX_ID = 2_147_483_647

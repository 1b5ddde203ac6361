"""
Database error taxonomy.

- ConnectivityError: database unreachable (retried only at startup)
- QueryError: any other database failure (500, detail logged server-side)

Client input errors are FastAPI's RequestValidationError (400) and missing
rows are HTTPException(404); neither needs a type of its own.
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    pass


class ConnectivityError(ServiceError):
    pass


class QueryError(ServiceError):
    pass

"""
Foodie Finds API: Storage Handle
==================================

What:  The single long-lived handle on the embedded restaurants database,
       plus the FastAPI dependency that hands it to route handlers.
How:   `Database` wraps an async SQLAlchemy engine (aiosqlite driver). It is
       constructed by the application factory, opened once in the lifespan,
       and stored on `app.state.database`. Handlers receive it through
       `Depends(get_database)`.
When:  Opened at startup, disposed at shutdown; every query in between runs
       on a connection checked out from the same engine.

Failure model:
    If `open()` cannot reach the database it logs the error and leaves the
    handle unset. The process keeps serving; every query then raises
    DatabaseUnavailableError, which the routes answer with HTTP 500.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from foodie_finds.exceptions import DatabaseError, DatabaseUnavailableError

logger = logging.getLogger(__name__)


def _driver_message(exc: Exception) -> str:
    """Returns the driver's own error text when SQLAlchemy wrapped one."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Database:
    """
    Read-only access to the restaurants/dishes database.

    Attributes:
        url:   Async SQLAlchemy URL (e.g. sqlite+aiosqlite:///./db.sqlite)
        echo:  Log every statement through the sqlalchemy.engine logger
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    async def open(self) -> bool:
        """
        Create the engine and verify the database answers a trivial query.

        Returns:
            True when the handle is usable, False when opening failed.
            Failure is logged, never raised.
        """
        if self._engine is not None:
            return True

        engine: Optional[AsyncEngine] = None
        try:
            engine = create_async_engine(self.url, echo=self.echo)
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to connect to the database: %s", _driver_message(e))
            if engine is not None:
                await engine.dispose()
            return False

        self._engine = engine
        logger.info("Database connection established successfully")
        return True

    async def fetch_all(
        self,
        statement: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Execute one fixed SQL statement with bound parameters.

        Args:
            statement: SQL text using :name placeholders. Never built from user input.
            params:    Values bound to the placeholders (None binds SQL NULL).

        Returns:
            Every result row as a plain dict, in the order the database produced them.

        Raises:
            DatabaseUnavailableError: The handle was never opened (or was closed).
            DatabaseError: The driver rejected or failed the statement.
        """
        if self._engine is None:
            raise DatabaseUnavailableError(context={"statement": statement})

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text(statement), dict(params or {}))
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            raise DatabaseError(
                message=_driver_message(e),
                context={"statement": statement},
            ) from e

    async def ping(self) -> bool:
        """Lightweight connectivity probe used by the health check."""
        if self._engine is None:
            return False
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database ping failed: %s", _driver_message(e))
            return False

    async def close(self) -> None:
        """Dispose the engine. Safe to call on a handle that never opened."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None


# ── Dependency ────────────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """
    FastAPI dependency returning the handle the application was built with.

    Example usage in a route:
        @router.get("/dishes")
        async def get_all_dishes(db: Database = Depends(get_database)):
            ...
    """
    return request.app.state.database

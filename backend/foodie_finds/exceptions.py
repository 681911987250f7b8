"""
Foodie Finds API: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for storage failures.
How:   Each exception carries a message and an optional context dict.
       The storage handle raises them; the query layer converts them into
       `QueryFailed` results, which routes translate to HTTP 500.

Exception Hierarchy:
    FoodieFindsError (base)
    └── DatabaseError                 → 500 (query execution failed)
        └── DatabaseUnavailableError  → 500 (handle never opened)

"Nothing matched" is not an exception here. Query operations return a
`NotFound` result for it (see foodie_finds.schemas.results).
"""

from typing import Any, Dict, Optional


class FoodieFindsError(Exception):
    """
    Base exception for all Foodie Finds application errors.

    Attributes:
        message:  Error description, returned to the client as-is
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(FoodieFindsError):
    """
    Raised when a statement fails inside the database driver.

    The message is the driver's own error text (e.g. "no such table: dishes").
    The statement that failed is kept in `context`.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseUnavailableError(DatabaseError):
    """Raised when a query is attempted before the storage handle was opened."""

    def __init__(
        self,
        message: str = "Database connection is not established",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

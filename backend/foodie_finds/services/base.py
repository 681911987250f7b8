"""
Foodie Finds API: Query Service Base
======================================

What:  The contract every read operation follows.
How:   Run one fixed statement through the storage handle, then inspect the
       result set:

           storage error  → QueryFailed(<driver message>)
           zero rows      → NotFound(<what was searched for>)
           otherwise      → Found(<envelope built from the rows>)

       Subclasses only declare their SQL, the message for an empty result,
       and how rows become an envelope.

Nothing is cached: every call executes its statement again.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from foodie_finds.database import Database
from foodie_finds.exceptions import FoodieFindsError
from foodie_finds.schemas.results import Found, NotFound, QueryFailed, QueryResult

logger = logging.getLogger(__name__)

Rows = List[Dict[str, Any]]


class QueryService:
    """Shared execute-inspect-wrap logic for the restaurant and dish services."""

    async def _query(
        self,
        db: Database,
        statement: str,
        params: Optional[Mapping[str, Any]],
        *,
        not_found_message: str,
        wrap: Callable[[Rows], Any],
    ) -> QueryResult:
        """
        Args:
            db:                 Storage handle injected by the route
            statement:          Fixed SQL text with :name placeholders
            params:             Values bound to the placeholders
            not_found_message:  Message for an empty result set
            wrap:               Builds the response envelope from non-empty rows
        """
        try:
            rows = await db.fetch_all(statement, params)
        except FoodieFindsError as e:
            logger.error("Query failed: %s | Context: %s", e.message, e.context)
            return QueryFailed(message=e.message)

        if not rows:
            logger.debug("No rows for %r with %r", statement, params)
            return NotFound(message=not_found_message)

        return Found(envelope=wrap(rows))

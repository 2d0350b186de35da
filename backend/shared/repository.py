"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the small query helpers they share.
"""

from typing import Any, Generic, Mapping, Optional, TypeVar
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Single-row and multi-row lookup helpers

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class AccountRepository(BaseRepository[UserRecord]):
            def get_user_by_id(self, user_id: str) -> Optional[UserRecord]:
                row = self._fetch_one("user", {"id": user_id})
                return self._map_to_user(row) if row else None
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _fetch_one(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        """Return the first row of `table` matching all equality `filters`."""
        query = self._select(table, filters)
        result = query.limit(1).execute()
        if not result.data:
            return None
        return result.data[0]

    def _fetch_all(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        desc: bool = False,
    ) -> list[dict[str, Any]]:
        """Return every row of `table` matching all equality `filters`."""
        query = self._select(table, filters)
        if order_by:
            query = query.order(order_by, desc=desc)
        result = query.execute()
        return result.data or []

    def _select(self, table: str, filters: Optional[Mapping[str, Any]]):
        query = self._db.table(table).select("*")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        return query

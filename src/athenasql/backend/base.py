"""
Abstract base class for query backends.
"""

from abc import ABC, abstractmethod
from typing import Any


class QueryBackend(ABC):
    """
    Abstract base class for query-executing handles.

    All backend implementations must inherit from this class and implement
    all abstract methods.
    """

    def __init__(self, database: str):
        """
        Initialize the backend with its target database.

        Args:
            database: Name of the database (schema) the backend queries
        """
        self.database = database

    @abstractmethod
    async def query(self, sql: str) -> list[dict[str, Any]]:
        """
        Execute a SQL statement and return its rows.

        Args:
            sql: SQL text, executed verbatim

        Returns:
            List of rows, each a dict of column name to value in column order

        Raises:
            QueryExecutionError: If the query fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the backend and release its resources."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

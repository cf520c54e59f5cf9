"""
SQLAlchemy/PyAthena backend for AWS Athena.
"""

import asyncio
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..config import AthenaConnectionConfig
from ..exceptions import DatabaseConnectionError, QueryExecutionError
from .base import QueryBackend


class AthenaBackend(QueryBackend):
    """
    Backend implementation using a SQLAlchemy engine on the PyAthena dialect.

    SQLAlchemy calls block, so each query is run in a worker thread to keep the
    event loop free.
    """

    def __init__(self, config: AthenaConnectionConfig):
        """
        Initialize the backend from connection settings.

        Args:
            config: Athena connection settings

        Raises:
            DatabaseConnectionError: If the engine cannot be created
        """
        super().__init__(config.schema_name)
        self.config = config
        self._engine: Engine | None = self._create_engine()

    def _create_engine(self) -> Engine:
        """Create and return a SQLAlchemy engine."""
        try:
            return create_engine(self.config.to_url())
        except Exception as e:
            raise DatabaseConnectionError(
                f"Cannot create Athena engine for region {self.config.region_name}. Error: {e}"
            )

    def _execute(self, sql: str) -> list[dict[str, Any]]:
        if self._engine is None:
            raise QueryExecutionError(f"Query failed: {sql}. Error: backend is closed")

        # no_parameters makes the driver receive the text as-is, with no %-formatting
        with self._engine.connect() as conn:
            result = conn.execution_options(no_parameters=True).exec_driver_sql(sql)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]

    async def query(self, sql: str) -> list[dict[str, Any]]:
        """
        Execute a SQL statement on Athena and return its rows.

        Args:
            sql: SQL text, executed verbatim

        Returns:
            List of rows as dicts in column order

        Raises:
            QueryExecutionError: If the query fails
        """
        try:
            return await asyncio.to_thread(self._execute, sql)
        except SQLAlchemyError as e:
            raise QueryExecutionError(f"Query failed: {sql}. Error: {e}") from e

    def close(self) -> None:
        """Dispose the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

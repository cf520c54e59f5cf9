"""
Core AthenaSqlDatabase class exposing Athena schemas to text-generation prompts.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Literal

import structlog

from .backend import QueryBackend, create_backend
from .config import AthenaConnectionConfig
from .exceptions import ConfigurationError
from .formatter import generate_table_info
from .models import TableInfo
from .schema import load_tables
from .validation import (
    TARGET_TABLES_ERROR_PREFIX,
    verify_ignore_tables_exist,
    verify_include_tables_exist,
    verify_tables_exist,
)


class AthenaSqlDatabase:
    """
    Main class describing an Athena database for text-generation prompts.

    Build it with ``await AthenaSqlDatabase.from_data_source_params(...)`` so the
    schema is loaded and the include/ignore lists are checked. An instance made
    with the plain constructor has no tables loaded and describes nothing.

    Security notice: ``get_table_info`` reads sample rows and ``run`` executes
    caller SQL verbatim. Scope the Athena credentials to read-only access on the
    tables that are needed, and use ``include_tables`` or ``ignore_tables`` to
    limit what gets described.
    """

    def __init__(
        self,
        data_source_config: AthenaConnectionConfig | None = None,
        *,
        include_tables: Sequence[str] | None = None,
        ignore_tables: Sequence[str] | None = None,
        sample_rows_in_table_info: int = 3,
        custom_description: Mapping[str, str] | None = None,
        backend: QueryBackend | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        """
        Initialize the database handle.

        Args:
            data_source_config: Athena connection settings, used when no backend is given
            include_tables: Only describe these tables (exclusive with ignore_tables)
            ignore_tables: Never describe these tables (exclusive with include_tables)
            sample_rows_in_table_info: Sample rows appended per table
            custom_description: Table name to free-text description
            backend: Query backend to use instead of creating one from the config
            logger: structlog-style logger for sample query failures

        Raises:
            ConfigurationError: If the arguments are inconsistent
            DatabaseConnectionError: If the backend cannot be created
        """
        if include_tables is not None and ignore_tables is not None:
            raise ConfigurationError("Cannot specify both include_tables and ignore_tables")
        if sample_rows_in_table_info < 0:
            raise ConfigurationError(
                f"sample_rows_in_table_info must be >= 0, got {sample_rows_in_table_info}"
            )

        if backend is None:
            if data_source_config is None:
                raise ConfigurationError("Either data_source_config or backend must be provided")
            backend = create_backend(data_source_config)

        self._backend = backend
        self.include_tables: list[str] = list(include_tables or [])
        self.ignore_tables: list[str] = list(ignore_tables or [])
        self.sample_rows_in_table_info = sample_rows_in_table_info
        self.custom_description: dict[str, str] = dict(custom_description or {})
        self.logger = logger

        # None until the schema has been loaded
        self.all_tables: list[TableInfo] | None = None

    @classmethod
    async def from_data_source_params(
        cls,
        data_source_config: AthenaConnectionConfig | None = None,
        **kwargs,
    ) -> "AthenaSqlDatabase":
        """
        Create a handle and load the database schema.

        Accepts the same arguments as the constructor.

        Raises:
            ConfigurationError: If the arguments are inconsistent
            TableNotFoundError: If an include or ignore table does not exist
            QueryExecutionError: If the schema query fails
        """
        sql_database = cls(data_source_config, **kwargs)
        sql_database.all_tables = await load_tables(sql_database._backend)

        verify_include_tables_exist(sql_database.all_tables, sql_database.include_tables)
        verify_ignore_tables_exist(sql_database.all_tables, sql_database.ignore_tables)
        return sql_database

    @property
    def database(self) -> str:
        return self._backend.database

    @property
    def is_ready(self) -> bool:
        """Whether the schema has been loaded."""
        return self.all_tables is not None

    def _select_tables(self, target_tables: Sequence[str] | None) -> list[TableInfo] | None:
        if self.all_tables is None:
            return None

        if target_tables:
            verify_tables_exist(self.all_tables, target_tables, TARGET_TABLES_ERROR_PREFIX)
            return [table for table in self.all_tables if table.name in target_tables]

        selected = self.all_tables
        if self.include_tables:
            selected = [table for table in selected if table.name in self.include_tables]
        if self.ignore_tables:
            selected = [table for table in selected if table.name not in self.ignore_tables]
        return list(selected)

    def get_usable_table_names(self) -> list[str]:
        """
        Get the names of the tables left after include/ignore filtering.

        Returns:
            List of table names, empty if the schema is not loaded
        """
        return [table.name for table in self._select_tables(None) or []]

    async def get_table_info(self, target_tables: Sequence[str] | None = None) -> str:
        """
        Get information about the selected tables.

        Follows the prompt layout studied in Rajkumar et al, 2022
        (https://arxiv.org/abs/2204.00498): each table is shown as a CREATE TABLE
        statement followed by ``sample_rows_in_table_info`` sample rows.

        Args:
            target_tables: Tables to describe; overrides include/ignore when non-empty

        Returns:
            Table descriptions as a single string

        Raises:
            TableNotFoundError: If a target table does not exist
        """
        return await generate_table_info(
            self._select_tables(target_tables),
            self._backend,
            self.sample_rows_in_table_info,
            self.custom_description,
            logger=self.logger,
        )

    async def run(self, command: str, fetch: Literal["all", "one"] = "all") -> str:
        """
        Execute a SQL command and return a string representing the results.

        With ``fetch="all"`` every row is returned as a JSON array. With
        ``fetch="one"`` only the first row is returned as a JSON object, or an
        empty string if the statement returned no rows. The command is not
        validated.

        Raises:
            ValueError: If fetch is not "all" or "one"
            QueryExecutionError: If the query fails
        """
        if fetch not in ("all", "one"):
            raise ValueError(f"fetch must be 'all' or 'one', got {fetch!r}")

        rows = await self._backend.query(command)

        if fetch == "all":
            return _to_json(rows)
        if rows:
            return _to_json(rows[0])
        return ""

    def close(self) -> None:
        """Close the underlying backend."""
        self._backend.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def _to_json(value) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)

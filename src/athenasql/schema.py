"""
Schema loading from Athena's information schema.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .backend.base import QueryBackend
from .logging_config import get_logger
from .models import ColumnInfo, TableInfo

logger = get_logger(__name__)


def build_columns_query(database: str) -> str:
    """Return the information-schema query listing every column of ``database``."""
    database = database.replace("'", "''")
    return (
        "SELECT "
        "TABLE_NAME AS table_name, "
        "COLUMN_NAME AS column_name, "
        "DATA_TYPE AS data_type, "
        "IS_NULLABLE AS is_nullable "
        "FROM INFORMATION_SCHEMA.COLUMNS "
        f"WHERE TABLE_SCHEMA = '{database}';"
    )


def build_tables(rows: Iterable[Mapping[str, Any]]) -> list[TableInfo]:
    """
    Fold flat information-schema rows into one TableInfo per table.

    Tables keep the order in which they are first seen and columns keep result
    order. A column is nullable only when ``is_nullable`` is exactly "YES".

    Args:
        rows: Rows with table_name, column_name, data_type and is_nullable keys

    Returns:
        List of TableInfo objects
    """
    columns_by_table: dict[str, list[ColumnInfo]] = {}
    for row in rows:
        column = ColumnInfo(
            name=row["column_name"],
            data_type=row.get("data_type"),
            nullable=row.get("is_nullable") == "YES",
        )
        columns_by_table.setdefault(row["table_name"], []).append(column)

    return [TableInfo(name=name, columns=tuple(columns)) for name, columns in columns_by_table.items()]


async def load_tables(backend: QueryBackend) -> list[TableInfo]:
    """
    Load every table and its columns for the backend's database.

    Args:
        backend: Query backend pointing at the target database

    Returns:
        List of TableInfo objects, empty if the database has no columns

    Raises:
        QueryExecutionError: If the information-schema query fails
    """
    rows = await backend.query(build_columns_query(backend.database))
    tables = build_tables(rows)
    logger.debug("schema_loaded", database=backend.database, table_count=len(tables))
    return tables

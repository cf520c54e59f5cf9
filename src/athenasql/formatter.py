"""
Render tables as prompt-ready text: pseudo-DDL, the sample query and sample rows.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from .backend.base import QueryBackend
from .logging_config import get_logger
from .models import ColumnInfo, TableInfo

NOT_NULL = "NOT NULL"


def _format_column(column: ColumnInfo) -> str:
    data_type = column.data_type if column.data_type is not None else ""
    return f"{column.name} {data_type} {'' if column.nullable else NOT_NULL}"


def format_create_table(table: TableInfo) -> str:
    """Return the descriptive ``CREATE TABLE`` statement for a table (never executed)."""
    columns = ", ".join(_format_column(column) for column in table.columns)
    return f"CREATE TABLE {table.name} ({columns})\n"


def format_sample_query(table: TableInfo, sample_rows: int) -> str:
    return f"SELECT * FROM {table.name} LIMIT {sample_rows};"


def format_column_names(table: TableInfo) -> str:
    return "".join(f" {name}" for name in table.column_names) + "\n"


def format_rows(rows: Sequence[Mapping[str, Any]] | None) -> str:
    """Render each row as its values prefixed by a space, one row per line."""
    if not rows:
        return ""
    return "".join("".join(f" {value}" for value in row.values()) + "\n" for row in rows)


async def generate_table_info(
    tables: Sequence[TableInfo] | None,
    backend: QueryBackend,
    sample_rows: int,
    custom_description: Mapping[str, str] | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> str:
    """
    Describe tables for a text-generation prompt.

    For every table, in order: its custom description (if any), a pseudo-DDL
    statement, the sample query text, a line of column names and up to
    ``sample_rows`` sample rows. Sample queries run one table at a time. A
    failing sample query is logged and leaves that table without sample rows.

    Args:
        tables: Tables to describe; None yields an empty string
        backend: Query backend used for the sample queries
        sample_rows: Number of sample rows per table; 0 issues no query
        custom_description: Optional table name to description mapping
        logger: structlog-style logger receiving sample query failures

    Returns:
        The concatenated description of all tables
    """
    if not tables:
        return ""

    if logger is None:
        logger = get_logger(__name__)
    custom_description = custom_description or {}

    blocks = []
    for table in tables:
        description = f"{custom_description[table.name]}\n" if table.name in custom_description else ""
        sample_query = format_sample_query(table, sample_rows)

        sample = ""
        if sample_rows:
            try:
                sample = format_rows(await backend.query(sample_query))
            except Exception as e:
                logger.error("sample_rows_query_failed", table=table.name, error=str(e))

        blocks.append(
            description
            + format_create_table(table)
            + sample_query
            + "\n"
            + format_column_names(table)
            + sample
        )

    return "".join(blocks)

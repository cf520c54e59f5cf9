"""
Checks that table names refer to tables loaded from the database.
"""

from collections.abc import Iterable, Sequence

from .exceptions import TableNotFoundError
from .models import TableInfo

INCLUDE_TABLES_ERROR_PREFIX = "Include tables not found in database:"
IGNORE_TABLES_ERROR_PREFIX = "Ignore tables not found in database:"
TARGET_TABLES_ERROR_PREFIX = "Wrong target table name:"


def verify_tables_exist(tables: Sequence[TableInfo], table_names: Iterable[str], error_prefix: str) -> None:
    """
    Ensure every name in ``table_names`` matches a loaded table.

    Args:
        tables: Tables loaded from the database
        table_names: Names to check
        error_prefix: Message prefix telling which list was being checked

    Raises:
        TableNotFoundError: On the first name with no matching table
    """
    known_names = {table.name for table in tables}
    for table_name in table_names:
        if table_name not in known_names:
            raise TableNotFoundError(f"{error_prefix} the table {table_name} was not found in the database")


def verify_include_tables_exist(tables: Sequence[TableInfo], include_tables: Iterable[str]) -> None:
    verify_tables_exist(tables, include_tables, INCLUDE_TABLES_ERROR_PREFIX)


def verify_ignore_tables_exist(tables: Sequence[TableInfo], ignore_tables: Iterable[str]) -> None:
    verify_tables_exist(tables, ignore_tables, IGNORE_TABLES_ERROR_PREFIX)

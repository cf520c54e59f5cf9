"""
athenasql - describe AWS Athena databases for text-generation prompts

This library loads table and column metadata from Athena's information schema
and renders it, with a few sample rows per table, as prompt-ready text.
"""

from .backend import AthenaBackend, QueryBackend, create_backend
from .config import AthenaConnectionConfig
from .core import AthenaSqlDatabase
from .exceptions import (
    AthenaSqlDatabaseError,
    ConfigurationError,
    DatabaseConnectionError,
    QueryExecutionError,
    TableNotFoundError,
)
from .logging_config import configure_logging, get_logger
from .models import ColumnInfo, TableInfo

__version__ = "0.1.0"
__all__ = [
    "AthenaSqlDatabase",
    "AthenaConnectionConfig",
    "QueryBackend",
    "AthenaBackend",
    "create_backend",
    "AthenaSqlDatabaseError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryExecutionError",
    "TableNotFoundError",
    "ColumnInfo",
    "TableInfo",
    "configure_logging",
    "get_logger",
]

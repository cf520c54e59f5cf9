"""
Exception classes for athenasql operations.
"""


class AthenaSqlDatabaseError(Exception):
    """Base exception for Athena SQL database operations."""

    pass


class ConfigurationError(AthenaSqlDatabaseError):
    """Exception raised when the database handle is configured inconsistently."""

    pass


class DatabaseConnectionError(AthenaSqlDatabaseError):
    """Exception raised when the Athena engine cannot be created."""

    pass


class TableNotFoundError(AthenaSqlDatabaseError):
    """Exception raised when a requested table is not found."""

    pass


class QueryExecutionError(AthenaSqlDatabaseError):
    """Exception raised when a query fails on the Athena side."""

    pass

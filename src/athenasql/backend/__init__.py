"""
Backend module for athenasql query execution.

This module provides the query-executing handles used by the schema loader,
the table info formatter and the database facade, with a unified interface
through the QueryBackend base class.
"""

from ..config import AthenaConnectionConfig
from .athena_backend import AthenaBackend
from .base import QueryBackend

__all__ = [
    "QueryBackend",
    "AthenaBackend",
    "create_backend",
]


def create_backend(config: AthenaConnectionConfig) -> QueryBackend:
    """
    Create the backend for the given connection settings.

    Args:
        config: Athena connection settings

    Returns:
        An instance of the backend class

    Raises:
        DatabaseConnectionError: If the backend cannot be created
    """
    return AthenaBackend(config)

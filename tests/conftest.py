"""
Shared pytest fixtures and configuration for athenasql tests.
"""

from unittest.mock import MagicMock

import pytest

from athenasql import QueryBackend, QueryExecutionError


class FakeBackend(QueryBackend):
    """In-memory backend that records issued SQL and returns canned rows."""

    def __init__(self, database="analytics", results=None, failures=None):
        super().__init__(database)
        # Maps a SQL prefix to the rows (or exception) returned for it
        self.results = results or {}
        self.failures = failures or {}
        self.queries = []
        self.closed = False

    async def query(self, sql):
        self.queries.append(sql)
        for prefix, error in self.failures.items():
            if sql.startswith(prefix):
                raise error
        for prefix, rows in self.results.items():
            if sql.startswith(prefix):
                return rows
        return []

    def close(self):
        self.closed = True


SCHEMA_ROWS = [
    {"table_name": "orders", "column_name": "id", "data_type": "int", "is_nullable": "NO"},
    {"table_name": "orders", "column_name": "amount", "data_type": "double", "is_nullable": "YES"},
    {"table_name": "customers", "column_name": "id", "data_type": "int", "is_nullable": "NO"},
    {"table_name": "orders", "column_name": "customer_id", "data_type": "int", "is_nullable": "YES"},
    {"table_name": "events", "column_name": "name", "data_type": "varchar", "is_nullable": "YES"},
]


@pytest.fixture
def schema_rows():
    """Information-schema rows for three tables."""
    return [dict(row) for row in SCHEMA_ROWS]


@pytest.fixture
def backend(schema_rows):
    """FakeBackend answering the information-schema query."""
    return FakeBackend(
        results={
            "SELECT TABLE_NAME": schema_rows,
            "SELECT * FROM orders": [{"id": 1, "amount": 9.5, "customer_id": 7}],
            "SELECT * FROM customers": [{"id": 7}, {"id": 8}],
        }
    )


@pytest.fixture
def failing_backend():
    """FakeBackend whose every query fails."""
    return FakeBackend(failures={"": QueryExecutionError("Query failed: boom")})


@pytest.fixture
def logger():
    """Mock structlog-style logger."""
    return MagicMock()

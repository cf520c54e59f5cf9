"""
Tests for logging configuration.
"""

import pytest
import structlog
from structlog.testing import capture_logs

from athenasql import configure_logging, get_logger
from athenasql.formatter import generate_table_info
from athenasql.models import ColumnInfo, TableInfo


class TestLogging:
    """Test structlog setup."""

    def teardown_method(self):
        structlog.reset_defaults()

    @pytest.mark.asyncio
    async def test_default_logger_records_sample_failure(self, failing_backend):
        """Without an injected logger the module logger receives the failure."""
        table = TableInfo(name="t", columns=(ColumnInfo(name="a", data_type="int"),))

        with capture_logs() as logs:
            await generate_table_info([table], failing_backend, 1)

        assert logs == [
            {
                "event": "sample_rows_query_failed",
                "log_level": "error",
                "table": "t",
                "error": "Query failed: boom",
            }
        ]

    def test_configure_logging(self):
        """Configuration installs the stdlib bound logger."""
        configure_logging(log_level="DEBUG", log_format="json")

        assert structlog.is_configured()
        assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_get_logger_binds(self):
        """Loggers support structlog binding."""
        logger = get_logger("athenasql.test").bind(table="orders")
        assert logger is not None

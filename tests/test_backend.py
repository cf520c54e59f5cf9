"""
Tests for connection settings and the Athena backend.
"""

import pytest
from pyathena.common import BaseCursor
from pyathena.error import OperationalError as AthenaOperationalError
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from athenasql import (
    AthenaBackend,
    AthenaConnectionConfig,
    ConfigurationError,
    QueryExecutionError,
    create_backend,
)


@pytest.fixture
def config():
    return AthenaConnectionConfig(
        region_name="eu-west-1",
        schema_name="sales",
        work_group="primary",
        s3_staging_dir="s3://bucket/results/",
    )


@pytest.fixture
def sent_to_athena(monkeypatch):
    """Record the SQL PyAthena would submit, then stop before any network call."""
    sent = []

    def fake_execute(self, operation, parameters=None, *args, **kwargs):
        sent.append(self._formatter.format(operation, parameters))
        raise AthenaOperationalError("stopped before submitting the query")

    monkeypatch.setattr(BaseCursor, "_execute", fake_execute)
    return sent


class TestAthenaConnectionConfig:
    """Test Athena connection settings."""

    def test_to_url(self, config):
        """The URL targets the regional Athena endpoint with the PyAthena dialect."""
        url = config.to_url()

        assert url.drivername == "awsathena+rest"
        assert url.host == "athena.eu-west-1.amazonaws.com"
        assert url.port == 443
        assert url.database == "sales"
        assert url.query["work_group"] == "primary"
        assert url.query["s3_staging_dir"] == "s3://bucket/results/"
        assert url.query["catalog_name"] == "AwsDataCatalog"
        assert url.username is None

    def test_result_location_required(self):
        """A work group or staging dir is required."""
        with pytest.raises(ConfigurationError):
            AthenaConnectionConfig(region_name="eu-west-1")

    def test_region_required(self):
        """The region cannot be empty."""
        with pytest.raises(ConfigurationError):
            AthenaConnectionConfig(region_name="", work_group="primary")

    def test_from_env(self, monkeypatch):
        """Settings are read from the environment."""
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-2")
        monkeypatch.setenv("ATHENA_SCHEMA_NAME", "web")
        monkeypatch.setenv("ATHENA_WORK_GROUP", "analysts")
        monkeypatch.delenv("ATHENA_CATALOG_NAME", raising=False)
        monkeypatch.delenv("ATHENA_S3_STAGING_DIR", raising=False)

        config = AthenaConnectionConfig.from_env()

        assert config.region_name == "us-east-2"
        assert config.schema_name == "web"
        assert config.catalog_name == "AwsDataCatalog"
        assert config.work_group == "analysts"
        assert config.s3_staging_dir is None

    def test_from_env_missing_region(self, monkeypatch):
        """A missing region is a configuration error."""
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)

        with pytest.raises(ConfigurationError, match="AWS_REGION"):
            AthenaConnectionConfig.from_env()


class TestAthenaBackend:
    """Test the SQLAlchemy backed query handle."""

    def test_create_backend(self, config):
        """The factory builds an AthenaBackend on the configured database."""
        backend = create_backend(config)

        assert isinstance(backend, AthenaBackend)
        assert backend.database == "sales"
        backend.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "sql",
        [
            "SELECT * FROM t WHERE name LIKE 'a%'",
            "SELECT '100%%' AS p",
            "SELECT '%(name)s' AS p",
        ],
    )
    async def test_percent_signs_reach_athena_unchanged(self, config, sent_to_athena, sql):
        """The PyAthena dialect receives caller SQL without %-formatting."""
        backend = AthenaBackend(config)

        with pytest.raises(QueryExecutionError, match="stopped before submitting"):
            await backend.query(sql)

        assert sent_to_athena == [sql]
        backend.close()

    @pytest.mark.asyncio
    async def test_query_returns_rows_as_dicts(self, config):
        """Rows come back as dicts in column order."""
        backend = AthenaBackend(config)
        backend._engine = create_engine("sqlite://")

        rows = await backend.query("SELECT 1 AS a, 'x' AS b")

        assert rows == [{"a": 1, "b": "x"}]
        assert list(rows[0]) == ["a", "b"]
        backend.close()

    @pytest.mark.asyncio
    async def test_query_error_is_wrapped(self, config, monkeypatch):
        """SQLAlchemy errors become QueryExecutionError."""
        backend = AthenaBackend(config)

        def fail(sql):
            raise OperationalError(sql, {}, Exception("access denied"))

        monkeypatch.setattr(backend, "_execute", fail)

        with pytest.raises(QueryExecutionError, match="Query failed: SELECT 1"):
            await backend.query("SELECT 1")

    @pytest.mark.asyncio
    async def test_close(self, config):
        """Closing disposes the engine; later queries fail."""
        with AthenaBackend(config) as backend:
            pass

        assert backend._engine is None
        with pytest.raises(QueryExecutionError):
            await backend.query("SELECT 1")

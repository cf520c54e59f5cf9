"""
Connection settings for AWS Athena.
"""

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL

from .exceptions import ConfigurationError


@dataclass
class AthenaConnectionConfig:
    """
    Parameters needed to open an Athena connection through the PyAthena dialect.

    Either ``work_group`` or ``s3_staging_dir`` must be set, since Athena needs
    somewhere to write query results. When the access keys are left empty the
    default AWS credential chain is used.
    """

    region_name: str
    schema_name: str = "default"
    catalog_name: str = "AwsDataCatalog"
    work_group: str | None = None
    s3_staging_dir: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    def __post_init__(self):
        if not self.region_name:
            raise ConfigurationError("Athena region_name is required")
        if not self.work_group and not self.s3_staging_dir:
            raise ConfigurationError("Either work_group or s3_staging_dir must be set for Athena")

    @classmethod
    def from_env(cls) -> "AthenaConnectionConfig":
        """
        Build the configuration from environment variables.

        Reads AWS_REGION (or AWS_DEFAULT_REGION), ATHENA_SCHEMA_NAME,
        ATHENA_CATALOG_NAME, ATHENA_WORK_GROUP, ATHENA_S3_STAGING_DIR,
        AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY.

        Raises:
            ConfigurationError: If the region or the result location is missing
        """
        region = (os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "").strip()
        if not region:
            raise ConfigurationError("Missing Athena settings: AWS_REGION is not set")

        return cls(
            region_name=region,
            schema_name=(os.getenv("ATHENA_SCHEMA_NAME") or "default").strip(),
            catalog_name=(os.getenv("ATHENA_CATALOG_NAME") or "AwsDataCatalog").strip(),
            work_group=os.getenv("ATHENA_WORK_GROUP") or None,
            s3_staging_dir=os.getenv("ATHENA_S3_STAGING_DIR") or None,
            aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID") or None,
            aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY") or None,
        )

    def to_url(self) -> URL:
        """
        Build the SQLAlchemy URL for the ``awsathena+rest`` dialect.

        Returns:
            SQLAlchemy URL instance
        """
        query = {"catalog_name": self.catalog_name}
        if self.work_group:
            query["work_group"] = self.work_group
        if self.s3_staging_dir:
            query["s3_staging_dir"] = self.s3_staging_dir

        return URL.create(
            "awsathena+rest",
            username=self.aws_access_key_id,
            password=self.aws_secret_access_key,
            host=f"athena.{self.region_name}.amazonaws.com",
            port=443,
            database=self.schema_name,
            query=query,
        )

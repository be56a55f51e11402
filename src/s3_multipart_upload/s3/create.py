import logging
import warnings
from dataclasses import dataclass

import boto3
from botocore.client import BaseClient
from botocore.config import Config

from s3_multipart_upload.errors import ConfigError
from s3_multipart_upload.s3.types import S3Credentials

_MAX_CONNECTIONS = 10
_TIMEOUT_READ = 120
_TIMEOUT_CONNECT = 60


@dataclass
class S3Config:
    max_pool_connections: int | None = None
    timeout_connection: int | None = None
    timeout_read: int | None = None
    verbose: bool | None = None

    def resolve_defaults(self) -> None:
        self.max_pool_connections = self.max_pool_connections or _MAX_CONNECTIONS
        self.timeout_connection = self.timeout_connection or _TIMEOUT_CONNECT
        self.timeout_read = self.timeout_read or _TIMEOUT_READ
        self.verbose = self.verbose or False


logger = logging.getLogger(__name__)


def _fix_endpoint_url(endpoint_url: str | None) -> str | None:
    if (endpoint_url is not None) and not (endpoint_url.startswith("http")):
        warnings.warn(f"Endpoint URL is schema naive: {endpoint_url}, assuming HTTPS")
        endpoint_url = f"https://{endpoint_url}"
    return endpoint_url


def create_s3_client(
    s3_creds: S3Credentials, s3_config: S3Config | None = None
) -> BaseClient:
    """Create and return an S3 client.

    Buckets are addressed path-style (endpoint/bucket/key) so that Ceph,
    MinIO and other non-AWS stores behind a single hostname work.
    """
    s3_config = s3_config or S3Config()
    s3_config.resolve_defaults()
    endpoint_url = _fix_endpoint_url(s3_creds.endpoint_url)
    if s3_config.verbose:
        logger.info(f"Creating S3 client for {endpoint_url} (path-style addressing)")
    session = boto3.session.Session()  # type: ignore
    try:
        return _session_client(session, s3_creds, s3_config, endpoint_url)
    except ValueError as e:
        # botocore rejects malformed endpoints and regions with ValueError
        raise ConfigError(f"Cannot create S3 client for {endpoint_url}: {e}") from e


def _session_client(
    session: boto3.session.Session,
    s3_creds: S3Credentials,
    s3_config: S3Config,
    endpoint_url: str | None,
) -> BaseClient:
    return session.client(
        service_name="s3",
        aws_access_key_id=s3_creds.access_key_id,
        aws_secret_access_key=s3_creds.secret_access_key,
        endpoint_url=endpoint_url,
        config=Config(
            signature_version="s3v4",
            region_name=s3_creds.region_name,
            max_pool_connections=s3_config.max_pool_connections,
            read_timeout=s3_config.timeout_read,
            connect_timeout=s3_config.timeout_connection,
            s3={"addressing_style": "path"},
        ),
    )

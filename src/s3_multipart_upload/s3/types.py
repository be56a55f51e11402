from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from s3_multipart_upload.config import DEFAULT_REGION, UploadConfig


@dataclass
class S3Credentials:
    """Credentials for accessing S3."""

    access_key_id: str
    secret_access_key: str
    endpoint_url: str | None = None
    region_name: str | None = DEFAULT_REGION

    @staticmethod
    def from_config(config: UploadConfig) -> "S3Credentials":
        return S3Credentials(
            access_key_id=config.access_key,
            secret_access_key=config.secret_key,
            endpoint_url=config.endpoint,
            region_name=config.region,
        )


@dataclass
class S3UploadTarget:
    """Target information for S3 upload."""

    src_file: Path
    bucket_name: str
    s3_key: str

    @staticmethod
    def from_config(config: UploadConfig) -> "S3UploadTarget":
        return S3UploadTarget(
            src_file=Path(config.file_path),
            bucket_name=config.bucket_name,
            s3_key=config.object_name,
        )


class UploadState(Enum):
    CREATED = "created"
    SESSION_OPEN = "session-open"
    ALL_PARTS_UPLOADED = "all-parts-uploaded"
    COMPLETED = "completed"
    ABORTING = "aborting"
    ABORTED = "aborted"

    def is_terminal(self) -> bool:
        return self in (UploadState.COMPLETED, UploadState.ABORTED)

from .config import UploadConfig, load_upload_config
from .errors import (
    CompletionError,
    ConfigError,
    LocalIOError,
    SessionError,
    TransferError,
    UploadError,
)
from .s3.api import S3Client
from .s3.completed_part import CompletedPart
from .s3.partition import TOTAL_PARTS, PartRange, partition
from .s3.types import S3Credentials, S3UploadTarget, UploadState
from .s3.upload_session import UploadSession

__all__ = [
    "S3Client",
    "UploadConfig",
    "load_upload_config",
    "S3Credentials",
    "S3UploadTarget",
    "UploadSession",
    "UploadState",
    "PartRange",
    "CompletedPart",
    "partition",
    "TOTAL_PARTS",
    "UploadError",
    "ConfigError",
    "LocalIOError",
    "SessionError",
    "TransferError",
    "CompletionError",
]

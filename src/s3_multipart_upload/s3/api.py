import json
import warnings

from botocore.client import BaseClient

from s3_multipart_upload.config import UploadConfig
from s3_multipart_upload.errors import UploadError
from s3_multipart_upload.s3.create import S3Config, create_s3_client
from s3_multipart_upload.s3.partition import TOTAL_PARTS
from s3_multipart_upload.s3.types import S3Credentials, S3UploadTarget
from s3_multipart_upload.s3.upload_file_multipart import upload_file_multipart
from s3_multipart_upload.s3.upload_session import UploadSession


class S3Client:
    def __init__(self, credentials: S3Credentials, verbose: bool = False) -> None:
        self.verbose = verbose
        self.credentials: S3Credentials = credentials
        self.client: BaseClient = create_s3_client(
            credentials, S3Config(verbose=verbose)
        )

    @staticmethod
    def from_config(config: UploadConfig, verbose: bool = False) -> "S3Client":
        return S3Client(S3Credentials.from_config(config), verbose=verbose)

    def _info_json(self, target: S3UploadTarget) -> str:
        info_json = {
            "bucket": target.bucket_name,
            "key": target.s3_key,
            "access_key_id": self.credentials.access_key_id[:4] + "...",
            "secret": self.credentials.secret_access_key[:4] + "...",
            "endpoint_url": self.credentials.endpoint_url,
            "region": self.credentials.region_name,
        }
        return json.dumps(info_json, indent=2)

    def upload_file_multipart(
        self, target: S3UploadTarget, num_parts: int = TOTAL_PARTS
    ) -> UploadSession | UploadError:
        """Run one complete multipart upload, return the finished session or
        the error that stopped it."""
        try:
            return upload_file_multipart(
                s3_client=self.client, target=target, num_parts=num_parts
            )
        except UploadError as e:
            if self.verbose:
                warnings.warn(
                    f"Error uploading file: {e}\nInfo:\n\n{self._info_json(target)}"
                )
            return e

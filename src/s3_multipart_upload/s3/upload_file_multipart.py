import logging
import os
from pathlib import Path
from typing import BinaryIO

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from s3_multipart_upload.errors import (
    CompletionError,
    LocalIOError,
    SessionError,
    TransferError,
)
from s3_multipart_upload.s3.completed_part import CompletedPart
from s3_multipart_upload.s3.partition import (
    TOTAL_PARTS,
    PartRange,
    partition,
    warn_if_undersized,
)
from s3_multipart_upload.s3.types import S3UploadTarget
from s3_multipart_upload.s3.upload_session import UploadSession

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (ClientError, BotoCoreError)


def begin(s3_client: BaseClient, bucket_name: str, object_name: str) -> str:
    """Open a new multipart upload and return its upload id."""
    logger.info(f"Creating multipart upload for {bucket_name}/{object_name}")
    try:
        mpu = s3_client.create_multipart_upload(Bucket=bucket_name, Key=object_name)
    except _REMOTE_ERRORS as e:
        raise SessionError(
            f"Cannot create multipart upload for {bucket_name}/{object_name}: {e}"
        ) from e
    upload_id = mpu.get("UploadId")
    if not upload_id:
        raise SessionError(f"No UploadId returned for {bucket_name}/{object_name}")
    return upload_id


def read_part(f: BinaryIO, part_range: PartRange) -> bytes:
    try:
        f.seek(part_range.start)
        data = f.read(part_range.size)
    except OSError as e:
        raise LocalIOError(f"Error reading {part_range.name}: {e}") from e
    if len(data) != part_range.size:
        raise LocalIOError(
            f"Short read for {part_range.name}: got {len(data)} of {part_range.size} bytes"
        )
    return data


def upload_one_part(
    s3_client: BaseClient,
    f: BinaryIO,
    part_range: PartRange,
    bucket_name: str,
    object_name: str,
    upload_id: str,
) -> CompletedPart:
    part_number = part_range.part_number
    data = read_part(f, part_range)
    logger.debug(
        f"Uploading part {part_number} [{part_range.start}, {part_range.end}) of size {len(data)}"
    )
    try:
        part = s3_client.upload_part(
            Bucket=bucket_name,
            Key=object_name,
            PartNumber=part_number,
            UploadId=upload_id,
            Body=data,
        )
    except _REMOTE_ERRORS as e:
        raise TransferError(f"Error uploading part {part_number}: {e}") from e
    etag = part.get("ETag")
    if not etag:
        raise TransferError(f"No ETag returned for part {part_number}")
    return CompletedPart(part_number=part_number, etag=etag)


def finish(
    s3_client: BaseClient,
    bucket_name: str,
    object_name: str,
    upload_id: str,
    parts: list[CompletedPart],
) -> None:
    parts_s3 = CompletedPart.to_json_array(parts)
    logger.info(
        f"Sending multi part completion message for {bucket_name}/{object_name} ({len(parts_s3)} parts)"
    )
    try:
        s3_client.complete_multipart_upload(
            Bucket=bucket_name,
            Key=object_name,
            UploadId=upload_id,
            MultipartUpload={"Parts": parts_s3},
        )
    except _REMOTE_ERRORS as e:
        raise CompletionError(
            f"Cannot complete multipart upload {upload_id} for {bucket_name}/{object_name}: {e}"
        ) from e


def cancel(
    s3_client: BaseClient, bucket_name: str, object_name: str, upload_id: str
) -> bool:
    """Abort the upload. Never raises, a failure is only logged."""
    logger.info(f"Aborting multipart upload {upload_id} for {bucket_name}/{object_name}")
    try:
        s3_client.abort_multipart_upload(
            Bucket=bucket_name, Key=object_name, UploadId=upload_id
        )
    except Exception as e:
        logger.warning(f"Error aborting multipart upload {upload_id}: {e}")
        return False
    return True


def _file_size(f: BinaryIO, file_path: Path) -> int:
    try:
        return os.fstat(f.fileno()).st_size
    except OSError as e:
        raise LocalIOError(f"Cannot stat {file_path}: {e}") from e


def upload_file_multipart(
    s3_client: BaseClient,
    target: S3UploadTarget,
    num_parts: int = TOTAL_PARTS,
) -> UploadSession:
    """Upload target.src_file in num_parts parts, in order, one at a time.

    Either the object is completed on the store, or the upload session
    (if one was opened) is aborted and the original error is raised.
    """
    file_path = target.src_file
    bucket_name = target.bucket_name
    object_name = target.s3_key
    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise LocalIOError(f"Cannot open {file_path}: {e}") from e

    with f:
        file_size = _file_size(f, file_path)
        part_ranges = partition(file_size, num_parts)
        warn_if_undersized(part_ranges)

        session = UploadSession(
            bucket_name=bucket_name, object_name=object_name, total_parts=num_parts
        )
        upload_id = begin(s3_client, bucket_name, object_name)
        session.open(upload_id)
        logger.info(
            f"Uploading {file_path} ({file_size} bytes) to {bucket_name}/{object_name} in {num_parts} parts, upload id {upload_id}"
        )
        try:
            for part_range in part_ranges:
                part = upload_one_part(
                    s3_client,
                    f,
                    part_range,
                    bucket_name=bucket_name,
                    object_name=object_name,
                    upload_id=upload_id,
                )
                session.add_part(part)
                logger.info(f"Uploaded part {part.part_number}/{num_parts}")
            finish(s3_client, bucket_name, object_name, upload_id, session.parts)
            session.complete()
        except BaseException:
            # also covers KeyboardInterrupt, the session must not be left open
            session.begin_abort()
            cancel(s3_client, bucket_name, object_name, upload_id)
            session.aborted()
            raise

    logger.info(f"Multipart upload completed: {file_path} to {bucket_name}/{object_name}")
    return session

import argparse
from dataclasses import dataclass
from pathlib import Path

from s3_multipart_upload.config import DEFAULT_CONFIG_PATH, load_upload_config
from s3_multipart_upload.errors import UploadError
from s3_multipart_upload.log import configure_logging
from s3_multipart_upload.s3.api import S3Client
from s3_multipart_upload.s3.types import S3UploadTarget


@dataclass
class Args:
    config_path: Path
    verbose: bool
    log_file: Path | None


def _parse_args(argv: list[str] | None = None) -> Args:
    parser = argparse.ArgumentParser(
        description="Upload a file to an S3 compatible store as a 10 part multipart upload."
    )
    parser.add_argument(
        "config",
        help="Path to the JSON config file",
        type=Path,
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
    )
    parser.add_argument("-v", "--verbose", help="Verbose output", action="store_true")
    parser.add_argument("--log-file", help="Also write logs to this file", type=Path)
    args = parser.parse_args(argv)
    return Args(
        config_path=args.config,
        verbose=args.verbose,
        log_file=args.log_file,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = _parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)
    try:
        config = load_upload_config(args.config_path)
        s3_client = S3Client.from_config(config, verbose=args.verbose)
    except UploadError as e:
        print(f"Error: {e}")
        return 1

    target = S3UploadTarget.from_config(config)
    result = s3_client.upload_file_multipart(target)
    if isinstance(result, UploadError):
        print(f"Error: {result}")
        return 1
    print(
        f"File uploaded successfully: {target.src_file} -> {target.bucket_name}/{target.s3_key}"
    )
    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())

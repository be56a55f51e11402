import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries that log every request at DEBUG, kept at INFO or above.
_NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "s3transfer")

_INITIALISED = False


def _handlers(log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_default_logging() -> None:
    """Log INFO to stdout unless the application configured logging itself."""
    global _INITIALISED
    if _INITIALISED:
        return
    _INITIALISED = True
    if not logging.root.handlers:
        logging.basicConfig(level=logging.INFO, format=_FORMAT, handlers=_handlers(None))


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> int:
    """Reconfigure logging for one upload run and return the level in use.

    verbose turns on per-part DEBUG output from this package, the S3 client
    libraries stay at INFO. log_file, if given, receives the same records as
    stdout.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=_FORMAT,
        handlers=_handlers(log_file),
        force=True,  # Override any existing configuration
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
    return level


# Call setup_default_logging when this module is imported
setup_default_logging()

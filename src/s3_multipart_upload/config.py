import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from s3_multipart_upload.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("config.json")
DEFAULT_REGION = "us-east-1"

# Fallbacks for credentials left out of the config file.
ENV_ACCESS_KEY = "S3_ACCESS_KEY_ID"
ENV_SECRET_KEY = "S3_SECRET_ACCESS_KEY"


def _normalize_key(key: str) -> str:
    # "FilePath", "file_path" and "filepath" all name the same field
    return key.replace("_", "").replace("-", "").lower()


@dataclass(frozen=True)
class UploadConfig:
    """Everything one upload run needs, fixed for the run."""

    file_path: str
    bucket_name: str
    object_name: str
    endpoint: str
    access_key: str
    secret_key: str
    region: str = DEFAULT_REGION

    def __repr__(self) -> str:
        return (
            f"UploadConfig(file_path={self.file_path!r}, bucket_name={self.bucket_name!r}, "
            f"object_name={self.object_name!r}, endpoint={self.endpoint!r}, "
            f"access_key={self.access_key[:4]!r}..., region={self.region!r})"
        )

    def __str__(self) -> str:
        return repr(self)

    @staticmethod
    def from_json(json_data: Any, env: dict[str, str] | None = None) -> "UploadConfig":
        if not isinstance(json_data, dict):
            raise ConfigError(
                f"Config must be a JSON object, got {type(json_data).__name__}"
            )
        env = dict(os.environ) if env is None else env
        by_key: dict[str, Any] = {_normalize_key(k): v for k, v in json_data.items()}
        if not by_key.get("accesskey") and env.get(ENV_ACCESS_KEY):
            by_key["accesskey"] = env[ENV_ACCESS_KEY]
        if not by_key.get("secretkey") and env.get(ENV_SECRET_KEY):
            by_key["secretkey"] = env[ENV_SECRET_KEY]

        values: dict[str, str] = {}
        missing: list[str] = []
        for f in fields(UploadConfig):
            value = by_key.get(_normalize_key(f.name))
            if value is None or value == "":
                if f.name == "region":
                    continue
                missing.append(f.name)
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"Config field {f.name} must be a string, got {type(value).__name__}"
                )
            values[f.name] = value
        if missing:
            raise ConfigError(f"Missing config fields: {', '.join(missing)}")
        return UploadConfig(**values)


def load_upload_config(path: Path | None = None) -> UploadConfig:
    """Read the config file once and build the UploadConfig from it.

    Credentials missing from the file are looked up in the environment,
    after loading a .env file if one is present.
    """
    path = path or DEFAULT_CONFIG_PATH
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Cannot parse config file {path}: {e}") from e
    load_dotenv()
    return UploadConfig.from_json(data)

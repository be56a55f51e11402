class UploadError(Exception):
    """Base class for every failure that ends an upload run."""

    phase: str = "upload"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"[{self.phase}] {self.msg}"


class ConfigError(UploadError):
    phase = "config"


class LocalIOError(UploadError):
    phase = "read"


class SessionError(UploadError):
    phase = "create"


class TransferError(UploadError):
    phase = "upload-part"


class CompletionError(UploadError):
    phase = "complete"

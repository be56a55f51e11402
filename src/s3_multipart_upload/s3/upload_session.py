import logging
from dataclasses import dataclass, field

from s3_multipart_upload.s3.completed_part import CompletedPart
from s3_multipart_upload.s3.types import UploadState

logger = logging.getLogger(__name__)

_TRANSITIONS: dict[UploadState, tuple[UploadState, ...]] = {
    UploadState.CREATED: (UploadState.SESSION_OPEN,),
    UploadState.SESSION_OPEN: (UploadState.ALL_PARTS_UPLOADED, UploadState.ABORTING),
    UploadState.ALL_PARTS_UPLOADED: (UploadState.COMPLETED, UploadState.ABORTING),
    UploadState.ABORTING: (UploadState.ABORTED,),
    UploadState.COMPLETED: (),
    UploadState.ABORTED: (),
}


@dataclass
class UploadSession:
    """One multipart upload on the store and the parts sent so far."""

    bucket_name: str
    object_name: str
    total_parts: int
    upload_id: str | None = None
    parts: list[CompletedPart] = field(default_factory=list)
    state: UploadState = UploadState.CREATED

    def _move(self, new_state: UploadState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(
                f"Invalid upload state transition {self.state.value} -> {new_state.value}"
            )
        logger.debug(
            f"Upload {self.upload_id}: {self.state.value} -> {new_state.value}"
        )
        self.state = new_state

    def open(self, upload_id: str) -> None:
        self.upload_id = upload_id
        self._move(UploadState.SESSION_OPEN)

    def add_part(self, part: CompletedPart) -> None:
        if self.state != UploadState.SESSION_OPEN:
            raise RuntimeError(f"Cannot add part in state {self.state.value}")
        expected = len(self.parts) + 1
        if part.part_number != expected:
            raise RuntimeError(
                f"Part {part.part_number} out of order, expected {expected}"
            )
        self.parts.append(part)
        if len(self.parts) == self.total_parts:
            self._move(UploadState.ALL_PARTS_UPLOADED)

    def complete(self) -> None:
        self._move(UploadState.COMPLETED)

    def begin_abort(self) -> None:
        self._move(UploadState.ABORTING)

    def aborted(self) -> None:
        self._move(UploadState.ABORTED)

    def is_open(self) -> bool:
        return self.upload_id is not None and not self.state.is_terminal()

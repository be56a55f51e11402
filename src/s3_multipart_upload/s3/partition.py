import warnings
from dataclasses import dataclass

TOTAL_PARTS = 10
# Smallest part most stores accept for anything but the last part.
MIN_PART_SIZE = 5 * 1024 * 1024  # 5MB


@dataclass(frozen=True)
class PartRange:
    part_number: int  # 1-indexed
    start: int  # inclusive
    end: int  # exclusive (not like http byte range which is inclusive)

    def __post_init__(self):
        assert self.part_number >= 1
        assert 0 <= self.start <= self.end

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def name(self) -> str:
        return f"part.{self.part_number:05d}_{self.start}-{self.end}"


def partition(file_size: int, num_parts: int = TOTAL_PARTS) -> list[PartRange]:
    """Split [0, file_size) into num_parts contiguous ranges.

    Every part is file_size // num_parts bytes long, the last one also
    takes the remainder. Files smaller than num_parts produce zero-length
    leading parts, that is left as is.
    """
    if file_size < 0:
        raise ValueError(f"Invalid file size: {file_size}")
    if num_parts < 1:
        raise ValueError(f"Invalid number of parts: {num_parts}")
    part_size = file_size // num_parts
    out: list[PartRange] = []
    for part_number in range(1, num_parts + 1):
        start = (part_number - 1) * part_size
        end = part_number * part_size
        if part_number == num_parts:
            end = file_size
        out.append(PartRange(part_number=part_number, start=start, end=end))
    return out


def warn_if_undersized(parts: list[PartRange]) -> bool:
    """Warn when any non-final part is below MIN_PART_SIZE, the store will
    most likely refuse to complete such an upload."""
    small = [p for p in parts[:-1] if p.size < MIN_PART_SIZE]
    if not small:
        return False
    warnings.warn(
        f"{len(small)} of {len(parts)} parts are smaller than {MIN_PART_SIZE} bytes "
        f"(part size {small[0].size}), the store may reject the upload"
    )
    return True

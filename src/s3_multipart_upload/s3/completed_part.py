from dataclasses import dataclass


@dataclass(frozen=True)
class CompletedPart:
    part_number: int
    etag: str

    def __post_init__(self):
        assert isinstance(self.part_number, int)
        assert isinstance(self.etag, str)

    def to_json(self) -> dict:
        # amazon s3 style dict
        return {"PartNumber": self.part_number, "ETag": self.etag}

    @staticmethod
    def to_json_array(parts: list["CompletedPart"]) -> list[dict]:
        ordered = sorted(parts, key=lambda x: x.part_number)  # Some backends need this.
        return [p.to_json() for p in ordered]

from dataclasses import dataclass


@dataclass(frozen=True)
class LlsError:
    message: str


@dataclass(frozen=True)
class IngestError(LlsError):
    source_type: str
    source_detail: str

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SourceDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    text: bytes

    def slice(self, start_byte: int, end_byte: int) -> str:
        return self.text[start_byte:end_byte].decode("utf-8")


class OutlineLine(BaseModel):
    depth: int
    kind: str
    start_byte: int
    end_byte: int
    text: str | None = None


class GraphNode(BaseModel):
    id: int
    kind: str
    start_byte: int
    end_byte: int
    symbol: str | None = None
    role: str | None = None
    scope: int | None = None


class ScanSummary(BaseModel):
    files_seen: int = 0
    files_rendered: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    elapsed_ms: int = 0

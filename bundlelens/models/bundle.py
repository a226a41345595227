from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from result import Result

from bundlelens.models.enums import ModuleType
from bundlelens.models.insight import Insight


@dataclass(slots=True, frozen=True)
class InputFile:
    """One uploaded artifact: a file name and its raw content."""

    name: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @classmethod
    def from_path(cls, path: str | Path) -> InputFile:
        resolved = Path(path).expanduser()
        return cls(name=resolved.name, content=resolved.read_bytes())

    @classmethod
    def from_text(cls, name: str, text: str) -> InputFile:
        return cls(name=name, content=text.encode("utf-8"))


@dataclass(slots=True, frozen=True)
class Module:
    id: str
    name: str
    size: int
    path: tuple[str, ...]
    type: ModuleType
    compressed_size: float | None = None
    dependencies: tuple[str, ...] = ()
    is_external: bool = False
    chunk: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "path": list(self.path),
            "dependencies": list(self.dependencies),
            "isExternal": self.is_external,
            "type": self.type.value,
        }
        if self.compressed_size is not None:
            payload["compressedSize"] = self.compressed_size
        if self.chunk is not None:
            payload["chunk"] = self.chunk
        return payload


@dataclass(slots=True, frozen=True)
class Chunk:
    id: str
    name: str
    size: int
    compressed_size: float
    module_ids: tuple[str, ...] = ()
    is_entry: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "compressedSize": self.compressed_size,
            "moduleIds": list(self.module_ids),
            "isEntry": self.is_entry,
        }


@dataclass(slots=True, frozen=True)
class ParsedFile:
    """Records contributed by a single input file."""

    modules: tuple[Module, ...] = ()
    chunks: tuple[Chunk, ...] = ()


class ParseErrorCode(str, Enum):
    INVALID_JSON = "invalid_json"
    INTERNAL = "internal"


@dataclass(slots=True, frozen=True)
class ParseError:
    code: ParseErrorCode
    filename: str
    message: str


ParseResult = Result[ParsedFile, ParseError]


@dataclass(slots=True, frozen=True)
class AnalysisMetadata:
    analyzed_at: datetime
    file_count: int
    file_extensions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "analyzedAt": self.analyzed_at.isoformat(),
            "fileCount": self.file_count,
            "fileExtensions": list(self.file_extensions),
        }


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    total_size: int
    total_compressed_size: float
    metadata: AnalysisMetadata
    modules: tuple[Module, ...] = field(default=())
    chunks: tuple[Chunk, ...] = field(default=())
    insights: tuple[Insight, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalSize": self.total_size,
            "totalCompressedSize": self.total_compressed_size,
            "modules": [module.to_dict() for module in self.modules],
            "chunks": [chunk.to_dict() for chunk in self.chunks],
            "insights": [insight.to_dict() for insight in self.insights],
            "metadata": self.metadata.to_dict(),
        }

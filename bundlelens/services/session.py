# Analysis session: turns a batch of input files into one AnalysisResult.
#
# Lifecycle (analyze method):
#   1. Validate the batch and record per-file metadata.
#   2. Parse every file independently (optionally on a thread pool).  A file
#      that fails to parse is logged and skipped; the batch continues.
#   3. Fold parsed records into a fresh _Accumulator in input order and make
#      module and chunk ids unique.
#   4. Compute totals, then run the insight rules over the complete sets.
#   5. Freeze everything into an AnalysisResult.
#
# No state is kept on the session between calls, so one session may serve
# concurrent callers.

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import TypeVar

from loguru import logger
from result import Err, Ok

from bundlelens.config.defaults import default_config
from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import (
    AnalysisMetadata,
    AnalysisResult,
    Chunk,
    InputFile,
    Module,
    ParsedFile,
    ParseError,
    ParseErrorCode,
    ParseResult,
)
from bundlelens.parse import parse_file
from bundlelens.services.aggregate import compute_totals
from bundlelens.services.classify import file_extension
from bundlelens.services.insights import generate_insights

UNKNOWN_EXTENSION = "unknown"

_Record = TypeVar("_Record", Module, Chunk)


@dataclass(slots=True)
class _Accumulator:
    modules: list[Module] = field(default_factory=list)
    chunks: list[Chunk] = field(default_factory=list)
    skipped: int = 0

    def add(self, parsed: ParsedFile) -> None:
        self.modules.extend(parsed.modules)
        self.chunks.extend(parsed.chunks)


def with_unique_ids(records: Iterable[_Record]) -> list[_Record]:
    """Suffix repeated ids with ``~2``, ``~3``... in input order."""
    used: set[str] = set()
    unique: list[_Record] = []
    for record in records:
        record_id = record.id
        if record_id in used:
            n = 2
            while f"{record.id}~{n}" in used:
                n += 1
            record_id = f"{record.id}~{n}"
            record = replace(record, id=record_id)
        used.add(record_id)
        unique.append(record)
    return unique


def _check_files(files: Iterable[InputFile]) -> list[InputFile]:
    batch = list(files)
    for item in batch:
        if not isinstance(item, InputFile):
            msg = f"Expected InputFile, got {type(item).__name__}."
            raise TypeError(msg)
    return batch


class AnalysisSession:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or default_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    def _parse_one(self, file: InputFile) -> ParseResult:
        try:
            return parse_file(file, self._config)
        except Exception as exc:  # noqa: BLE001
            # A parser failure is scoped to its own file.
            return Err(ParseError(code=ParseErrorCode.INTERNAL, filename=file.name, message=str(exc)))

    def _parse_all(self, files: Sequence[InputFile]) -> list[ParseResult]:
        workers = self._config.parse_workers
        if workers <= 1 or len(files) <= 1:
            return [self._parse_one(file) for file in files]
        with ThreadPoolExecutor(max_workers=min(workers, len(files))) as pool:
            # map() yields in submission order, keeping records in input order.
            return list(pool.map(self._parse_one, files))

    def analyze(self, files: Iterable[InputFile]) -> AnalysisResult:
        batch = _check_files(files)
        extensions = tuple(file_extension(file.name) or UNKNOWN_EXTENSION for file in batch)

        acc = _Accumulator()
        for file, parsed in zip(batch, self._parse_all(batch), strict=True):
            if isinstance(parsed, Ok):
                records = parsed.unwrap()
                logger.debug("{}: {} modules, {} chunks", file.name, len(records.modules), len(records.chunks))
                acc.add(records)
            else:
                error = parsed.unwrap_err()
                acc.skipped += 1
                logger.warning("Skipping {} ({}): {}", error.filename, error.code.value, error.message)

        modules = with_unique_ids(acc.modules)
        chunks = with_unique_ids(acc.chunks)
        totals = compute_totals(modules, self._config.compression_ratio)
        insights = generate_insights(modules, chunks, totals, self._config)

        logger.info(
            "Analyzed {} files ({} skipped): {} modules, {} chunks, {} insights",
            len(batch),
            acc.skipped,
            len(modules),
            len(chunks),
            len(insights),
        )
        return AnalysisResult(
            total_size=totals.size,
            total_compressed_size=totals.compressed_size,
            modules=tuple(modules),
            chunks=tuple(chunks),
            insights=tuple(insights),
            metadata=AnalysisMetadata(
                analyzed_at=datetime.now(UTC),
                file_count=len(batch),
                file_extensions=extensions,
            ),
        )


def analyze_files(files: Iterable[InputFile], config: AppConfig | None = None) -> AnalysisResult:
    return AnalysisSession(config).analyze(files)

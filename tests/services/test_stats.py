from __future__ import annotations

from datetime import UTC, datetime

from bundlelens.models.bundle import AnalysisMetadata, AnalysisResult, Module
from bundlelens.models.enums import ModuleType
from bundlelens.services.aggregate import compute_totals
from bundlelens.services.stats import (
    average_module_size,
    chunk_breakdown,
    compression_ratio,
    estimate_load_time,
    largest_modules,
    type_breakdown,
)
from tests.factories import MIB, make_chunk, make_module


def _result(modules: list[Module], chunks=()) -> AnalysisResult:  # type: ignore[no-untyped-def]
    totals = compute_totals(modules)
    return AnalysisResult(
        total_size=totals.size,
        total_compressed_size=totals.compressed_size,
        modules=tuple(modules),
        chunks=tuple(chunks),
        metadata=AnalysisMetadata(analyzed_at=datetime.now(UTC), file_count=1),
    )


class TestTypeBreakdown:
    def test_groups_and_shares(self) -> None:
        result = _result([make_module("a.js", 300), make_module("b.css", 100), make_module("c.js", 600)])
        rows = type_breakdown(result)
        assert [(r.type, r.count, r.size) for r in rows] == [(ModuleType.SCRIPT, 2, 900), (ModuleType.STYLE, 1, 100)]
        assert rows[0].share == 0.9

    def test_zero_total(self) -> None:
        rows = type_breakdown(_result([make_module("a.js", 0)]))
        assert rows[0].share == 0.0


class TestLargest:
    def test_top_n(self) -> None:
        modules = [make_module(f"m{i}.js", i) for i in range(20)]
        assert [m.size for m in largest_modules(modules, 3)] == [19, 18, 17]


class TestChunkBreakdown:
    def test_share_relative_to_module_total(self) -> None:
        result = _result([make_module("a.js", 1000)], chunks=[make_chunk("main", 500)])
        (row,) = chunk_breakdown(result)
        assert row.chunk.name == "main"
        assert row.share == 0.5


class TestCompression:
    def test_ratio(self) -> None:
        result = _result([make_module("a.js", 1000)])
        assert round(compression_ratio(result), 6) == 70.0

    def test_empty(self) -> None:
        empty = _result([])
        assert compression_ratio(empty) == 0.0
        assert average_module_size(empty) == 0.0

    def test_average(self) -> None:
        assert average_module_size(_result([make_module("a.js", 10), make_module("b.js", 30)])) == 20


class TestLoadTime:
    def test_under_a_second(self) -> None:
        assert estimate_load_time(MIB / 2) == "500ms (3G) / 50ms (4G)"

    def test_seconds(self) -> None:
        assert estimate_load_time(3 * MIB) == "3.0s (3G) / 0.3s (4G)"

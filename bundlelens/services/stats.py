from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass

from bundlelens.models.bundle import AnalysisResult, Chunk, Module
from bundlelens.models.enums import ModuleType

_MIB = 1024 * 1024
# Rough transfer rates: one MiB takes about a second on 3G and a tenth of that on 4G.
_SECONDS_PER_MIB_3G = 1.0
_SECONDS_PER_MIB_4G = 0.1


@dataclass(slots=True, frozen=True)
class TypeShare:
    type: ModuleType
    count: int
    size: int
    share: float


@dataclass(slots=True, frozen=True)
class ChunkShare:
    chunk: Chunk
    share: float


def _share(value: float, total: float) -> float:
    return value / total if total > 0 else 0.0


def type_breakdown(result: AnalysisResult) -> list[TypeShare]:
    """Module count, size, and share of total size per module type, largest first."""
    counts: dict[ModuleType, int] = {}
    sizes: dict[ModuleType, int] = {}
    for module in result.modules:
        counts[module.type] = counts.get(module.type, 0) + 1
        sizes[module.type] = sizes.get(module.type, 0) + module.size
    rows = [
        TypeShare(type=kind, count=counts[kind], size=sizes[kind], share=_share(sizes[kind], result.total_size))
        for kind in counts
    ]
    rows.sort(key=lambda row: row.size, reverse=True)
    return rows


def largest_modules(modules: Iterable[Module], n: int = 10) -> list[Module]:
    return heapq.nlargest(n, modules, key=lambda module: module.size)


def chunk_breakdown(result: AnalysisResult) -> list[ChunkShare]:
    """Each chunk's size relative to the module total (chunks are not part of that total)."""
    return [ChunkShare(chunk=chunk, share=_share(chunk.size, result.total_size)) for chunk in result.chunks]


def compression_ratio(result: AnalysisResult) -> float:
    """Percentage of bytes saved by compression, 0 for an empty bundle."""
    if result.total_size <= 0:
        return 0.0
    return (result.total_size - result.total_compressed_size) / result.total_size * 100


def average_module_size(result: AnalysisResult) -> float:
    if not result.modules:
        return 0.0
    return result.total_size / len(result.modules)


def estimate_load_time(size: float) -> str:
    mib = size / _MIB
    time_3g = mib * _SECONDS_PER_MIB_3G
    time_4g = mib * _SECONDS_PER_MIB_4G
    if time_3g < 1:
        return f"{time_3g * 1000:.0f}ms (3G) / {time_4g * 1000:.0f}ms (4G)"
    return f"{time_3g:.1f}s (3G) / {time_4g:.1f}s (4G)"

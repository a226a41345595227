from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bundlelens.models.bundle import Module

DEFAULT_COMPRESSION_RATIO = 0.3


@dataclass(slots=True, frozen=True)
class BundleTotals:
    size: int = 0
    compressed_size: float = 0


def estimate_compressed(size: int, compressed_size: float | None, ratio: float = DEFAULT_COMPRESSION_RATIO) -> float:
    """Return *compressed_size* when known, else the ``size * ratio`` estimate."""
    if compressed_size is not None:
        return compressed_size
    return size * ratio


def compute_totals(modules: Iterable[Module], ratio: float = DEFAULT_COMPRESSION_RATIO) -> BundleTotals:
    size = 0
    compressed: float = 0
    for module in modules:
        size += module.size
        compressed += estimate_compressed(module.size, module.compressed_size, ratio)
    return BundleTotals(size=size, compressed_size=compressed)

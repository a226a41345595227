from __future__ import annotations

from bundlelens.services.aggregate import compute_totals, estimate_compressed
from tests.factories import make_module


class TestComputeTotals:
    def test_empty(self) -> None:
        totals = compute_totals([])
        assert totals.size == 0
        assert totals.compressed_size == 0

    def test_mixed_known_and_estimated(self) -> None:
        modules = [make_module("a.js", 1000, compressed_size=100), make_module("b.js", 2000)]
        totals = compute_totals(modules)
        assert totals.size == 3000
        assert totals.compressed_size == 100 + 2000 * 0.3

    def test_zero_compressed_size_is_kept(self) -> None:
        totals = compute_totals([make_module("a.js", 1000, compressed_size=0)])
        assert totals.compressed_size == 0

    def test_custom_ratio(self) -> None:
        assert compute_totals([make_module("a.js", 1000)], ratio=0.5).compressed_size == 500


def test_estimate_compressed() -> None:
    assert estimate_compressed(1000, None) == 1000 * 0.3
    assert estimate_compressed(1000, 250) == 250

from bundlelens.services.formatting import format_bytes


def test_format_bytes_outputs() -> None:
    assert format_bytes(0) == "0 B"
    assert format_bytes(1) == "1 B"
    assert format_bytes(1024) == "1 KB"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(600 * 1024) == "600 KB"
    assert format_bytes(1024 * 1024) == "1 MB"
    assert format_bytes(1.25 * 1024**3) == "1.25 GB"


def test_format_bytes_rounds_to_two_decimals() -> None:
    assert format_bytes(100 * 1024 + 1) == "100 KB"
    assert format_bytes(1234567) == "1.18 MB"

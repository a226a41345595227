from __future__ import annotations

_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(size: float) -> str:
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {_UNITS[unit]}"

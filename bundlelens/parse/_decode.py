from __future__ import annotations

import json
import math
from typing import Any

from result import Err, Ok, Result

from bundlelens.models.bundle import InputFile, ParseError, ParseErrorCode


def decode_json(file: InputFile) -> Result[Any, ParseError]:
    try:
        return Ok(json.loads(file.text))
    except json.JSONDecodeError as exc:
        return Err(
            ParseError(
                code=ParseErrorCode.INVALID_JSON,
                filename=file.name,
                message=f"Invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}",
            )
        )


def object_list(payload: Any, key: str) -> list[dict[str, Any]] | None:
    """Return ``payload[key]`` when it is a list of JSON objects, else None (shape mismatch)."""
    if not isinstance(payload, dict):
        return None
    entries = payload.get(key)
    if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
        return None
    return entries


def string_list(payload: Any, key: str) -> list[str] | None:
    if not isinstance(payload, dict):
        return None
    entries = payload.get(key)
    if not isinstance(entries, list) or not all(isinstance(entry, str) for entry in entries):
        return None
    return entries


def as_text(value: Any) -> str | None:
    if value is None or value == "" or isinstance(value, (dict, list)):
        return None
    return str(value)


def as_size(value: Any) -> int | None:
    """Coerce a JSON number to a non-negative byte count; None for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return max(0, int(value))


def as_measure(value: Any) -> float | None:
    """Pass a non-negative finite JSON number through unchanged; None for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def as_ids(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(text for text in (as_text(item) for item in value) if text is not None)

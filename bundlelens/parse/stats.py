"""Bundler stats dumps (webpack-style ``modules`` or ``chunks`` lists)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias

from loguru import logger
from result import Err, Ok

from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import Chunk, InputFile, Module, ParsedFile, ParseResult
from bundlelens.parse._decode import as_ids, as_measure, as_size, as_text, decode_json, object_list
from bundlelens.services.classify import classify
from bundlelens.services.paths import segment

_ShapeDecoder: TypeAlias = Callable[[Any, AppConfig], ParsedFile | None]


def _module_from_entry(entry: dict[str, Any], index: int, config: AppConfig) -> Module:
    identifier = as_text(entry.get("name")) or as_text(entry.get("identifier"))
    name = identifier or f"Module {index}"
    owner = as_text(entry.get("chunk"))
    if owner is None:
        owners = as_ids(entry.get("chunks"))
        owner = owners[0] if owners else None
    return Module(
        id=as_text(entry.get("id")) or f"module-{index}",
        name=name,
        size=as_size(entry.get("size")) or 0,
        compressed_size=as_measure(entry.get("gzipSize")),
        path=segment(identifier, config.dependency_root),
        dependencies=as_ids(entry.get("dependencies")),
        is_external=bool(entry.get("external", False)),
        type=classify(name),
        chunk=owner,
    )


def _chunk_from_entry(entry: dict[str, Any], index: int, config: AppConfig) -> Chunk:
    size = as_size(entry.get("size")) or 0
    compressed = as_measure(entry.get("gzipSize"))
    return Chunk(
        id=as_text(entry.get("id")) or f"chunk-{index}",
        name=as_text(entry.get("name")) or f"Chunk {index}",
        size=size,
        compressed_size=compressed if compressed is not None else size * config.compression_ratio,
        module_ids=as_ids(entry.get("modules")),
        is_entry=bool(entry.get("entry", False)),
    )


def _decode_module_list(payload: Any, config: AppConfig) -> ParsedFile | None:
    entries = object_list(payload, "modules")
    if entries is None:
        return None
    return ParsedFile(modules=tuple(_module_from_entry(entry, i, config) for i, entry in enumerate(entries)))


def _decode_chunk_list(payload: Any, config: AppConfig) -> ParsedFile | None:
    entries = object_list(payload, "chunks")
    if entries is None:
        return None
    return ParsedFile(chunks=tuple(_chunk_from_entry(entry, i, config) for i, entry in enumerate(entries)))


# Tried in order; the first shape that decodes wins.
_SHAPES: tuple[_ShapeDecoder, ...] = (_decode_module_list, _decode_chunk_list)


def parse_stats(file: InputFile, config: AppConfig) -> ParseResult:
    decoded = decode_json(file)
    if isinstance(decoded, Err):
        return decoded
    payload = decoded.unwrap()

    for decode_shape in _SHAPES:
        parsed = decode_shape(payload, config)
        if parsed is not None:
            return Ok(parsed)

    logger.debug("{} matches no known stats shape", file.name)
    return Ok(ParsedFile())

from __future__ import annotations

from result import Err, Ok

from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import InputFile, Module, ParsedFile, ParseResult
from bundlelens.parse._decode import decode_json, string_list
from bundlelens.services.classify import classify
from bundlelens.services.paths import segment

# Source maps carry no per-source byte counts; the path length stands in.
BYTES_PER_SOURCE_CHAR = 2


def estimate_source_size(source: str) -> int:
    """Approximate a source's size as two bytes per character of its *path*.

    This is a placeholder proxy, not the size of the source content.
    """
    return len(source) * BYTES_PER_SOURCE_CHAR


def parse_sourcemap(file: InputFile, config: AppConfig) -> ParseResult:
    decoded = decode_json(file)
    if isinstance(decoded, Err):
        return decoded

    sources = string_list(decoded.unwrap(), "sources")
    if sources is None:
        return Ok(ParsedFile())

    modules = tuple(
        Module(
            id=f"sourcemap-{index}",
            name=source,
            size=estimate_source_size(source),
            path=segment(source, config.dependency_root),
            type=classify(source),
        )
        for index, source in enumerate(sources)
    )
    return Ok(ParsedFile(modules=modules))

from __future__ import annotations

from typing import Protocol

from loguru import logger
from result import Ok

from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import InputFile, ParsedFile, ParseResult
from bundlelens.models.enums import ModuleType
from bundlelens.parse.script import parse_script
from bundlelens.parse.sourcemap import estimate_source_size, parse_sourcemap
from bundlelens.parse.stats import parse_stats
from bundlelens.services.classify import classify


class Parser(Protocol):
    def __call__(self, file: InputFile, config: AppConfig) -> ParseResult: ...


_PARSERS: dict[ModuleType, Parser] = {
    ModuleType.JSON: parse_stats,
    ModuleType.MAP: parse_sourcemap,
    ModuleType.SCRIPT: parse_script,
}


def parser_for(filename: str) -> Parser | None:
    """Return the parser for *filename*, or None for kinds that carry no records (styles, other)."""
    return _PARSERS.get(classify(filename))


def parse_file(file: InputFile, config: AppConfig) -> ParseResult:
    parser = parser_for(file.name)
    if parser is None:
        logger.debug("Skipping {}: no parser for this file type", file.name)
        return Ok(ParsedFile())
    return parser(file, config)


__all__ = [
    "Parser",
    "estimate_source_size",
    "parse_file",
    "parse_script",
    "parse_sourcemap",
    "parse_stats",
    "parser_for",
]

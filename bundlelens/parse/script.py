from __future__ import annotations

from result import Ok

from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import InputFile, Module, ParsedFile, ParseResult
from bundlelens.models.enums import ModuleType


def parse_script(file: InputFile, config: AppConfig) -> ParseResult:
    """A raw script is one module sized by its bytes; dependencies are not extracted."""
    module = Module(
        id=f"js-{file.name}",
        name=file.name,
        size=file.size,
        path=(file.name,),
        type=ModuleType.SCRIPT,
    )
    return Ok(ParsedFile(modules=(module,)))

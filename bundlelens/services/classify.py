from __future__ import annotations

from bundlelens.models.enums import ModuleType

_TYPE_BY_EXTENSION: dict[str, ModuleType] = {
    "js": ModuleType.SCRIPT,
    "jsx": ModuleType.SCRIPT,
    "ts": ModuleType.SCRIPT,
    "tsx": ModuleType.SCRIPT,
    "css": ModuleType.STYLE,
    "scss": ModuleType.STYLE,
    "sass": ModuleType.STYLE,
    "less": ModuleType.STYLE,
    "json": ModuleType.JSON,
    "map": ModuleType.MAP,
}


def file_extension(filename: str | None) -> str | None:
    """Return the lower-cased text after the last dot of *filename*, if any."""
    if not filename or "." not in filename:
        return None
    return filename.rsplit(".", 1)[-1].lower() or None


def classify(filename: str | None) -> ModuleType:
    extension = file_extension(filename)
    if extension is None:
        return ModuleType.OTHER
    return _TYPE_BY_EXTENSION.get(extension, ModuleType.OTHER)

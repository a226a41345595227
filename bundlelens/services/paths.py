from __future__ import annotations

DEPENDENCY_ROOT = "node_modules"
UNKNOWN_SEGMENT = "unknown"


def segment(name: str | None, marker: str = DEPENDENCY_ROOT) -> tuple[str, ...]:
    """Split a module identifier into its path segments.

    Everything before the first *marker* segment is dropped, so installed
    packages group under a single ``node_modules`` subtree no matter how deep
    the install path was.
    """
    if not name:
        return (UNKNOWN_SEGMENT,)

    parts = name.split("/")
    if marker in parts:
        index = parts.index(marker)
        if index < len(parts) - 1:
            return (marker, *parts[index + 1 :])
    return tuple(parts)

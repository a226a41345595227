from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# JSON key -> (attribute, floor). Values below the floor are raised to it.
_CONFIG_INTS: dict[str, tuple[str, int]] = {
    "parseWorkers": ("parse_workers", 1),
    "topCount": ("top_count", 1),
}

_THRESHOLD_INTS: dict[str, tuple[str, int]] = {
    "largeDependencyKb": ("large_dependency_kb", 0),
    "highImpactKb": ("high_impact_kb", 0),
    "codeSplittingKb": ("code_splitting_kb", 0),
    "treeShakingModuleCount": ("tree_shaking_module_count", 0),
    "bundleSizeKb": ("bundle_size_kb", 0),
}

_FLOOR_BY_ATTR = {attr: floor for attr, floor in _CONFIG_INTS.values()}


def clamp_field(value: int, field_name: str) -> int:
    """Raise *value* to the floor of config attribute *field_name*; unknown names pass through."""
    floor = _FLOOR_BY_ATTR.get(field_name)
    return value if floor is None else max(floor, value)


def _read_ints(data: dict[str, Any], spec: dict[str, tuple[str, int]], defaults: object) -> dict[str, int]:
    values: dict[str, int] = {}
    for key, (attr, floor) in spec.items():
        raw = data.get(key)
        if isinstance(raw, bool):
            raise TypeError(f"{key} must be an integer, got {raw!r}")
        values[attr] = max(floor, int(raw) if raw is not None else getattr(defaults, attr))
    return values


@dataclass(slots=True)
class Thresholds:
    large_dependency_kb: int = 100
    high_impact_kb: int = 500
    code_splitting_kb: int = 200
    tree_shaking_module_count: int = 50
    bundle_size_kb: int = 1024

    @property
    def large_dependency_bytes(self) -> int:
        return self.large_dependency_kb * 1024

    @property
    def high_impact_bytes(self) -> int:
        return self.high_impact_kb * 1024

    @property
    def code_splitting_bytes(self) -> int:
        return self.code_splitting_kb * 1024

    @property
    def bundle_size_bytes(self) -> int:
        return self.bundle_size_kb * 1024

    def to_dict(self) -> dict[str, int]:
        return {key: getattr(self, attr) for key, (attr, _) in _THRESHOLD_INTS.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: Thresholds) -> Thresholds:
        return cls(**_read_ints(data, _THRESHOLD_INTS, defaults))


@dataclass(slots=True)
class AlternativeRule:
    """Suggests a lighter replacement when *pattern* occurs in a large module's name."""

    pattern: str
    recommendation: str

    def matches(self, module_name: str) -> bool:
        return self.pattern.lower() in module_name.lower()

    def to_dict(self) -> dict[str, Any]:
        return {"pattern": self.pattern, "recommendation": self.recommendation}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> AlternativeRule:
        return cls(pattern=str(payload["pattern"]), recommendation=str(payload["recommendation"]))


@dataclass(slots=True)
class AppConfig:
    thresholds: Thresholds = field(default_factory=Thresholds)
    alternatives: list[AlternativeRule] = field(default_factory=list)
    compression_ratio: float = 0.3
    dependency_root: str = "node_modules"
    parse_workers: int = 1
    top_count: int = 10

    def to_dict(self) -> dict[str, Any]:
        return {
            "thresholds": self.thresholds.to_dict(),
            "compressionRatio": self.compression_ratio,
            "dependencyRoot": self.dependency_root,
            "parseWorkers": self.parse_workers,
            "topCount": self.top_count,
            "alternatives": [rule.to_dict() for rule in self.alternatives],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: AppConfig) -> AppConfig:
        thresholds_raw = data.get("thresholds")
        thresholds = Thresholds.from_dict(thresholds_raw or {}, defaults.thresholds)

        alternatives_raw = data.get("alternatives")
        if alternatives_raw is not None:
            alternatives = [AlternativeRule.from_dict(x) for x in alternatives_raw]
        else:
            alternatives = list(defaults.alternatives)

        ratio = float(data.get("compressionRatio", defaults.compression_ratio))

        return cls(
            thresholds=thresholds,
            alternatives=alternatives,
            compression_ratio=min(1.0, max(0.0, ratio)),
            dependency_root=str(data.get("dependencyRoot", defaults.dependency_root)) or defaults.dependency_root,
            **_read_ints(data, _CONFIG_INTS, defaults),
        )

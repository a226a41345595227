from __future__ import annotations

from enum import Enum


class ModuleType(str, Enum):
    SCRIPT = "script"
    STYLE = "style"
    JSON = "json"
    MAP = "map"
    OTHER = "other"


class Severity(str, Enum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class Impact(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightCategory(str, Enum):
    DEPENDENCY = "dependency"
    CODE_SPLITTING = "code-splitting"
    TREE_SHAKING = "tree-shaking"
    DUPLICATES = "duplicates"
    PERFORMANCE = "performance"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()

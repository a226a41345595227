from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bundlelens.models.enums import Impact, InsightCategory, Severity


@dataclass(slots=True, frozen=True)
class Insight:
    id: str
    severity: Severity
    title: str
    description: str
    impact: Impact
    recommendation: str
    category: InsightCategory
    estimated_savings_bytes: float | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
            "impact": self.impact.value,
            "recommendation": self.recommendation,
            "category": self.category.value,
        }
        if self.estimated_savings_bytes is not None:
            payload["estimatedSavingsBytes"] = self.estimated_savings_bytes
        return payload

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from typing import TypeAlias

from bundlelens.config.schema import AppConfig
from bundlelens.models.bundle import Chunk, Module
from bundlelens.models.enums import Impact, InsightCategory, ModuleType, Severity
from bundlelens.models.insight import Insight
from bundlelens.services.aggregate import BundleTotals
from bundlelens.services.formatting import format_bytes

Rule: TypeAlias = Callable[[Sequence[Module], Sequence[Chunk], BundleTotals, AppConfig], list[Insight]]

DEPENDENCY_SAVINGS_RATIO = 0.3
CODE_SPLITTING_SAVINGS_RATIO = 0.4

GENERIC_DEPENDENCY_RECOMMENDATION = (
    "Analyze if this dependency is necessary or if there are lighter alternatives available."
)


def dependency_recommendation(module: Module, config: AppConfig) -> str:
    for rule in config.alternatives:
        if rule.matches(module.name):
            return rule.recommendation
    return GENERIC_DEPENDENCY_RECOMMENDATION


def large_dependencies(
    modules: Sequence[Module], chunks: Sequence[Chunk], totals: BundleTotals, config: AppConfig
) -> list[Insight]:
    limit = config.thresholds.large_dependency_bytes
    high = config.thresholds.high_impact_bytes
    large = sorted((m for m in modules if m.size > limit), key=lambda m: m.size, reverse=True)
    return [
        Insight(
            id=f"large-dep-{module.id}",
            severity=Severity.WARNING,
            title="Large Dependency Detected",
            description=(
                f'The module "{module.name}" is {format_bytes(module.size)} in size, '
                "which may impact bundle performance."
            ),
            impact=Impact.HIGH if module.size > high else Impact.MEDIUM,
            recommendation=dependency_recommendation(module, config),
            estimated_savings_bytes=module.size * DEPENDENCY_SAVINGS_RATIO,
            category=InsightCategory.DEPENDENCY,
        )
        for module in large
    ]


def code_splitting(
    modules: Sequence[Module], chunks: Sequence[Chunk], totals: BundleTotals, config: AppConfig
) -> list[Insight]:
    limit = config.thresholds.code_splitting_bytes
    large = sorted((c for c in chunks if c.size > limit), key=lambda c: c.size, reverse=True)
    return [
        Insight(
            id=f"code-split-{chunk.id}",
            severity=Severity.INFO,
            title="Code Splitting Opportunity",
            description=(
                f'The chunk "{chunk.name}" is {format_bytes(chunk.size)} and could benefit from code splitting.'
            ),
            impact=Impact.MEDIUM,
            recommendation=(
                "Consider implementing dynamic imports or route-based code splitting to reduce initial bundle size."
            ),
            estimated_savings_bytes=chunk.size * CODE_SPLITTING_SAVINGS_RATIO,
            category=InsightCategory.CODE_SPLITTING,
        )
        for chunk in large
    ]


def tree_shaking(
    modules: Sequence[Module], chunks: Sequence[Chunk], totals: BundleTotals, config: AppConfig
) -> list[Insight]:
    scripts = sum(1 for m in modules if m.type is ModuleType.SCRIPT)
    if scripts <= config.thresholds.tree_shaking_module_count:
        return []
    return [
        Insight(
            id="tree-shaking",
            severity=Severity.INFO,
            title="Tree Shaking Potential",
            description=(
                f"Your bundle contains {scripts} JavaScript modules. Tree shaking could help eliminate unused code."
            ),
            impact=Impact.MEDIUM,
            recommendation="Ensure your bundler is configured for tree shaking and use ES6 modules consistently.",
            category=InsightCategory.TREE_SHAKING,
        )
    ]


def count_duplicates(names: Sequence[str]) -> int:
    """Count every occurrence of a name beyond its first."""
    return sum(count - 1 for count in Counter(names).values())


def duplicates(
    modules: Sequence[Module], chunks: Sequence[Chunk], totals: BundleTotals, config: AppConfig
) -> list[Insight]:
    repeated = count_duplicates([m.name for m in modules])
    if repeated == 0:
        return []
    return [
        Insight(
            id="duplicates",
            severity=Severity.WARNING,
            title="Duplicate Modules Detected",
            description=(
                f"Found {repeated} duplicate module names, which may indicate redundant dependencies."
            ),
            impact=Impact.MEDIUM,
            recommendation=(
                "Check for duplicate package installations and consider using bundle analyzer plugins "
                "to identify duplicates."
            ),
            category=InsightCategory.DUPLICATES,
        )
    ]


def performance(
    modules: Sequence[Module], chunks: Sequence[Chunk], totals: BundleTotals, config: AppConfig
) -> list[Insight]:
    if totals.size <= config.thresholds.bundle_size_bytes:
        return []
    return [
        Insight(
            id="performance",
            severity=Severity.WARNING,
            title="Large Bundle Size",
            description=(
                f"Your total bundle size is {format_bytes(totals.size)}, which may impact loading performance."
            ),
            impact=Impact.HIGH,
            recommendation=(
                "Consider implementing code splitting, lazy loading, and analyzing dependencies "
                "for optimization opportunities."
            ),
            category=InsightCategory.PERFORMANCE,
        )
    ]


RULES: tuple[Rule, ...] = (large_dependencies, code_splitting, tree_shaking, duplicates, performance)


def generate_insights(
    modules: Sequence[Module],
    chunks: Sequence[Chunk],
    totals: BundleTotals,
    config: AppConfig,
) -> list[Insight]:
    """Run every rule in order over the complete module and chunk sets."""
    insights: list[Insight] = []
    for rule in RULES:
        insights.extend(rule(modules, chunks, totals, config))
    return insights

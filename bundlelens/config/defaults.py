from __future__ import annotations

from bundlelens.config.schema import AlternativeRule, AppConfig, Thresholds

DEFAULT_ALTERNATIVES: tuple[tuple[str, str], ...] = (
    ("moment", "Consider replacing moment.js with dayjs or date-fns for smaller bundle size."),
    ("lodash", "Use lodash-es or import specific functions instead of the full library."),
    ("jquery", "Consider using native DOM APIs or lighter alternatives like zepto.js."),
)


def default_config() -> AppConfig:
    return AppConfig(
        thresholds=Thresholds(),
        alternatives=[AlternativeRule(pattern, recommendation) for pattern, recommendation in DEFAULT_ALTERNATIVES],
    )

"""Grouping of individual metrics into dashboard categories.

- OUTPUT: Activity + Impact
- QUALITY: Quality + Consistency
- TRUST: Authenticity + Collaboration

Authenticity is not derived from a contribution timeline. Callers pass it
in from their own scorer, or use ``placeholder_metric()``.
"""

from dataclasses import dataclass

from ghmetrics.analyzers.shared import round_half_up
from ghmetrics.models.schemas import (
    AllMetricsData,
    CategoryMetrics,
    CategoryScore,
    KeyedMetricData,
    MetricCategory,
    MetricData,
    MetricKey,
    MetricResult,
)

PLACEHOLDER_LEVEL = "Not Assessed"


@dataclass(frozen=True)
class MetricConfig:
    """Display configuration of one metric."""

    key: MetricKey
    title: str
    description: str


@dataclass(frozen=True)
class CategoryConfig:
    """A category and the two metrics averaged into it."""

    name: MetricCategory
    title: str
    description: str
    metrics: tuple[MetricConfig, MetricConfig]


METRIC_CONFIGS: dict[MetricKey, MetricConfig] = {
    MetricKey.ACTIVITY: MetricConfig(
        key=MetricKey.ACTIVITY,
        title="Activity",
        description="Development frequency and contribution volume",
    ),
    MetricKey.IMPACT: MetricConfig(
        key=MetricKey.IMPACT,
        title="Impact",
        description="Project reach through stars, forks, and engagement",
    ),
    MetricKey.QUALITY: MetricConfig(
        key=MetricKey.QUALITY,
        title="Quality",
        description="Code standards, documentation, and originality",
    ),
    MetricKey.CONSISTENCY: MetricConfig(
        key=MetricKey.CONSISTENCY,
        title="Consistency",
        description="Regular contribution patterns over time",
    ),
    MetricKey.AUTHENTICITY: MetricConfig(
        key=MetricKey.AUTHENTICITY,
        title="Authenticity",
        description="Profile genuineness and original work verification",
    ),
    MetricKey.COLLABORATION: MetricConfig(
        key=MetricKey.COLLABORATION,
        title="Collaboration",
        description="Team contributions and open source involvement",
    ),
}

CATEGORY_CONFIGS: dict[MetricCategory, CategoryConfig] = {
    MetricCategory.OUTPUT: CategoryConfig(
        name=MetricCategory.OUTPUT,
        title="Output",
        description="Productivity and project reach",
        metrics=(METRIC_CONFIGS[MetricKey.ACTIVITY], METRIC_CONFIGS[MetricKey.IMPACT]),
    ),
    MetricCategory.QUALITY: CategoryConfig(
        name=MetricCategory.QUALITY,
        title="Quality",
        description="Code standards and work habits",
        metrics=(METRIC_CONFIGS[MetricKey.QUALITY], METRIC_CONFIGS[MetricKey.CONSISTENCY]),
    ),
    MetricCategory.TRUST: CategoryConfig(
        name=MetricCategory.TRUST,
        title="Trust",
        description="Profile authenticity and teamwork",
        metrics=(METRIC_CONFIGS[MetricKey.AUTHENTICITY], METRIC_CONFIGS[MetricKey.COLLABORATION]),
    ),
}

CATEGORY_ORDER = (MetricCategory.OUTPUT, MetricCategory.QUALITY, MetricCategory.TRUST)


def placeholder_metric() -> MetricData:
    """Zero-score stand-in for a metric nobody computed."""
    return MetricData(score=0, level=PLACEHOLDER_LEVEL, breakdown={})


def to_metric_data(result: MetricResult) -> MetricData:
    """Reduce a calculator result to the shape the aggregator reads."""
    return MetricData(
        score=result.score,
        level=getattr(result.level, "value", result.level),
        breakdown=result.breakdown.model_dump(),
    )


def _resolve_category(category: MetricCategory | str) -> MetricCategory:
    try:
        return MetricCategory(category)
    except ValueError:
        supported = ", ".join(c.value for c in CATEGORY_ORDER)
        raise ValueError(f"Unknown category: {category}. Supported: {supported}") from None


def calculate_category_score(metrics: AllMetricsData, category: MetricCategory | str) -> int:
    """Rounded average of the category's two metric scores.

    Raises:
        ValueError: If ``category`` is not a known category name.
    """
    config = CATEGORY_CONFIGS[_resolve_category(category)]
    first, second = config.metrics
    first_score = getattr(metrics, first.key.value).score
    second_score = getattr(metrics, second.key.value).score
    return round_half_up((first_score + second_score) / 2)


def get_category_scores(metrics: AllMetricsData) -> list[CategoryScore]:
    """Scores of all categories, in display order."""
    scores = []
    for category in CATEGORY_ORDER:
        first, second = CATEGORY_CONFIGS[category].metrics
        scores.append(
            CategoryScore(
                category=category,
                score=calculate_category_score(metrics, category),
                metrics=CategoryMetrics(
                    first=_keyed(metrics, first.key),
                    second=_keyed(metrics, second.key),
                ),
            )
        )
    return scores


def _keyed(metrics: AllMetricsData, key: MetricKey) -> KeyedMetricData:
    return KeyedMetricData(key=key, **getattr(metrics, key.value).model_dump())

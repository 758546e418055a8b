"""Data models and schemas."""

from ghmetrics.models.schemas import (
    AllMetricsData,
    CategoryScore,
    MetricCategory,
    MetricData,
    MetricKey,
    Repository,
    RepositoryContribution,
    Timeline,
    YearData,
)

__all__ = [
    "YearData",
    "Timeline",
    "Repository",
    "RepositoryContribution",
    "MetricData",
    "MetricKey",
    "MetricCategory",
    "AllMetricsData",
    "CategoryScore",
]

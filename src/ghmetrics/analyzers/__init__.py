"""Metric calculators and aggregation."""

from ghmetrics.analyzers.activity import calculate_activity_score, get_activity_label
from ghmetrics.analyzers.categories import calculate_category_score, get_category_scores
from ghmetrics.analyzers.collaboration import (
    calculate_collaboration_score,
    get_collaboration_label,
)
from ghmetrics.analyzers.consistency import (
    calculate_consistency_score,
    get_consistency_label,
)
from ghmetrics.analyzers.growth import calculate_growth_score, get_growth_label
from ghmetrics.analyzers.impact import calculate_impact_score, get_impact_label
from ghmetrics.analyzers.quality import calculate_quality_score, get_quality_label
from ghmetrics.analyzers.scorer import Scorer

__all__ = [
    "Scorer",
    "calculate_activity_score",
    "calculate_impact_score",
    "calculate_quality_score",
    "calculate_growth_score",
    "calculate_consistency_score",
    "calculate_collaboration_score",
    "calculate_category_score",
    "get_category_scores",
    "get_activity_label",
    "get_impact_label",
    "get_quality_label",
    "get_growth_label",
    "get_consistency_label",
    "get_collaboration_label",
]

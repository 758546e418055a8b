"""Consistency score: how evenly activity is spread over the years."""

import math
from collections.abc import Sequence

from ghmetrics.analyzers.shared import clamp, classify, round_half_up
from ghmetrics.models.schemas import (
    ConsistencyBreakdown,
    ConsistencyDetails,
    ConsistencyLevel,
    ConsistencyMetric,
    YearData,
)

REGULARITY_MAX = 50
REGULARITY_CV_PENALTY = 25  # points lost per unit of coefficient of variation
STREAK_MAX = 30
STREAK_TARGET_YEARS = 5
RECENCY_MAX = 20
RECENT_YEARS = 2

LEVEL_THRESHOLDS = (
    (81, ConsistencyLevel.EXCELLENT),
    (61, ConsistencyLevel.HIGH),
    (41, ConsistencyLevel.MODERATE),
)


def calculate_consistency_score(timeline: Sequence[YearData]) -> ConsistencyMetric:
    """Calculate the consistency score (0-100).

    Components:
    - Regularity (50 pts): low coefficient of variation of yearly commits
    - Streak (30 pts): longest run of consecutive active years, 5+ for full marks
    - Recency (20 pts): activity in the last two years
    """
    if not timeline:
        return ConsistencyMetric()

    sorted_timeline = sorted(timeline, key=lambda y: y.year)
    commits = [y.total_commits for y in sorted_timeline]
    active_years = sum(1 for c in commits if c > 0)

    cv = calculate_coefficient_of_variation(commits)
    regularity_points = max(0.0, REGULARITY_MAX - cv * REGULARITY_CV_PENALTY)

    longest_streak = calculate_longest_streak(commits)
    streak_points = min(longest_streak / STREAK_TARGET_YEARS * STREAK_MAX, STREAK_MAX)

    recent_active = sum(1 for y in sorted_timeline[-RECENT_YEARS:] if y.total_commits > 0)
    recency_points = recent_active / RECENT_YEARS * RECENCY_MAX

    breakdown = ConsistencyBreakdown(
        regularity=round_half_up(regularity_points),
        streak=round_half_up(streak_points),
        recency=round_half_up(recency_points),
    )
    score = int(clamp(breakdown.regularity + breakdown.streak + breakdown.recency, 0, 100))

    return ConsistencyMetric(
        score=score,
        level=get_consistency_label(score),
        breakdown=breakdown,
        details=ConsistencyDetails(
            active_years=active_years,
            total_years=len(sorted_timeline),
            longest_streak=longest_streak,
            coefficient_of_variation=round(cv, 2),
        ),
    )


def calculate_coefficient_of_variation(values: Sequence[float]) -> float:
    """Population standard deviation divided by the mean (0 for a zero mean)."""
    if not values:
        return 0.0

    mean = sum(values) / len(values)
    if mean == 0:
        return 0.0

    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance) / mean


def calculate_longest_streak(commits: Sequence[int]) -> int:
    """Longest run of consecutive entries with at least one commit."""
    longest = 0
    current = 0
    for count in commits:
        if count > 0:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def get_consistency_label(score: float) -> ConsistencyLevel:
    """Map a consistency score to its level."""
    return classify(score, LEVEL_THRESHOLDS, ConsistencyLevel.LOW)

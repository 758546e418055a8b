"""Activity score: recent volume, presence and repository diversity."""

import logging
from collections.abc import Sequence

from ghmetrics.analyzers.shared import (
    classify,
    count_unique_repos,
    get_last_n_months,
    round_half_up,
    tiered_points,
)
from ghmetrics.models.schemas import (
    ActivityBreakdown,
    ActivityDetails,
    ActivityLevel,
    ActivityMetric,
    YearData,
)

logger = logging.getLogger(__name__)

RECENT_COMMITS_TARGET = 200
RECENT_COMMITS_MAX = 40
CONSISTENCY_MAX = 30

# 8-15 repos is the sweet spot; more than that reads as scattered.
DIVERSITY_TIERS = (
    (16, 25),
    (8, 30),
    (4, 20),
    (1, 10),
)

LEVEL_THRESHOLDS = (
    (71, ActivityLevel.HIGH),
    (41, ActivityLevel.MODERATE),
)


def calculate_activity_score(timeline: Sequence[YearData]) -> ActivityMetric:
    """Calculate the activity score (0-100).

    Components:
    - Recent commits (40 pts): commits in the latest year, 200+ for full marks
    - Consistency (30 pts): share of active years in the latest two years
    - Diversity (30 pts): distinct repositories in the latest year

    Args:
        timeline: Yearly contribution data, in any order.

    Returns:
        ActivityMetric with score, level, breakdown and details.
    """
    if not timeline:
        logger.debug("Empty timeline, activity defaults to zero")
        return ActivityMetric()

    last_3_months = get_last_n_months(timeline, 3)
    last_12_months = get_last_n_months(timeline, 12)

    recent_commits = sum(y.total_commits for y in last_3_months)
    recent_points = min(recent_commits / RECENT_COMMITS_TARGET * RECENT_COMMITS_MAX, RECENT_COMMITS_MAX)

    active_years = sum(1 for y in last_12_months if y.total_commits > 0)
    window = len(last_12_months) or 1
    consistency_points = min(active_years / window * CONSISTENCY_MAX, CONSISTENCY_MAX)

    unique_repos = count_unique_repos(last_3_months)
    diversity_points = tiered_points(unique_repos, DIVERSITY_TIERS)

    breakdown = ActivityBreakdown(
        recent_commits=round_half_up(recent_points),
        consistency=round_half_up(consistency_points),
        diversity=round_half_up(diversity_points),
    )
    score = breakdown.recent_commits + breakdown.consistency + breakdown.diversity

    return ActivityMetric(
        score=score,
        level=get_activity_label(score),
        breakdown=breakdown,
        details=ActivityDetails(
            last_3_months_commits=recent_commits,
            active_months=active_years,
            unique_repos=unique_repos,
        ),
    )


def get_activity_label(score: float) -> ActivityLevel:
    """Map an activity score to its level."""
    return classify(score, LEVEL_THRESHOLDS, ActivityLevel.LOW)

"""Impact score: reach of the repositories a user works on."""

import logging
from collections.abc import Sequence

from ghmetrics.analyzers.shared import classify, round_half_up, tiered_points
from ghmetrics.models.schemas import (
    ImpactBreakdown,
    ImpactDetails,
    ImpactLevel,
    ImpactMetric,
    YearData,
)

logger = logging.getLogger(__name__)

STAR_TIERS = (
    (10_000, 35),
    (5_000, 30),
    (1_000, 25),
    (500, 20),
    (100, 15),
    (50, 10),
    (10, 5),
)

FORK_TIERS = (
    (1_000, 20),
    (500, 16),
    (100, 12),
    (50, 8),
    (10, 4),
)

CONTRIBUTORS_MAX = 15
CONTRIBUTORS_FORK_TARGET = 100
REACH_MAX = 20
REACH_TARGET = 500
ENGAGEMENT_MAX = 10
ENGAGEMENT_TARGET = 200

LEVEL_THRESHOLDS = (
    (81, ImpactLevel.EXCEPTIONAL),
    (61, ImpactLevel.STRONG),
    (41, ImpactLevel.MODERATE),
    (21, ImpactLevel.LOW),
)


def calculate_impact_score(timeline: Sequence[YearData]) -> ImpactMetric:
    """Calculate the impact score (0-100) over the whole timeline.

    Stars and forks are summed over every year's owned and contributed
    repositories without de-duplication, so a repository listed in three
    years counts three times.

    Components:
    - Stars (35 pts), tiered
    - Forks (20 pts), tiered
    - Contributors (15 pts), estimated from forks
    - Reach (20 pts), stars plus forks
    - Engagement (10 pts), PRs plus issues
    """
    if not timeline:
        return ImpactMetric()

    all_repos = [r for year in timeline for r in year.all_repos]
    total_stars = sum(r.repository.stargazer_count for r in all_repos)
    total_forks = sum(r.repository.fork_count for r in all_repos)
    total_prs = sum(y.total_prs for y in timeline)
    total_issues = sum(y.total_issues for y in timeline)
    logger.debug(
        f"Impact over {len(timeline)} years: {total_stars} stars, {total_forks} forks"
    )

    star_points = tiered_points(total_stars, STAR_TIERS)
    fork_points = tiered_points(total_forks, FORK_TIERS)
    contributor_points = min(total_forks / CONTRIBUTORS_FORK_TARGET * CONTRIBUTORS_MAX, CONTRIBUTORS_MAX)
    reach_points = min((total_stars + total_forks) / REACH_TARGET * REACH_MAX, REACH_MAX)
    engagement_points = min((total_prs + total_issues) / ENGAGEMENT_TARGET * ENGAGEMENT_MAX, ENGAGEMENT_MAX)

    breakdown = ImpactBreakdown(
        stars=round_half_up(star_points),
        forks=round_half_up(fork_points),
        contributors=round_half_up(contributor_points),
        reach=round_half_up(reach_points),
        engagement=round_half_up(engagement_points),
    )
    score = (
        breakdown.stars
        + breakdown.forks
        + breakdown.contributors
        + breakdown.reach
        + breakdown.engagement
    )

    return ImpactMetric(
        score=score,
        level=get_impact_label(score),
        breakdown=breakdown,
        details=ImpactDetails(
            total_stars=total_stars,
            total_forks=total_forks,
            total_watchers=0,
            total_prs=total_prs,
            total_issues=total_issues,
        ),
    )


def get_impact_label(score: float) -> ImpactLevel:
    """Map an impact score to its level."""
    return classify(score, LEVEL_THRESHOLDS, ImpactLevel.MINIMAL)

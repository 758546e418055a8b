"""Growth score: signed year-over-year trend."""

import logging
from collections.abc import Sequence

from ghmetrics.analyzers.shared import (
    calculate_total_forks,
    calculate_total_stars,
    clamp,
    classify,
    extract_languages,
    round_half_up,
    tiered_points,
)
from ghmetrics.models.schemas import (
    GrowthBreakdown,
    GrowthDetails,
    GrowthLevel,
    GrowthMetric,
    YearData,
)

logger = logging.getLogger(__name__)

# Share of the total score per component
WEIGHTS = {
    "activity": 40,
    "impact": 30,
    "skills": 30,
}

# New languages adopted -> fraction of the skills weight
SKILLS_TIERS = (
    (5, 1.0),
    (3, 0.6),
    (1, 0.3),
)

LEVEL_THRESHOLDS = (
    (51, GrowthLevel.RAPID_GROWTH),
    (21, GrowthLevel.GROWING),
    (-20, GrowthLevel.STABLE),
    (-50, GrowthLevel.DECLINING),
)


def calculate_growth_score(timeline: Sequence[YearData]) -> GrowthMetric:
    """Calculate the growth score (-100 to +100).

    The timeline must be ordered newest first: ``timeline[0]`` is compared
    against ``timeline[1]``. It is not re-sorted here.

    Components:
    - Activity growth (40%): commits change
    - Impact growth (30%): average of stars and forks change
    - Skills growth (30%): languages not used the year before
    """
    if len(timeline) < 2:
        logger.debug("Growth needs two years of data, defaulting to stable")
        return GrowthMetric()

    current, previous = timeline[0], timeline[1]

    commits_change = calculate_percentage_change(previous.total_commits, current.total_commits)
    activity_points = normalize_growth(commits_change) * WEIGHTS["activity"]

    previous_stars = calculate_total_stars(previous)
    current_stars = calculate_total_stars(current)
    stars_change = calculate_percentage_change(previous_stars, current_stars)

    previous_forks = calculate_total_forks(previous)
    current_forks = calculate_total_forks(current)
    forks_change = calculate_percentage_change(previous_forks, current_forks)

    impact_change = (stars_change + forks_change) / 2
    impact_points = normalize_growth(impact_change) * WEIGHTS["impact"]

    new_languages = len(extract_languages(current) - extract_languages(previous))
    skills_points = tiered_points(new_languages, SKILLS_TIERS) * WEIGHTS["skills"]

    breakdown = GrowthBreakdown(
        activity_growth=round_half_up(activity_points),
        impact_growth=round_half_up(impact_points),
        skills_growth=round_half_up(skills_points),
    )
    score = int(clamp(
        breakdown.activity_growth + breakdown.impact_growth + breakdown.skills_growth,
        -100,
        100,
    ))

    return GrowthMetric(
        score=score,
        level=get_growth_label(score),
        breakdown=breakdown,
        details=GrowthDetails(
            commits_yoy_change=commits_change,
            stars_yoy_change=stars_change,
            forks_yoy_change=forks_change,
            new_languages=new_languages,
            previous_year_commits=previous.total_commits,
            current_year_commits=current.total_commits,
            previous_year_stars=previous_stars,
            current_year_stars=current_stars,
            previous_year_forks=previous_forks,
            current_year_forks=current_forks,
        ),
    )


def calculate_percentage_change(previous: float, current: float) -> float:
    """Percentage change from ``previous`` to ``current``.

    Starting from zero counts as 100% growth.
    """
    if previous == 0 and current == 0:
        return 0.0
    if previous == 0:
        return 100.0
    return (current - previous) / previous * 100


def normalize_growth(percentage_change: float) -> float:
    """Map a percentage change onto -1.0..1.0.

    +200% or more is 1.0 and -100% is -1.0, linear in between on each side.
    """
    if percentage_change >= 200:
        return 1.0
    if percentage_change <= -100:
        return -1.0
    if percentage_change >= 0:
        return percentage_change / 200
    return percentage_change / 100


def get_growth_label(score: float) -> GrowthLevel:
    """Map a growth score to its level."""
    return classify(score, LEVEL_THRESHOLDS, GrowthLevel.RAPID_DECLINE)

"""Year badges, insights and career totals."""

from collections.abc import Sequence

from ghmetrics.analyzers.shared import count_unique_repos, round_half_up
from ghmetrics.models.schemas import (
    CareerSummary,
    YearAnalysis,
    YearBadge,
    YearBadgeType,
    YearData,
    YearInsight,
    YearMetrics,
)

BADGES: dict[YearBadgeType, dict[str, str]] = {
    YearBadgeType.PEAK: {
        "emoji": "🔥",
        "label": "Peak Year",
        "description": "Year with the most commits",
    },
    YearBadgeType.GROWTH: {
        "emoji": "📈",
        "label": "Growth",
        "description": "Activity up more than 20% on the previous year",
    },
    YearBadgeType.STABLE: {
        "emoji": "📊",
        "label": "Stable",
        "description": "Activity within 20% of the previous year",
    },
    YearBadgeType.START: {
        "emoji": "🌱",
        "label": "Beginning",
        "description": "First year of activity on GitHub",
    },
    YearBadgeType.DECLINE: {
        "emoji": "📉",
        "label": "Decline",
        "description": "Activity down more than 20% on the previous year",
    },
    YearBadgeType.INACTIVE: {
        "emoji": "⚫",
        "label": "Inactive",
        "description": "Fewer than 100 commits in the year",
    },
}

INACTIVE_COMMITS = 100
GROWTH_PERCENT = 20
DECLINE_PERCENT = -20
STRONG_GROWTH_PERCENT = 50


def analyze_year(year: int, commits: int, all_years: Sequence[tuple[int, int]]) -> YearAnalysis:
    """Badge, insight and standing of one year among all years.

    Args:
        year: The year being analyzed.
        commits: Commits in that year.
        all_years: ``(year, commits)`` pairs for every year, including this one.
    """
    by_year = sorted(all_years, key=lambda pair: pair[0])
    total_commits = sum(c for _, c in by_year)
    max_commits = max((c for _, c in by_year), default=0)
    first_year = min((y for y, _ in by_year), default=year)

    ranked = sorted(by_year, key=lambda pair: pair[1], reverse=True)
    # 0 when the year is not among all_years
    rank = next((i for i, (y, _) in enumerate(ranked, 1) if y == year), 0)

    previous_commits = next((c for y, c in by_year if y == year - 1), None)
    yoy_change = None
    if previous_commits:
        yoy_change = (commits - previous_commits) / previous_commits * 100

    percent_of_total = round_half_up(commits / total_commits * 100) if total_commits else 0
    percent_of_peak = round_half_up(commits / max_commits * 100) if max_commits else 0

    badge_type = _badge_type(year, commits, yoy_change, max_commits, first_year)

    return YearAnalysis(
        badge=YearBadge(type=badge_type, **BADGES[badge_type]),
        insight=_insight(commits, yoy_change, rank, len(by_year)),
        percent_of_total=percent_of_total,
        percent_of_peak=percent_of_peak,
        yoy_change=yoy_change,
        rank=rank,
    )


def _badge_type(
    year: int,
    commits: int,
    yoy_change: float | None,
    max_commits: int,
    first_year: int,
) -> YearBadgeType:
    # Checked in priority order
    if commits < INACTIVE_COMMITS:
        return YearBadgeType.INACTIVE
    if commits == max_commits:
        return YearBadgeType.PEAK
    if year == first_year:
        return YearBadgeType.START
    if yoy_change is not None:
        if yoy_change > GROWTH_PERCENT:
            return YearBadgeType.GROWTH
        if yoy_change < DECLINE_PERCENT:
            return YearBadgeType.DECLINE
    return YearBadgeType.STABLE


def _insight(
    commits: int, yoy_change: float | None, rank: int, total_years: int
) -> YearInsight | None:
    if rank == 1:
        return YearInsight(
            text=f"Best year with {commits:,} commits",
            highlight=f"{commits:,}",
        )
    if yoy_change and yoy_change > STRONG_GROWTH_PERCENT:
        growth = round_half_up(yoy_change)
        return YearInsight(
            text=f"+{growth}% growth from previous year",
            highlight=f"+{growth}%",
        )
    if rank == 2 and total_years > 2:
        return YearInsight(text="Second most productive year")
    return None


def analyze_all_years(timeline: Sequence[YearData]) -> dict[int, YearAnalysis]:
    """Analysis of every year in the timeline, keyed by year."""
    pairs = [(y.year, y.total_commits) for y in timeline]
    return {year: analyze_year(year, commits, pairs) for year, commits in pairs}


def get_career_summary(timeline: Sequence[YearData]) -> CareerSummary:
    """Totals across the whole timeline."""
    return CareerSummary(
        total_commits=sum(y.total_commits for y in timeline),
        total_prs=sum(y.total_prs for y in timeline),
        years_active=sum(1 for y in timeline if y.total_commits >= INACTIVE_COMMITS),
        total_years=len(timeline),
        start_year=min((y.year for y in timeline), default=None),
        unique_repos=count_unique_repos(timeline),
    )


def get_year_metrics(year: YearData) -> YearMetrics:
    """Commits, PRs and distinct repositories of one year."""
    return YearMetrics(
        commits=year.total_commits,
        prs=year.total_prs,
        repos=count_unique_repos([year]),
    )

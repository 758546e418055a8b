"""Quality score: what the user's own repositories look like."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from ghmetrics.analyzers.shared import (
    classify,
    get_unique_repos,
    round_half_up,
    tiered_points,
)
from ghmetrics.models.schemas import (
    QualityBreakdown,
    QualityDetails,
    QualityLevel,
    QualityMetric,
    RepositoryContribution,
    YearData,
)

logger = logging.getLogger(__name__)

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

ORIGINALITY_MAX = 30
DOCUMENTATION_MAX = 25
OWNERSHIP_MAX = 20

# Average repository age in years. Any positive age earns the last tier.
MATURITY_TIERS = (
    (5, 15),
    (3, 12),
    (2, 9),
    (1, 6),
    (0, 3),
)

STACK_TIERS = (
    (10, 10),
    (7, 8),
    (5, 6),
    (3, 4),
    (1, 2),
)

LEVEL_THRESHOLDS = (
    (81, QualityLevel.EXCELLENT),
    (61, QualityLevel.STRONG),
    (41, QualityLevel.GOOD),
    (21, QualityLevel.FAIR),
)


def calculate_quality_score(timeline: Sequence[YearData], now: datetime) -> QualityMetric:
    """Calculate the quality score (0-100).

    Owned and contributed repositories are de-duplicated by URL across all
    years before counting.

    Components:
    - Originality (30 pts): share of owned repos that are not forks
    - Documentation (25 pts): share of owned repos with a description
    - Ownership (20 pts): owned repos vs all repos
    - Maturity (15 pts): average age of owned repos
    - Stack (10 pts): distinct languages among owned repos

    Args:
        timeline: Yearly contribution data.
        now: Reference time for repository ages.

    Returns:
        QualityMetric with score, level, breakdown and details.
    """
    if not timeline:
        return QualityMetric()

    owned = get_unique_repos(r for y in timeline for r in y.owned_repos)
    contributed = get_unique_repos(r for y in timeline for r in y.contributions)
    total_owned = len(owned)
    total_repos = total_owned + len(contributed)

    non_fork_repos = sum(1 for r in owned if not r.repository.is_fork)
    documented_repos = sum(1 for r in owned if _is_documented(r))

    originality_points = non_fork_repos / total_owned * ORIGINALITY_MAX if total_owned else 0
    documentation_points = documented_repos / total_owned * DOCUMENTATION_MAX if total_owned else 0
    ownership_points = total_owned / total_repos * OWNERSHIP_MAX if total_repos else 0

    avg_repo_age = calculate_average_repo_age(owned, now)
    maturity_points = tiered_points(avg_repo_age, MATURITY_TIERS) if avg_repo_age > 0 else 0

    unique_languages = len(
        {r.repository.primary_language for r in owned if r.repository.primary_language}
    )
    stack_points = tiered_points(unique_languages, STACK_TIERS)

    breakdown = QualityBreakdown(
        originality=round_half_up(originality_points),
        documentation=round_half_up(documentation_points),
        ownership=round_half_up(ownership_points),
        maturity=round_half_up(maturity_points),
        stack=round_half_up(stack_points),
    )
    score = (
        breakdown.originality
        + breakdown.documentation
        + breakdown.ownership
        + breakdown.maturity
        + breakdown.stack
    )

    return QualityMetric(
        score=score,
        level=get_quality_label(score),
        breakdown=breakdown,
        details=QualityDetails(
            non_fork_repos=non_fork_repos,
            total_owned_repos=total_owned,
            documented_repos=documented_repos,
            owned_repos_count=total_owned,
            contributed_repos_count=len(contributed),
            avg_repo_age=avg_repo_age,
            unique_languages=unique_languages,
        ),
    )


def _is_documented(repo: RepositoryContribution) -> bool:
    description = repo.repository.description
    return bool(description and description.strip())


def calculate_average_repo_age(
    repos: Sequence[RepositoryContribution], now: datetime
) -> float:
    """Average age in years of the repos that report a creation date.

    Naive timestamps are taken as UTC. Returns 0 when no repo has a
    creation date.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    ages = []
    for repo in repos:
        created_at = repo.repository.created_at
        if created_at is None:
            continue
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        ages.append((now - created_at).total_seconds() / SECONDS_PER_YEAR)

    if len(ages) < len(repos):
        logger.debug(f"{len(repos) - len(ages)} owned repos without creation date skipped")

    if not ages:
        return 0.0
    return sum(ages) / len(ages)


def get_quality_label(score: float) -> QualityLevel:
    """Map a quality score to its level."""
    return classify(score, LEVEL_THRESHOLDS, QualityLevel.WEAK)

"""Collaboration score: work on repositories the user does not own."""

from collections.abc import Sequence

from ghmetrics.analyzers.shared import clamp, classify, round_half_up
from ghmetrics.models.schemas import (
    CollaborationBreakdown,
    CollaborationDetails,
    CollaborationLevel,
    CollaborationMetric,
    YearData,
)

CONTRIBUTION_RATIO_MAX = 50
DIVERSITY_MAX = 30
DIVERSITY_TARGET_REPOS = 10
ENGAGEMENT_MAX = 20
ENGAGEMENT_TARGET_COMMITS = 5  # commits per contributed repo for full marks

LEVEL_THRESHOLDS = (
    (81, CollaborationLevel.EXCELLENT),
    (61, CollaborationLevel.HIGH),
    (41, CollaborationLevel.MODERATE),
)


def calculate_collaboration_score(timeline: Sequence[YearData]) -> CollaborationMetric:
    """Calculate the collaboration score (0-100).

    Components:
    - Contribution ratio (50 pts): share of distinct repos owned by others,
      saturating at 50%
    - Diversity (30 pts): distinct contributed repos, 10+ for full marks
    - Engagement (20 pts): commits per contributed repo, 5+ for full marks
    """
    if not timeline:
        return CollaborationMetric()

    owned_urls: set[str] = set()
    contributed_urls: set[str] = set()
    orgs: set[str] = set()
    contribution_commits = 0

    for year in timeline:
        owned_urls.update(r.repository.url for r in year.owned_repos)
        for contribution in year.contributions:
            contributed_urls.add(contribution.repository.url)
            contribution_commits += contribution.commit_count
            org = extract_org(contribution.repository.url)
            if org is not None:
                orgs.add(org)

    owned_count = len(owned_urls)
    contributed_count = len(contributed_urls)
    total_repos = owned_count + contributed_count

    contribution_percentage = contributed_count / total_repos * 100 if total_repos else 0.0
    ratio_points = min(contribution_percentage, CONTRIBUTION_RATIO_MAX)

    diversity_points = min(contributed_count / DIVERSITY_TARGET_REPOS * DIVERSITY_MAX, DIVERSITY_MAX)

    avg_commits = contribution_commits / contributed_count if contributed_count else 0.0
    engagement_points = min(avg_commits / ENGAGEMENT_TARGET_COMMITS * ENGAGEMENT_MAX, ENGAGEMENT_MAX)

    breakdown = CollaborationBreakdown(
        contribution_ratio=round_half_up(ratio_points),
        diversity=round_half_up(diversity_points),
        engagement=round_half_up(engagement_points),
    )
    score = int(clamp(
        breakdown.contribution_ratio + breakdown.diversity + breakdown.engagement,
        0,
        100,
    ))

    return CollaborationMetric(
        score=score,
        level=get_collaboration_label(score),
        breakdown=breakdown,
        details=CollaborationDetails(
            owned_repos_count=owned_count,
            contributed_repos_count=contributed_count,
            contribution_percentage=round_half_up(contribution_percentage),
            unique_orgs_contributed=len(orgs),
        ),
    )


def extract_org(url: str) -> str | None:
    """Owner segment of ``https://github.com/{org}/{repo}``, if present."""
    parts = url.split("/")
    if len(parts) >= 4:
        return parts[3]
    return None


def get_collaboration_label(score: float) -> CollaborationLevel:
    """Map a collaboration score to its level."""
    return classify(score, LEVEL_THRESHOLDS, CollaborationLevel.LOW)

from datetime import datetime, timedelta, timezone

import pytest

from ghmetrics.models.schemas import Repository, RepositoryContribution, YearData

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_repo():
    """Factory for RepositoryContribution entries."""

    def _make(
        name: str,
        owner: str = "octocat",
        commits: int = 1,
        stars: int = 0,
        forks: int = 0,
        is_fork: bool = False,
        language: str | None = None,
        description: str | None = None,
        age_years: float | None = None,
    ) -> RepositoryContribution:
        created_at = None
        if age_years is not None:
            created_at = NOW - timedelta(days=365 * age_years)
        return RepositoryContribution(
            commit_count=commits,
            repository=Repository(
                url=f"https://github.com/{owner}/{name}",
                name=name,
                owner=owner,
                stargazer_count=stars,
                fork_count=forks,
                is_fork=is_fork,
                primary_language=language,
                description=description,
                created_at=created_at,
            ),
        )

    return _make


@pytest.fixture
def make_year():
    """Factory for YearData entries."""

    def _make(
        year: int,
        commits: int = 0,
        owned=None,
        contributions=None,
        issues: int = 0,
        prs: int = 0,
        reviews: int = 0,
    ) -> YearData:
        return YearData(
            year=year,
            total_commits=commits,
            total_issues=issues,
            total_prs=prs,
            total_reviews=reviews,
            owned_repos=owned or [],
            contributions=contributions or [],
        )

    return _make


@pytest.fixture
def sample_timeline(make_year, make_repo):
    """Three years of a moderately active developer, newest first."""
    return [
        make_year(
            2025,
            commits=240,
            issues=12,
            prs=30,
            owned=[
                make_repo("toolkit", commits=120, stars=80, forks=12, language="Python",
                          description="Handy tools", age_years=3),
                make_repo("dotfiles", commits=20, language="Shell", age_years=6),
            ],
            contributions=[
                make_repo("framework", owner="acme", commits=15, stars=4000, forks=300, language="Go"),
                make_repo("docs", owner="acme", commits=3, language="TypeScript"),
            ],
        ),
        make_year(
            2024,
            commits=150,
            issues=8,
            prs=14,
            owned=[
                make_repo("toolkit", commits=90, stars=60, forks=10, language="Python",
                          description="Handy tools", age_years=3),
            ],
            contributions=[
                make_repo("framework", owner="acme", commits=6, stars=3500, forks=280, language="Go"),
            ],
        ),
        make_year(
            2023,
            commits=60,
            prs=2,
            owned=[
                make_repo("dotfiles", commits=60, language="Shell", age_years=6),
            ],
        ),
    ]

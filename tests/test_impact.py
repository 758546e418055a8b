import pytest

from ghmetrics.analyzers.impact import calculate_impact_score, get_impact_label
from ghmetrics.models.schemas import ImpactLevel


def test_empty_timeline():
    result = calculate_impact_score([])

    assert result.score == 0
    assert result.level == ImpactLevel.MINIMAL
    assert result.details.total_stars == 0


def test_extreme_values_stay_within_caps(make_year, make_repo):
    timeline = [
        make_year(
            2025,
            prs=10_000,
            issues=10_000,
            owned=[make_repo("famous", stars=1_000_000, forks=1_000_000)],
        )
    ]

    result = calculate_impact_score(timeline)

    assert result.breakdown.model_dump() == {
        "stars": 35,
        "forks": 20,
        "contributors": 15,
        "reach": 20,
        "engagement": 10,
    }
    assert result.score == 100
    assert result.level == ImpactLevel.EXCEPTIONAL


def test_same_repo_in_several_years_is_counted_each_time(make_year, make_repo):
    timeline = [
        make_year(2025, owned=[make_repo("lib", stars=60, forks=5)]),
        make_year(2024, owned=[make_repo("lib", stars=60, forks=5)]),
    ]

    result = calculate_impact_score(timeline)

    assert result.details.total_stars == 120
    assert result.details.total_forks == 10
    assert result.breakdown.stars == 15
    assert result.breakdown.forks == 4


def test_contributors_and_reach(make_year, make_repo):
    timeline = [make_year(2025, contributions=[make_repo("x", owner="acme", stars=100, forks=20)])]

    result = calculate_impact_score(timeline)

    # 20 forks / 100 * 15 = 3, (100 + 20) / 500 * 20 = 4.8
    assert result.breakdown.contributors == 3
    assert result.breakdown.reach == 5
    assert result.breakdown.stars == 15
    assert result.breakdown.forks == 4
    assert result.score == 27
    assert result.level == ImpactLevel.LOW


def test_engagement_sums_all_years(make_year):
    timeline = [make_year(2025, prs=30, issues=20), make_year(2024, prs=20, issues=30)]

    result = calculate_impact_score(timeline)

    assert result.details.total_prs == 50
    assert result.details.total_issues == 50
    assert result.breakdown.engagement == 5


@pytest.mark.parametrize(
    "stars,points",
    [(0, 0), (9, 0), (10, 5), (49, 5), (50, 10), (100, 15), (500, 20), (1_000, 25), (5_000, 30), (10_000, 35)],
)
def test_star_tiers(make_year, make_repo, stars, points):
    timeline = [make_year(2025, owned=[make_repo("r", stars=stars)])]
    assert calculate_impact_score(timeline).breakdown.stars == points


@pytest.mark.parametrize(
    "forks,points",
    [(0, 0), (9, 0), (10, 4), (50, 8), (100, 12), (499, 12), (500, 16), (1_000, 20)],
)
def test_fork_tiers(make_year, make_repo, forks, points):
    timeline = [make_year(2025, owned=[make_repo("r", forks=forks)])]
    assert calculate_impact_score(timeline).breakdown.forks == points


def test_watchers_are_not_available(sample_timeline):
    assert calculate_impact_score(sample_timeline).details.total_watchers == 0


def test_score_is_sum_of_breakdown(sample_timeline):
    result = calculate_impact_score(sample_timeline)
    assert result.score == result.breakdown_total()
    assert 0 <= result.score <= 100


@pytest.mark.parametrize(
    "score,level",
    [
        (0, ImpactLevel.MINIMAL),
        (20, ImpactLevel.MINIMAL),
        (21, ImpactLevel.LOW),
        (40, ImpactLevel.LOW),
        (41, ImpactLevel.MODERATE),
        (60, ImpactLevel.MODERATE),
        (61, ImpactLevel.STRONG),
        (80, ImpactLevel.STRONG),
        (81, ImpactLevel.EXCEPTIONAL),
    ],
)
def test_impact_label_boundaries(score, level):
    assert get_impact_label(score) == level

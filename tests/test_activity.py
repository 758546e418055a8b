import pytest

from ghmetrics.analyzers.activity import calculate_activity_score, get_activity_label
from ghmetrics.models.schemas import ActivityLevel


def test_empty_timeline():
    result = calculate_activity_score([])

    assert result.score == 0
    assert result.level == ActivityLevel.LOW
    assert result.breakdown.model_dump() == {"recent_commits": 0, "consistency": 0, "diversity": 0}
    assert result.details.unique_repos == 0


def test_single_busy_year_with_ten_repos(make_year, make_repo):
    timeline = [
        make_year(2025, commits=200, owned=[make_repo(f"repo-{i}") for i in range(10)]),
    ]

    result = calculate_activity_score(timeline)

    assert result.breakdown.recent_commits == 40
    assert result.breakdown.diversity == 30
    # Only one year exists, and it is active
    assert result.breakdown.consistency == 30
    assert result.details.active_months == 1
    assert result.details.unique_repos == 10
    assert result.score == 100
    assert result.level == ActivityLevel.HIGH


def test_recent_commits_are_capped(make_year):
    result = calculate_activity_score([make_year(2025, commits=5_000)])
    assert result.breakdown.recent_commits == 40
    assert result.details.last_3_months_commits == 5_000


def test_inactive_latest_year(make_year, make_repo):
    timeline = [
        make_year(2024, commits=100, owned=[make_repo("old")]),
        make_year(2025, commits=0),
    ]

    result = calculate_activity_score(timeline)

    assert result.breakdown.recent_commits == 0
    assert result.breakdown.consistency == 15
    assert result.breakdown.diversity == 0
    assert result.score == 15
    assert result.level == ActivityLevel.LOW


def test_only_latest_year_counts_for_diversity(make_year, make_repo):
    timeline = [
        make_year(2025, commits=50, owned=[make_repo("a")]),
        make_year(2024, commits=50, owned=[make_repo(f"r{i}") for i in range(12)]),
    ]

    result = calculate_activity_score(timeline)

    assert result.details.unique_repos == 1
    assert result.breakdown.diversity == 10


@pytest.mark.parametrize(
    "repo_count,points",
    [(0, 0), (1, 10), (3, 10), (4, 20), (7, 20), (8, 30), (15, 30), (16, 25), (40, 25)],
)
def test_diversity_tiers(make_year, make_repo, repo_count, points):
    timeline = [make_year(2025, commits=10, owned=[make_repo(f"r{i}") for i in range(repo_count)])]
    assert calculate_activity_score(timeline).breakdown.diversity == points


def test_repo_in_both_lists_counts_once(make_year, make_repo):
    timeline = [
        make_year(2025, commits=10, owned=[make_repo("shared")], contributions=[make_repo("shared")]),
    ]
    assert calculate_activity_score(timeline).details.unique_repos == 1


def test_unsorted_input_is_left_alone(make_year):
    timeline = [make_year(2023, commits=10), make_year(2025, commits=100), make_year(2024)]

    result = calculate_activity_score(timeline)

    assert result.details.last_3_months_commits == 100
    assert [y.year for y in timeline] == [2023, 2025, 2024]


def test_score_is_sum_of_breakdown(sample_timeline):
    result = calculate_activity_score(sample_timeline)
    assert isinstance(result.score, int)
    assert result.score == result.breakdown_total()
    assert 0 <= result.score <= 100


@pytest.mark.parametrize(
    "score,level",
    [
        (0, ActivityLevel.LOW),
        (40, ActivityLevel.LOW),
        (41, ActivityLevel.MODERATE),
        (70, ActivityLevel.MODERATE),
        (71, ActivityLevel.HIGH),
        (100, ActivityLevel.HIGH),
    ],
)
def test_activity_label_boundaries(score, level):
    assert get_activity_label(score) == level

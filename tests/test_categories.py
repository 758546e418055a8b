import pytest

from ghmetrics.analyzers.categories import (
    CATEGORY_CONFIGS,
    calculate_category_score,
    get_category_scores,
    placeholder_metric,
    to_metric_data,
)
from ghmetrics.analyzers.collaboration import calculate_collaboration_score
from ghmetrics.models.schemas import AllMetricsData, MetricCategory, MetricData, MetricKey


def _metrics(**scores) -> AllMetricsData:
    values = {key.value: 0 for key in MetricKey}
    values.update(scores)
    return AllMetricsData(**{
        name: MetricData(score=score, level="Test", breakdown={"total": score})
        for name, score in values.items()
    })


def test_categories_in_display_order():
    scores = get_category_scores(_metrics())
    assert [c.category for c in scores] == [
        MetricCategory.OUTPUT,
        MetricCategory.QUALITY,
        MetricCategory.TRUST,
    ]


def test_category_members():
    scores = {c.category: c for c in get_category_scores(_metrics())}

    assert scores[MetricCategory.OUTPUT].metrics.first.key == MetricKey.ACTIVITY
    assert scores[MetricCategory.OUTPUT].metrics.second.key == MetricKey.IMPACT
    assert scores[MetricCategory.QUALITY].metrics.first.key == MetricKey.QUALITY
    assert scores[MetricCategory.QUALITY].metrics.second.key == MetricKey.CONSISTENCY
    assert scores[MetricCategory.TRUST].metrics.first.key == MetricKey.AUTHENTICITY
    assert scores[MetricCategory.TRUST].metrics.second.key == MetricKey.COLLABORATION


def test_category_score_rounds_half_up():
    metrics = _metrics(activity=71, impact=40, quality=50, consistency=51)

    assert calculate_category_score(metrics, MetricCategory.OUTPUT) == 56
    assert calculate_category_score(metrics, MetricCategory.QUALITY) == 51


def test_category_carries_metric_data():
    metrics = _metrics(authenticity=30, collaboration=90)

    trust = get_category_scores(metrics)[2]

    assert trust.score == 60
    assert trust.metrics.first.score == 30
    assert trust.metrics.second.score == 90
    assert trust.metrics.second.breakdown == {"total": 90}


def test_category_accepts_plain_string():
    metrics = _metrics(activity=10, impact=20)
    assert calculate_category_score(metrics, "OUTPUT") == 15


def test_unknown_category_is_rejected():
    with pytest.raises(ValueError, match="Unknown category: SPEED"):
        calculate_category_score(_metrics(), "SPEED")


def test_every_category_has_two_configured_metrics():
    for category, config in CATEGORY_CONFIGS.items():
        assert config.name == category
        assert len(config.metrics) == 2
        assert all(m.title and m.description for m in config.metrics)


def test_placeholder_metric():
    placeholder = placeholder_metric()

    assert placeholder.score == 0
    assert placeholder.level == "Not Assessed"
    assert placeholder.breakdown == {}


def test_to_metric_data_uses_plain_level(make_year, make_repo):
    timeline = [make_year(2025, contributions=[make_repo("lib", owner="acme", commits=5)])]
    result = calculate_collaboration_score(timeline)

    data = to_metric_data(result)

    assert data.score == result.score
    assert data.level == result.level.value
    assert data.breakdown == result.breakdown.model_dump()


def test_fractional_metric_scores_round_half_up():
    metrics = _metrics(authenticity=72.5, collaboration=40)

    # (72.5 + 40) / 2 = 56.25
    assert calculate_category_score(metrics, MetricCategory.TRUST) == 56
    assert get_category_scores(metrics)[2].metrics.first.score == 72.5


def test_fractional_score_reaching_half_rounds_up():
    metrics = _metrics(activity=70.5, impact=40.5)
    # (70.5 + 40.5) / 2 = 55.5
    assert calculate_category_score(metrics, MetricCategory.OUTPUT) == 56

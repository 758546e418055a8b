from ghmetrics.analyzers.activity import calculate_activity_score
from ghmetrics.analyzers.history import calculate_metric_history
from ghmetrics.analyzers.impact import calculate_impact_score
from ghmetrics.analyzers.quality import calculate_quality_score


def test_history_is_oldest_first(sample_timeline, now):
    history = calculate_metric_history(sample_timeline, now)
    assert [row.year for row in history] == [2023, 2024, 2025]


def test_each_year_is_scored_alone(sample_timeline, now):
    history = {row.year: row for row in calculate_metric_history(sample_timeline, now)}

    for year in sample_timeline:
        row = history[year.year]
        assert row.activity == calculate_activity_score([year]).score
        assert row.impact == calculate_impact_score([year]).score
        assert row.quality == calculate_quality_score([year], now).score


def test_growth_is_zero_for_single_years(sample_timeline, now):
    assert all(row.growth == 0 for row in calculate_metric_history(sample_timeline, now))


def test_empty_timeline(now):
    assert calculate_metric_history([], now) == []

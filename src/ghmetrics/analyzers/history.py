"""Per-year metric development."""

from collections.abc import Sequence
from datetime import datetime

from ghmetrics.analyzers.activity import calculate_activity_score
from ghmetrics.analyzers.growth import calculate_growth_score
from ghmetrics.analyzers.impact import calculate_impact_score
from ghmetrics.analyzers.quality import calculate_quality_score
from ghmetrics.models.schemas import MetricYearData, YearData


def calculate_metric_history(
    timeline: Sequence[YearData], now: datetime
) -> list[MetricYearData]:
    """Score each year on its own, oldest year first.

    Growth needs two years, so it is always 0 for a single-year slice.
    """
    history = []
    for year in timeline:
        single = [year]
        history.append(
            MetricYearData(
                year=year.year,
                activity=calculate_activity_score(single).score,
                impact=calculate_impact_score(single).score,
                quality=calculate_quality_score(single, now).score,
                growth=calculate_growth_score(single).score,
            )
        )
    return sorted(history, key=lambda row: row.year)

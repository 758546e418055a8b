"""Score calculator for contribution timelines."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from ghmetrics.analyzers.activity import calculate_activity_score
from ghmetrics.analyzers.categories import (
    get_category_scores,
    placeholder_metric,
    to_metric_data,
)
from ghmetrics.analyzers.collaboration import calculate_collaboration_score
from ghmetrics.analyzers.consistency import calculate_consistency_score
from ghmetrics.analyzers.growth import calculate_growth_score
from ghmetrics.analyzers.impact import calculate_impact_score
from ghmetrics.analyzers.quality import calculate_quality_score
from ghmetrics.models.schemas import (
    AllMetricsData,
    MetricData,
    ProfileScores,
    YearData,
)

logger = logging.getLogger(__name__)


class Scorer:
    """Runs every calculator over a timeline and aggregates categories.

    Metrics (all 0-100 except Growth, which is -100..+100):
    - Activity, Impact -> OUTPUT
    - Quality, Consistency -> QUALITY
    - Authenticity (external), Collaboration -> TRUST
    - Growth is reported but belongs to no category
    """

    def __init__(self, now: datetime | None = None) -> None:
        """Initialize the scorer.

        Args:
            now: Reference time for repository ages. The current UTC time
                is used when omitted.
        """
        self.now = now

    def calculate_scores(
        self,
        timeline: Sequence[YearData],
        authenticity: MetricData | None = None,
    ) -> ProfileScores:
        """Calculate all metrics and category scores.

        Args:
            timeline: Yearly contribution data.
            authenticity: Externally computed authenticity metric. A zero
                placeholder is used when omitted.

        Returns:
            ProfileScores with every metric, the aggregated categories and
            the reference time used.
        """
        now = self.now or datetime.now(timezone.utc)
        # Growth compares timeline[0] with timeline[1]
        newest_first = sorted(timeline, key=lambda y: y.year, reverse=True)
        logger.debug(f"Scoring {len(newest_first)} years at {now.isoformat()}")

        activity = calculate_activity_score(newest_first)
        impact = calculate_impact_score(newest_first)
        quality = calculate_quality_score(newest_first, now)
        growth = calculate_growth_score(newest_first)
        consistency = calculate_consistency_score(newest_first)
        collaboration = calculate_collaboration_score(newest_first)

        if authenticity is None:
            logger.debug("No authenticity metric supplied, using placeholder")
            authenticity = placeholder_metric()

        metrics = AllMetricsData(
            activity=to_metric_data(activity),
            impact=to_metric_data(impact),
            quality=to_metric_data(quality),
            consistency=to_metric_data(consistency),
            authenticity=authenticity,
            collaboration=to_metric_data(collaboration),
        )

        return ProfileScores(
            activity=activity,
            impact=impact,
            quality=quality,
            growth=growth,
            consistency=consistency,
            collaboration=collaboration,
            metrics=metrics,
            categories=get_category_scores(metrics),
            evaluated_at=now,
        )

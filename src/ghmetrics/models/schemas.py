"""Pydantic models for contribution timelines and metric results."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


# --- Timeline Models ---


class Repository(BaseModel):
    """Snapshot of a repository as seen in one year's contribution data."""

    url: str
    name: str
    owner: str
    stargazer_count: int = Field(default=0, ge=0)
    fork_count: int = Field(default=0, ge=0)
    is_fork: bool = False
    is_archived: bool = False
    is_private: bool = False
    primary_language: str | None = None
    description: str | None = None
    created_at: datetime | None = None


class RepositoryContribution(BaseModel):
    """A repository paired with the user's commit count to it in one year."""

    commit_count: int = Field(default=0, ge=0)
    repository: Repository


class YearData(BaseModel):
    """One calendar year of a user's activity."""

    year: int
    total_commits: int = Field(default=0, ge=0)
    total_issues: int = Field(default=0, ge=0)
    total_prs: int = Field(default=0, ge=0)
    total_reviews: int = Field(default=0, ge=0)
    owned_repos: list[RepositoryContribution] = Field(default_factory=list)
    contributions: list[RepositoryContribution] = Field(default_factory=list)

    @property
    def all_repos(self) -> list[RepositoryContribution]:
        """Owned repositories followed by contributed repositories."""
        return [*self.owned_repos, *self.contributions]


# A user's analyzed history, one entry per year with recorded activity.
Timeline = list[YearData]


# --- Metric Levels ---


class ActivityLevel(str, Enum):
    """Activity labels, lowest first."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class ImpactLevel(str, Enum):
    """Impact labels, lowest first."""

    MINIMAL = "Minimal"
    LOW = "Low"
    MODERATE = "Moderate"
    STRONG = "Strong"
    EXCEPTIONAL = "Exceptional"


class QualityLevel(str, Enum):
    """Quality labels, lowest first."""

    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    EXCELLENT = "Excellent"


class GrowthLevel(str, Enum):
    """Growth labels, lowest first."""

    RAPID_DECLINE = "Rapid Decline"
    DECLINING = "Declining"
    STABLE = "Stable"
    GROWING = "Growing"
    RAPID_GROWTH = "Rapid Growth"


class ConsistencyLevel(str, Enum):
    """Consistency labels, lowest first."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    EXCELLENT = "Excellent"


class CollaborationLevel(str, Enum):
    """Collaboration labels, lowest first."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    EXCELLENT = "Excellent"


# --- Metric Results ---


class MetricResult(BaseModel):
    """Fields shared by every calculator result.

    Subclasses narrow ``level``, ``breakdown`` and ``details`` to the
    metric's own types.
    """

    score: int
    level: str
    breakdown: BaseModel
    details: BaseModel

    def breakdown_total(self) -> int:
        """Sum of all breakdown components."""
        return sum(self.breakdown.model_dump().values())


class ActivityBreakdown(BaseModel):
    recent_commits: int = 0  # 0-40
    consistency: int = 0  # 0-30
    diversity: int = 0  # 0-30


class ActivityDetails(BaseModel):
    last_3_months_commits: int = 0
    active_months: int = 0  # active years inside the 12-month window
    unique_repos: int = 0


class ActivityMetric(MetricResult):
    """Recent volume, presence and repository diversity."""

    score: int = Field(default=0, ge=0, le=100)
    level: ActivityLevel = ActivityLevel.LOW
    breakdown: ActivityBreakdown = Field(default_factory=ActivityBreakdown)
    details: ActivityDetails = Field(default_factory=ActivityDetails)


class ImpactBreakdown(BaseModel):
    stars: int = 0  # 0-35
    forks: int = 0  # 0-20
    contributors: int = 0  # 0-15
    reach: int = 0  # 0-20
    engagement: int = 0  # 0-10


class ImpactDetails(BaseModel):
    total_stars: int = 0
    total_forks: int = 0
    total_watchers: int = 0  # not available in yearly contribution data
    total_prs: int = 0
    total_issues: int = 0


class ImpactMetric(MetricResult):
    """Reach of the user's repositories."""

    score: int = Field(default=0, ge=0, le=100)
    level: ImpactLevel = ImpactLevel.MINIMAL
    breakdown: ImpactBreakdown = Field(default_factory=ImpactBreakdown)
    details: ImpactDetails = Field(default_factory=ImpactDetails)


class QualityBreakdown(BaseModel):
    originality: int = 0  # 0-30
    documentation: int = 0  # 0-25
    ownership: int = 0  # 0-20
    maturity: int = 0  # 0-15
    stack: int = 0  # 0-10


class QualityDetails(BaseModel):
    non_fork_repos: int = 0
    total_owned_repos: int = 0
    documented_repos: int = 0
    owned_repos_count: int = 0
    contributed_repos_count: int = 0
    avg_repo_age: float = 0.0
    unique_languages: int = 0


class QualityMetric(MetricResult):
    """Originality, documentation, ownership, maturity and stack breadth."""

    score: int = Field(default=0, ge=0, le=100)
    level: QualityLevel = QualityLevel.WEAK
    breakdown: QualityBreakdown = Field(default_factory=QualityBreakdown)
    details: QualityDetails = Field(default_factory=QualityDetails)


class GrowthBreakdown(BaseModel):
    activity_growth: int = 0  # -40..40
    impact_growth: int = 0  # -30..30
    skills_growth: int = 0  # 0..30


class GrowthDetails(BaseModel):
    commits_yoy_change: float = 0.0
    stars_yoy_change: float = 0.0
    forks_yoy_change: float = 0.0
    new_languages: int = 0
    previous_year_commits: int = 0
    current_year_commits: int = 0
    previous_year_stars: int = 0
    current_year_stars: int = 0
    previous_year_forks: int = 0
    current_year_forks: int = 0


class GrowthMetric(MetricResult):
    """Signed year-over-year trend."""

    score: int = Field(default=0, ge=-100, le=100)
    level: GrowthLevel = GrowthLevel.STABLE
    breakdown: GrowthBreakdown = Field(default_factory=GrowthBreakdown)
    details: GrowthDetails = Field(default_factory=GrowthDetails)


class ConsistencyBreakdown(BaseModel):
    regularity: int = 0  # 0-50
    streak: int = 0  # 0-30
    recency: int = 0  # 0-20


class ConsistencyDetails(BaseModel):
    active_years: int = 0
    total_years: int = 0
    longest_streak: int = 0
    coefficient_of_variation: float = 0.0


class ConsistencyMetric(MetricResult):
    """Regularity of activity over the years."""

    score: int = Field(default=0, ge=0, le=100)
    level: ConsistencyLevel = ConsistencyLevel.LOW
    breakdown: ConsistencyBreakdown = Field(default_factory=ConsistencyBreakdown)
    details: ConsistencyDetails = Field(default_factory=ConsistencyDetails)


class CollaborationBreakdown(BaseModel):
    contribution_ratio: int = 0  # 0-50
    diversity: int = 0  # 0-30
    engagement: int = 0  # 0-20


class CollaborationDetails(BaseModel):
    owned_repos_count: int = 0
    contributed_repos_count: int = 0
    contribution_percentage: int = 0
    unique_orgs_contributed: int = 0


class CollaborationMetric(MetricResult):
    """Work on other people's repositories."""

    score: int = Field(default=0, ge=0, le=100)
    level: CollaborationLevel = CollaborationLevel.LOW
    breakdown: CollaborationBreakdown = Field(default_factory=CollaborationBreakdown)
    details: CollaborationDetails = Field(default_factory=CollaborationDetails)


# --- Category Models ---


class MetricKey(str, Enum):
    """Metrics that take part in category aggregation."""

    ACTIVITY = "activity"
    IMPACT = "impact"
    QUALITY = "quality"
    CONSISTENCY = "consistency"
    AUTHENTICITY = "authenticity"
    COLLABORATION = "collaboration"


class MetricCategory(str, Enum):
    """Dashboard categories, each built from two metrics."""

    OUTPUT = "OUTPUT"
    QUALITY = "QUALITY"
    TRUST = "TRUST"


class MetricData(BaseModel):
    """Shape-only view of a metric, as consumed by the aggregator."""

    score: float
    level: str
    breakdown: dict[str, float] | None = None


class KeyedMetricData(MetricData):
    """MetricData tagged with the key it was taken from."""

    key: MetricKey


class AllMetricsData(BaseModel):
    """Every metric the category aggregator can reference."""

    activity: MetricData
    impact: MetricData
    quality: MetricData
    consistency: MetricData
    authenticity: MetricData
    collaboration: MetricData


class CategoryMetrics(BaseModel):
    first: KeyedMetricData
    second: KeyedMetricData


class CategoryScore(BaseModel):
    """Score of one category with the two metrics behind it."""

    category: MetricCategory
    score: int
    metrics: CategoryMetrics


class ProfileScores(BaseModel):
    """Complete scoring of one timeline."""

    activity: ActivityMetric
    impact: ImpactMetric
    quality: QualityMetric
    growth: GrowthMetric
    consistency: ConsistencyMetric
    collaboration: CollaborationMetric
    metrics: AllMetricsData
    categories: list[CategoryScore]
    evaluated_at: datetime


# --- Year Insight Models ---


class YearBadgeType(str, Enum):
    """Badge assigned to a single year of activity."""

    PEAK = "peak"
    GROWTH = "growth"
    STABLE = "stable"
    START = "start"
    DECLINE = "decline"
    INACTIVE = "inactive"


class YearBadge(BaseModel):
    type: YearBadgeType
    emoji: str
    label: str
    description: str


class YearInsight(BaseModel):
    text: str
    highlight: str | None = None


class YearAnalysis(BaseModel):
    """Badge, insight and relative standing of one year."""

    badge: YearBadge
    insight: YearInsight | None = None
    percent_of_total: int = 0
    percent_of_peak: int = 0
    yoy_change: float | None = None
    rank: int  # 1 = most commits


class YearMetrics(BaseModel):
    commits: int = 0
    prs: int = 0
    repos: int = 0


class CareerSummary(BaseModel):
    """Totals across the whole timeline."""

    total_commits: int = 0
    total_prs: int = 0
    years_active: int = 0
    total_years: int = 0
    start_year: int | None = None
    unique_repos: int = 0


class MetricYearData(BaseModel):
    """Scores of one year evaluated on its own."""

    year: int
    activity: int
    impact: int
    quality: int
    growth: int

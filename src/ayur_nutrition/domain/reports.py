"""Domain models for recommendation reports."""

from dataclasses import dataclass
from datetime import datetime

from ayur_nutrition.domain.catalog import CategoryRecommendation
from ayur_nutrition.domain.profile import UserProfile


@dataclass(frozen=True)
class ReportSummary:
    """Counts per tier and mean match score."""

    total_categories: int
    high_priority_count: int
    medium_priority_count: int
    low_priority_count: int
    average_match_score: float


@dataclass(frozen=True)
class RecommendationReport:
    """Packaged recommendations ready for external formatters."""

    profile: UserProfile
    recommendations: tuple[CategoryRecommendation, ...]
    summary: ReportSummary
    key_insights: tuple[str, ...]
    action_items: tuple[str, ...]
    generated_at: datetime
    subject_id: str | None = None
    subject_name: str | None = None

"""Recommendation report assembly."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from ayur_nutrition.domain.catalog import CategoryRecommendation, PriorityTier
from ayur_nutrition.domain.profile import ActivityLevel, UserProfile
from ayur_nutrition.domain.reports import RecommendationReport, ReportSummary

ADULT_AGE = 18
SENIOR_AGE = 60

MONITOR_ACTION = "Monitor your body's response to dietary changes"
CONSULT_ACTION = "Consult with an Ayurvedic practitioner for personalized guidance"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ReportBuilder:
    """Packages ranked recommendations into a report."""

    clock: Callable[[], datetime] = _utc_now

    def build_report(
        self,
        profile: UserProfile,
        recommendations: Sequence[CategoryRecommendation],
        *,
        subject_id: str | None = None,
        subject_name: str | None = None,
    ) -> RecommendationReport:
        """Summarize recommendations and derive insights and action items."""
        return RecommendationReport(
            profile=profile,
            recommendations=tuple(recommendations),
            summary=summarize(recommendations),
            key_insights=tuple(key_insights(profile)),
            action_items=tuple(action_items(recommendations)),
            generated_at=self.clock(),
            subject_id=subject_id,
            subject_name=subject_name,
        )


def summarize(recommendations: Sequence[CategoryRecommendation]) -> ReportSummary:
    """Count recommendations per tier and average their scores."""
    total = len(recommendations)
    average = 0.0
    if total:
        average = sum(rec.match_score for rec in recommendations) / total
    return ReportSummary(
        total_categories=total,
        high_priority_count=_count_tier(recommendations, PriorityTier.HIGH),
        medium_priority_count=_count_tier(recommendations, PriorityTier.MEDIUM),
        low_priority_count=_count_tier(recommendations, PriorityTier.LOW),
        average_match_score=average,
    )


def key_insights(profile: UserProfile) -> list[str]:
    """Return template insights for constitution, age, activity and season."""
    insights = [
        f"Based on your {profile.constitution.value} constitution, "
        "focus on balancing foods is recommended."
    ]
    if profile.age < ADULT_AGE:
        insights.append(
            "Growing years require extra attention to protein and calcium-rich foods."
        )
    elif profile.age > SENIOR_AGE:
        insights.append("Focus on easily digestible, warm foods for optimal health.")

    if profile.activity_level == ActivityLevel.VERY_ACTIVE:
        insights.append(
            "High activity levels require energy-dense foods and proper hydration."
        )
    elif profile.activity_level == ActivityLevel.SEDENTARY:
        insights.append("Lighter meals and metabolism-boosting foods are beneficial.")

    insights.append(
        f"Current {profile.current_season.value} season recommendations "
        "emphasize appropriate foods for the climate."
    )
    return insights


def action_items(recommendations: Sequence[CategoryRecommendation]) -> list[str]:
    """Return action items drawn from the best high-priority recommendation."""
    items: list[str] = []
    top = next(
        (rec for rec in recommendations if rec.priority == PriorityTier.HIGH), None
    )
    if top is not None:
        items.append(f"Start with {top.axis.label} recommendations first")
        items.append(
            f"Include these foods daily: {', '.join(top.recommended_items[:3])}"
        )
        items.append(f"Avoid: {', '.join(top.avoid_items[:2])}")
    items.append(MONITOR_ACTION)
    items.append(CONSULT_ACTION)
    return items


def _count_tier(
    recommendations: Sequence[CategoryRecommendation], tier: PriorityTier
) -> int:
    return sum(1 for rec in recommendations if rec.priority == tier)

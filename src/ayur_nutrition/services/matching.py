"""Profile-to-category matching with axis-specific scoring."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ayur_nutrition.domain.catalog import (
    CategoryAxis,
    CategoryRecommendation,
    CategoryRecord,
    PriorityTier,
)
from ayur_nutrition.domain.profile import Gender, UserProfile
from ayur_nutrition.services.keywords import KeywordTable

_logger = logging.getLogger(__name__)

RELEVANCE_FLOOR = 0.3
HIGH_PRIORITY_SCORE = 0.8
MEDIUM_PRIORITY_SCORE = 0.6

ENVIRONMENTAL_SCORE = 0.6
LIFESTYLE_DEFAULT_SCORE = 0.3
PREGNANCY_GENERIC_SCORE = 0.8
WOMENS_HEALTH_SCORE = 0.7
WOMEN_GENERAL_SCORE = 0.5


@dataclass(frozen=True)
class AgeBracket:
    """Inclusive age range named by a catalog sub-label."""

    label: str
    min_age: int
    max_age: int

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


AGE_BRACKETS: tuple[AgeBracket, ...] = (
    AgeBracket("Infants", 0, 1),
    AgeBracket("Toddlers", 1, 3),
    AgeBracket("Children", 4, 12),
    AgeBracket("Teenagers", 13, 18),
    AgeBracket("Young Adults", 19, 35),
    AgeBracket("Middle Age", 40, 60),
    AgeBracket("Elderly", 60, 120),
)

OCCUPATION_KEYWORDS = KeywordTable.from_mapping(
    {
        "Software Engineers": ["developer", "programmer", "engineer", "tech", "IT"],
        "Athletes": ["athlete", "sports", "trainer", "fitness"],
        "Teachers": ["teacher", "educator", "professor", "instructor"],
        "Healthcare Workers": ["doctor", "nurse", "medical", "healthcare"],
        "Drivers": ["driver", "transport", "delivery"],
        "Manual Laborers": ["laborer", "construction", "factory", "manual"],
        "Night Shift Workers": ["night shift", "security", "guard"],
        "Frequent Travelers": ["sales", "consultant", "travel", "business"],
        "Chefs": ["chef", "cook", "culinary", "restaurant"],
        "Artists": ["artist", "creative", "designer", "musician"],
        "Emergency Responders": ["emergency", "firefighter", "paramedic", "police"],
        "Farmers": ["farmer", "agriculture", "farming"],
        "Pilots": ["pilot", "aviation", "airline"],
        "Surgeons": ["surgeon", "surgery", "medical"],
    }
)

FITNESS_ACTIVITY_LEVELS = KeywordTable.from_mapping(
    {
        "Bodybuilders": ["very-active"],
        "Athletes": ["active", "very-active"],
        "Yoga Practitioners": ["moderate", "active"],
        "Runners": ["active", "very-active"],
        "Cyclists": ["active", "very-active"],
    }
)

WOMENS_HEALTH_KEYWORDS = ("menstrual", "pcos", "fertility", "thyroid")

_AxisScorer = Callable[[str, UserProfile], float]


def priority_tier(score: float) -> PriorityTier:
    """Bucket a match score into a priority tier."""
    if score >= HIGH_PRIORITY_SCORE:
        return PriorityTier.HIGH
    if score >= MEDIUM_PRIORITY_SCORE:
        return PriorityTier.MEDIUM
    return PriorityTier.LOW


def age_match(sub_label: str, profile: UserProfile) -> float:
    """1.0 when a bracket named in the label contains the profile's age."""
    lowered = sub_label.lower()
    for bracket in AGE_BRACKETS:
        if bracket.label.lower() in lowered and bracket.contains(profile.age):
            return 1.0
    return 0.0


def women_specific_match(sub_label: str, profile: UserProfile) -> float:
    """Score life-stage and women's-health labels for female profiles."""
    if profile.gender != Gender.FEMALE:
        return 0.0
    lowered = sub_label.lower()
    if profile.is_pregnant and "pregnancy" in lowered:
        stage = profile.pregnancy_stage
        if stage is not None and stage.phrase in lowered:
            return 1.0
        return PREGNANCY_GENERIC_SCORE
    if profile.is_lactating and "lactation" in lowered:
        return 1.0
    if profile.is_menopausal and "menopause" in lowered:
        return 1.0
    if any(keyword in lowered for keyword in WOMENS_HEALTH_KEYWORDS):
        return WOMENS_HEALTH_SCORE
    return WOMEN_GENERAL_SCORE


def occupation_match(sub_label: str, profile: UserProfile) -> float:
    """1.0 when the occupation contains a keyword of the named occupation."""
    if OCCUPATION_KEYWORDS.any_keyword_in(sub_label, profile.occupation):
        return 1.0
    return 0.0


def condition_match(sub_label: str, profile: UserProfile) -> float:
    """1.0 when a health condition and the label overlap as substrings."""
    lowered = sub_label.lower()
    head = lowered.split(" - ")[0]
    for condition in profile.health_conditions:
        condition_lower = condition.lower()
        if condition_lower in lowered or head in condition_lower:
            return 1.0
    return 0.0


def seasonal_match(sub_label: str, profile: UserProfile) -> float:
    """1.0 when the label mentions the current season."""
    if profile.current_season.value in sub_label.lower():
        return 1.0
    return 0.0


def fitness_match(sub_label: str, profile: UserProfile) -> float:
    """1.0 when a named fitness group covers the activity level."""
    if FITNESS_ACTIVITY_LEVELS.lists_value(sub_label, profile.activity_level.value):
        return 1.0
    return 0.0


def environmental_match(sub_label: str, profile: UserProfile) -> float:
    """Flat baseline relevance for every profile."""
    return ENVIRONMENTAL_SCORE


def lifestyle_match(sub_label: str, profile: UserProfile) -> float:
    """1.0 when the label mentions a dietary restriction, else a flat default."""
    lowered = sub_label.lower()
    for restriction in profile.dietary_restrictions:
        if restriction.lower() in lowered:
            return 1.0
    return LIFESTYLE_DEFAULT_SCORE


AXIS_SCORERS: dict[CategoryAxis, _AxisScorer] = {
    CategoryAxis.AGE: age_match,
    CategoryAxis.GENDER: women_specific_match,
    CategoryAxis.OCCUPATION: occupation_match,
    CategoryAxis.CONDITION: condition_match,
    CategoryAxis.SEASONAL: seasonal_match,
    CategoryAxis.FITNESS: fitness_match,
    CategoryAxis.ENVIRONMENTAL: environmental_match,
    CategoryAxis.LIFESTYLE: lifestyle_match,
}


@dataclass
class ProfileMatcher:
    """Ranks catalog records by relevance to a user profile."""

    debug: bool = False

    def score_category(self, record: CategoryRecord, profile: UserProfile) -> float:
        """Return the 0.0-1.0 match score of one record."""
        scorer = AXIS_SCORERS.get(record.axis)
        if scorer is None:
            raise ValueError(
                f"Catalog record {record.record_id!r} has unsupported axis "
                f"{record.axis!r}"
            )
        if not record.sub_label or not record.sub_label.strip():
            raise ValueError(f"Catalog record {record.record_id!r} has no sub-label")
        # One axis per record, so the mean has a single contributor.
        factors = [scorer(record.sub_label, profile)]
        return min(sum(factors) / len(factors), 1.0)

    def match_profile(
        self, profile: UserProfile, catalog: Iterable[CategoryRecord]
    ) -> list[CategoryRecommendation]:
        """Return relevant records as recommendations, best match first."""
        recommendations: list[CategoryRecommendation] = []
        scanned = 0
        for record in catalog:
            scanned += 1
            score = round(self.score_category(record, profile), 2)
            if score <= RELEVANCE_FLOOR:
                continue
            recommendations.append(_recommend(record, score))
        recommendations.sort(key=lambda item: item.match_score, reverse=True)
        if self.debug:
            _logger.info(
                "Profile match: scanned=%s emitted=%s", scanned, len(recommendations)
            )
        return recommendations


def _recommend(record: CategoryRecord, score: float) -> CategoryRecommendation:
    return CategoryRecommendation(
        record_id=record.record_id,
        axis=record.axis,
        sub_label=record.sub_label,
        recommended_items=record.recommended_items,
        avoid_items=record.avoid_items,
        rationale=record.rationale,
        meal_suggestions=record.meal_suggestions,
        special_notes=record.special_notes,
        match_score=score,
        priority=priority_tier(score),
    )

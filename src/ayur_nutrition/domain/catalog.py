"""Domain models for the dietary guidance catalog."""

from dataclasses import dataclass
from enum import StrEnum


class CategoryAxis(StrEnum):
    """Classification axis a catalog record is tagged with."""

    AGE = "age"
    GENDER = "gender"
    OCCUPATION = "occupation"
    CONDITION = "condition"
    SEASONAL = "seasonal"
    FITNESS = "fitness"
    ENVIRONMENTAL = "environmental"
    LIFESTYLE = "lifestyle"

    @property
    def label(self) -> str:
        """Display label used by the guidance catalog documents."""
        return AXIS_LABELS[self]


AXIS_LABELS: dict[CategoryAxis, str] = {
    CategoryAxis.AGE: "Age-Specific",
    CategoryAxis.GENDER: "Women-Specific",
    CategoryAxis.OCCUPATION: "Occupation-Based",
    CategoryAxis.CONDITION: "Condition-Based",
    CategoryAxis.SEASONAL: "Seasonal-Based",
    CategoryAxis.FITNESS: "Fitness-Based",
    CategoryAxis.ENVIRONMENTAL: "Environmental-Based",
    CategoryAxis.LIFESTYLE: "Lifestyle-Based",
}


class PriorityTier(StrEnum):
    """Priority bucket derived from a match score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class CategoryRecord:
    """Dietary guidance bundle tagged with an axis and a sub-label."""

    record_id: str
    axis: CategoryAxis
    sub_label: str
    recommended_items: tuple[str, ...]
    avoid_items: tuple[str, ...]
    rationale: str
    meal_suggestions: str
    special_notes: str


@dataclass(frozen=True)
class CategoryRecommendation:
    """A catalog record matched against a profile."""

    record_id: str
    axis: CategoryAxis
    sub_label: str
    recommended_items: tuple[str, ...]
    avoid_items: tuple[str, ...]
    rationale: str
    meal_suggestions: str
    special_notes: str
    match_score: float
    priority: PriorityTier

"""Food reference records and dish aggregation results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum


class Virya(StrEnum):
    """Thermal potency of a food."""

    HEATING = "heating"
    COOLING = "cooling"
    NEUTRAL = "neutral"


class Dosha(StrEnum):
    """Physiological principle tracked per food and per profile."""

    VATA = "vata"
    PITTA = "pitta"
    KAPHA = "kapha"


class DoshaEffect(StrEnum):
    """Effect a single food has on one dosha."""

    BALANCING = "balancing"
    AGGRAVATING = "aggravating"
    PACIFYING = "pacifying"
    NEUTRAL = "neutral"


class DoshaTendency(StrEnum):
    """Dominant effect of a composed dish on one dosha."""

    INCREASES = "increases"
    DECREASES = "decreases"
    BALANCES = "balances"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrients per declared serving of a food."""

    calories: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    potassium: float = 0.0
    calcium: float = 0.0
    iron: float = 0.0
    vitamins: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class AyurvedicProperties:
    """Ayurvedic tags of a food."""

    rasa: tuple[str, ...]
    virya: Virya
    vipaka: str
    dosha_effect: Mapping[Dosha, DoshaEffect]
    constitutions: tuple[str, ...] = ()
    seasons: tuple[str, ...] = ()
    time_of_day: tuple[str, ...] = ()


@dataclass(frozen=True)
class FoodItem:
    """Immutable food reference record."""

    id: str
    name: str
    nutrients: NutrientProfile
    ayurvedic: AyurvedicProperties
    serving_size: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class IngredientRef:
    """Ingredient line of a dish as authored by a caller."""

    name: str
    quantity: float
    unit: str
    food_id: str | None = None


@dataclass(frozen=True)
class ServingSelection:
    """Food picked by id with a serving multiplier."""

    food_id: str
    quantity: float


@dataclass(frozen=True)
class NutrientTotals:
    """Rounded nutrient totals of a dish or meal."""

    calories: float
    protein: float
    carbohydrates: float
    fat: float
    fiber: float
    sugar: float
    sodium: float
    potassium: float
    calcium: float
    iron: float
    vitamins: Mapping[str, float]


@dataclass(frozen=True)
class AyurvedicSignature:
    """Aggregate Ayurvedic properties of a composed dish."""

    primary_rasa: tuple[str, ...]
    virya: Virya
    vipaka: str
    dosha_effect: Mapping[Dosha, DoshaTendency]


@dataclass(frozen=True)
class IngredientValidation:
    """Ingredients split by whether they strictly resolve."""

    valid: list[IngredientRef]
    invalid: list[IngredientRef]


@dataclass(frozen=True)
class MacroShare:
    """Grams of a macronutrient and its share of all macro grams."""

    grams: float
    percentage: int


@dataclass(frozen=True)
class NutritionalAnalysis:
    """Macro breakdown and micronutrient highlights of a dish."""

    calories: float
    protein: MacroShare
    carbohydrates: MacroShare
    fat: MacroShare
    micronutrient_highlights: list[str]


@dataclass(frozen=True)
class FoodScore:
    """Suitability of a food for a profile."""

    food_id: str
    name: str
    score: float

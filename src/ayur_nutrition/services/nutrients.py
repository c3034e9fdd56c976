"""Nutrient and Ayurvedic property aggregation for composed dishes."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, fields

from ayur_nutrition.domain.foods import (
    AyurvedicSignature,
    Dosha,
    DoshaEffect,
    DoshaTendency,
    FoodItem,
    IngredientRef,
    IngredientValidation,
    MacroShare,
    NutrientProfile,
    NutrientTotals,
    NutritionalAnalysis,
    ServingSelection,
    Virya,
)
from ayur_nutrition.services.reference_data import FoodRecordStore

_logger = logging.getLogger(__name__)

# Fraction of a declared serving per unit.
UNIT_FACTORS: dict[str, float] = {
    "cup": 1.0,
    "tbsp": 1 / 16,
    "tsp": 1 / 48,
    "ml": 1 / 240,
    "liter": 1000 / 240,
    "g": 1 / 100,
    "kg": 10.0,
    "oz": 28.35 / 100,
    "lb": 453.6 / 100,
    "piece": 0.1,
    "pieces": 0.1,
    "clove": 0.05,
    "cloves": 0.05,
    "inch": 0.1,
    "small": 0.3,
    "medium": 0.5,
    "large": 0.8,
}

DEFAULT_VIPAKA = "sweet"

# Earlier entries win ties.
_TENDENCY_PRIORITY = (
    DoshaTendency.DECREASES,
    DoshaTendency.BALANCES,
    DoshaTendency.INCREASES,
    DoshaTendency.NEUTRAL,
)

_EFFECT_TENDENCY = {
    DoshaEffect.BALANCING: DoshaTendency.BALANCES,
    DoshaEffect.AGGRAVATING: DoshaTendency.INCREASES,
    DoshaEffect.PACIFYING: DoshaTendency.DECREASES,
    DoshaEffect.NEUTRAL: DoshaTendency.NEUTRAL,
}

_SCALAR_FIELDS = tuple(
    item.name for item in fields(NutrientProfile) if item.name != "vitamins"
)

_FIBER_HIGHLIGHT_G = 5
_CALCIUM_HIGHLIGHT_MG = 100
_IRON_HIGHLIGHT_MG = 2
_POTASSIUM_HIGHLIGHT_MG = 300


def portion_multiplier(quantity: float, unit: str) -> float:
    """Convert a quantity and unit into a multiple of the declared serving."""
    return quantity * UNIT_FACTORS.get(unit.strip().lower(), 1.0)


@dataclass
class NutrientAggregator:
    """Aggregates ingredient lists against the food reference store."""

    foods: FoodRecordStore
    debug: bool = False

    def aggregate_nutrients(
        self, ingredients: Iterable[IngredientRef]
    ) -> NutrientTotals:
        """Sum scaled per-serving nutrients of every resolvable ingredient."""
        totals = dict.fromkeys(_SCALAR_FIELDS, 0.0)
        vitamins: dict[str, float] = {}
        for ingredient, food in self._resolved(ingredients):
            multiplier = portion_multiplier(ingredient.quantity, ingredient.unit)
            _accumulate(totals, vitamins, food.nutrients, multiplier)
        return _build_totals(totals, vitamins, scalar_digits=2, vitamin_digits=2)

    def derive_ayurvedic_properties(
        self, ingredients: Iterable[IngredientRef]
    ) -> AyurvedicSignature:
        """Derive the dominant taste, potency and dosha effects of a dish."""
        rasa_counts: Counter[str] = Counter()
        virya_counts: Counter[Virya] = Counter()
        tendencies = {dosha: Counter[DoshaTendency]() for dosha in Dosha}

        for _, food in self._resolved(ingredients):
            props = food.ayurvedic
            rasa_counts.update(props.rasa)
            virya_counts[props.virya] += 1
            for dosha, counts in tendencies.items():
                effect = props.dosha_effect.get(dosha, DoshaEffect.NEUTRAL)
                counts[_EFFECT_TENDENCY[effect]] += 1

        # Counter keeps first-seen order and most_common sorts stably.
        primary_rasa = tuple(rasa for rasa, _ in rasa_counts.most_common(2))
        return AyurvedicSignature(
            primary_rasa=primary_rasa,
            virya=_overall_virya(virya_counts),
            vipaka=DEFAULT_VIPAKA,
            dosha_effect={
                dosha: _dominant_tendency(counts)
                for dosha, counts in tendencies.items()
            },
        )

    def validate_ingredients(
        self, ingredients: Sequence[IngredientRef]
    ) -> IngredientValidation:
        """Split ingredients by whether they resolve by id or exact name."""
        valid: list[IngredientRef] = []
        invalid: list[IngredientRef] = []
        for ingredient in ingredients:
            if self.foods.resolve_strict(ingredient) is None:
                invalid.append(ingredient)
            else:
                valid.append(ingredient)
        return IngredientValidation(valid=valid, invalid=invalid)

    def summarize_servings(
        self, selections: Iterable[ServingSelection]
    ) -> NutrientTotals:
        """Sum foods picked by id, treating quantity as a serving count."""
        totals = dict.fromkeys(_SCALAR_FIELDS, 0.0)
        vitamins: dict[str, float] = {}
        for selection in selections:
            food = self.foods.get(selection.food_id)
            if food is None:
                continue
            _accumulate(totals, vitamins, food.nutrients, selection.quantity)
        return _build_totals(totals, vitamins, scalar_digits=0, vitamin_digits=1)

    def _resolved(
        self, ingredients: Iterable[IngredientRef]
    ) -> Iterable[tuple[IngredientRef, FoodItem]]:
        for ingredient in ingredients:
            food = self.foods.resolve(ingredient)
            if food is None:
                if self.debug:
                    _logger.info("Unresolved ingredient: name=%s", ingredient.name)
                continue
            yield ingredient, food


def analyze_nutrition(totals: NutrientTotals) -> NutritionalAnalysis:
    """Return the macro breakdown and micronutrient highlights of totals."""
    macro_sum = totals.protein + totals.carbohydrates + totals.fat
    highlights: list[str] = []
    if totals.fiber >= _FIBER_HIGHLIGHT_G:
        highlights.append(f"High fiber ({totals.fiber}g)")
    if totals.calcium >= _CALCIUM_HIGHLIGHT_MG:
        highlights.append(f"Good calcium source ({totals.calcium}mg)")
    if totals.iron >= _IRON_HIGHLIGHT_MG:
        highlights.append(f"Iron rich ({totals.iron}mg)")
    if totals.potassium >= _POTASSIUM_HIGHLIGHT_MG:
        highlights.append(f"Potassium rich ({totals.potassium}mg)")
    return NutritionalAnalysis(
        calories=totals.calories,
        protein=_macro_share(totals.protein, macro_sum),
        carbohydrates=_macro_share(totals.carbohydrates, macro_sum),
        fat=_macro_share(totals.fat, macro_sum),
        micronutrient_highlights=highlights,
    )


def _macro_share(grams: float, macro_sum: float) -> MacroShare:
    if macro_sum <= 0:
        return MacroShare(grams=grams, percentage=0)
    return MacroShare(grams=grams, percentage=round(grams / macro_sum * 100))


def _accumulate(
    totals: dict[str, float],
    vitamins: dict[str, float],
    nutrients: NutrientProfile,
    multiplier: float,
) -> None:
    for name in _SCALAR_FIELDS:
        totals[name] += getattr(nutrients, name) * multiplier
    for vitamin, amount in nutrients.vitamins.items():
        vitamins[vitamin] = vitamins.get(vitamin, 0.0) + amount * multiplier


def _build_totals(
    totals: dict[str, float],
    vitamins: dict[str, float],
    *,
    scalar_digits: int,
    vitamin_digits: int,
) -> NutrientTotals:
    return NutrientTotals(
        **{name: round(value, scalar_digits) for name, value in totals.items()},
        vitamins={
            name: round(value, vitamin_digits) for name, value in vitamins.items()
        },
    )


def _overall_virya(counts: Counter[Virya]) -> Virya:
    heating = counts[Virya.HEATING]
    cooling = counts[Virya.COOLING]
    if heating > cooling:
        return Virya.HEATING
    if cooling > heating:
        return Virya.COOLING
    return Virya.NEUTRAL


def _dominant_tendency(counts: Counter[DoshaTendency]) -> DoshaTendency:
    top = max(counts[tendency] for tendency in _TENDENCY_PRIORITY)
    for tendency in _TENDENCY_PRIORITY:
        if counts[tendency] == top:
            return tendency
    return DoshaTendency.NEUTRAL

"""Food suitability scoring for a profile's constitution and season."""

from collections.abc import Iterable
from dataclasses import dataclass

from ayur_nutrition.domain.foods import Dosha, DoshaEffect, FoodItem, FoodScore
from ayur_nutrition.domain.profile import Constitution, UserProfile

CONSTITUTION_WEIGHT = 0.4
TRIDOSHIC_WEIGHT = 0.3
SEASON_WEIGHT = 0.3
ALL_SEASONS_WEIGHT = 0.25
DOSHA_BALANCING_WEIGHT = 0.2
DOSHA_NEUTRAL_WEIGHT = 0.1
# Health conditions are not modelled per food yet; every food gets the share.
CONDITION_BASELINE = 0.1


def primary_dosha(constitution: Constitution) -> Dosha | None:
    """Return the leading dosha of a constitution, if it has one."""
    if constitution == Constitution.TRIDOSHIC:
        return None
    return Dosha(constitution.value.split("-")[0])


@dataclass
class FoodScorer:
    """Scores foods against a profile with fixed weights."""

    def score_food(self, food: FoodItem, profile: UserProfile) -> float:
        """Return a 0.0-1.0 suitability score."""
        props = food.ayurvedic
        score = 0.0

        constitutions = {value.lower() for value in props.constitutions}
        if profile.constitution.value in constitutions:
            score += CONSTITUTION_WEIGHT
        elif Constitution.TRIDOSHIC.value in constitutions:
            score += TRIDOSHIC_WEIGHT

        seasons = {value.lower() for value in props.seasons}
        if profile.current_season.value in seasons:
            score += SEASON_WEIGHT
        elif "all" in seasons:
            score += ALL_SEASONS_WEIGHT

        dosha = primary_dosha(profile.constitution)
        if dosha is not None:
            effect = props.dosha_effect.get(dosha, DoshaEffect.NEUTRAL)
            if effect == DoshaEffect.BALANCING:
                score += DOSHA_BALANCING_WEIGHT
            elif effect == DoshaEffect.NEUTRAL:
                score += DOSHA_NEUTRAL_WEIGHT

        score += CONDITION_BASELINE
        return round(score, 2)

    def rank_foods(
        self, profile: UserProfile, foods: Iterable[FoodItem], limit: int = 10
    ) -> list[FoodScore]:
        """Return the best-suited foods, highest score first."""
        scored = [
            FoodScore(
                food_id=food.id,
                name=food.name,
                score=self.score_food(food, profile),
            )
            for food in foods
        ]
        scored.sort(key=lambda item: item.score, reverse=True)
        return scored[:limit]

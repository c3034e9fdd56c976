"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from ayur_nutrition.domain.foods import IngredientRef, ServingSelection
from ayur_nutrition.domain.profile import UserProfile


class IngredientPayload(BaseModel):
    """Ingredient line of a dish."""

    name: str
    quantity: float = Field(ge=0)
    unit: str
    id: str | None = None

    def to_ref(self) -> IngredientRef:
        """Convert to the engine's ingredient reference."""
        return IngredientRef(
            name=self.name, quantity=self.quantity, unit=self.unit, food_id=self.id
        )


class RecipeAnalysisRequest(BaseModel):
    """Ingredient list to aggregate."""

    ingredients: list[IngredientPayload]


class ServingPayload(BaseModel):
    """Food picked by id with a serving count."""

    food_id: str
    quantity: float = Field(ge=0)

    def to_selection(self) -> ServingSelection:
        """Convert to the engine's serving selection."""
        return ServingSelection(food_id=self.food_id, quantity=self.quantity)


class ServingSummaryRequest(BaseModel):
    """Foods picked for a meal."""

    selections: list[ServingPayload]


class ReportRequest(BaseModel):
    """Profile to build a recommendation report for."""

    profile: UserProfile
    subject_id: str | None = None
    subject_name: str | None = None


class FoodScoresRequest(BaseModel):
    """Profile to rank foods for."""

    profile: UserProfile
    limit: int = Field(default=10, ge=1, le=100)

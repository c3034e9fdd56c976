"""Recipe and food endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from ayur_nutrition.api.schemas import (
    FoodScoresRequest,
    RecipeAnalysisRequest,
    ServingSummaryRequest,
)
from ayur_nutrition.services.nutrients import analyze_nutrition

if TYPE_CHECKING:
    from ayur_nutrition.containers import AppContainer

router = APIRouter(tags=["nutrition"])


@router.post("/recipes/analysis")
async def analyze_recipe(
    payload: RecipeAnalysisRequest, request: Request
) -> dict[str, object]:
    """Aggregate nutrients and Ayurvedic properties of an ingredient list."""
    container: AppContainer = request.app.state.container
    aggregator = container.nutrient_aggregator
    ingredients = [item.to_ref() for item in payload.ingredients]
    totals = aggregator.aggregate_nutrients(ingredients)
    return {
        "nutrition": totals,
        "ayurvedic": aggregator.derive_ayurvedic_properties(ingredients),
        "analysis": analyze_nutrition(totals),
        "validation": aggregator.validate_ingredients(ingredients),
    }


@router.post("/foods/summary")
async def summarize_foods(
    payload: ServingSummaryRequest, request: Request
) -> dict[str, object]:
    """Sum nutrients of foods picked by id."""
    container: AppContainer = request.app.state.container
    selections = [item.to_selection() for item in payload.selections]
    return {"nutrition": container.nutrient_aggregator.summarize_servings(selections)}


@router.post("/foods/scores")
async def score_foods(
    payload: FoodScoresRequest, request: Request
) -> dict[str, object]:
    """Rank known foods for a profile."""
    container: AppContainer = request.app.state.container
    scores = container.food_scorer.rank_foods(
        payload.profile, container.foods, limit=payload.limit
    )
    return {"foods": scores}

"""Dependency container wiring for the application."""

from dataclasses import dataclass

from ayur_nutrition.adapters.json_reference_repository import JsonReferenceRepository
from ayur_nutrition.config import Settings
from ayur_nutrition.services.food_scoring import FoodScorer
from ayur_nutrition.services.matching import ProfileMatcher
from ayur_nutrition.services.nutrients import NutrientAggregator
from ayur_nutrition.services.reference_data import (
    CatalogStore,
    FoodRecordStore,
    ReferenceRepository,
)
from ayur_nutrition.services.reports import ReportBuilder


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: CatalogStore
    foods: FoodRecordStore
    nutrient_aggregator: NutrientAggregator
    profile_matcher: ProfileMatcher
    food_scorer: FoodScorer
    report_builder: ReportBuilder


def build_container(
    settings: Settings | None = None,
    repository: ReferenceRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_repository = repository or JsonReferenceRepository(
        catalog_path=resolved_settings.catalog_path,
        food_database_path=resolved_settings.food_database_path,
    )
    catalog = resolved_repository.load_catalog()
    foods = resolved_repository.load_foods()
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        foods=foods,
        nutrient_aggregator=NutrientAggregator(
            foods=foods, debug=resolved_settings.debug
        ),
        profile_matcher=ProfileMatcher(debug=resolved_settings.debug),
        food_scorer=FoodScorer(),
        report_builder=ReportBuilder(),
    )

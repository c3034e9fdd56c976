"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest

from ayur_nutrition.config import Settings
from ayur_nutrition.containers import AppContainer, build_container
from ayur_nutrition.domain.catalog import CategoryAxis, CategoryRecord
from ayur_nutrition.domain.foods import (
    AyurvedicProperties,
    Dosha,
    DoshaEffect,
    FoodItem,
    NutrientProfile,
    Virya,
)
from ayur_nutrition.domain.profile import UserProfile
from ayur_nutrition.services.reference_data import (
    CatalogStore,
    FoodRecordStore,
    ReferenceRepository,
)

FIXED_NOW = datetime(2024, 6, 1, 9, 30, tzinfo=UTC)


def make_food(  # noqa: PLR0913
    food_id: str,
    name: str,
    *,
    calories: float = 100.0,
    protein: float = 1.0,
    rasa: tuple[str, ...] = ("sweet",),
    virya: Virya = Virya.NEUTRAL,
    effects: dict[Dosha, DoshaEffect] | None = None,
    vitamins: dict[str, float] | None = None,
    constitutions: tuple[str, ...] = (),
    seasons: tuple[str, ...] = (),
) -> FoodItem:
    return FoodItem(
        id=food_id,
        name=name,
        nutrients=NutrientProfile(
            calories=calories,
            protein=protein,
            carbohydrates=10.0,
            fat=2.0,
            fiber=1.0,
            sugar=0.5,
            sodium=5.0,
            potassium=50.0,
            calcium=20.0,
            iron=0.5,
            vitamins=vitamins or {},
        ),
        ayurvedic=AyurvedicProperties(
            rasa=rasa,
            virya=virya,
            vipaka="sweet",
            dosha_effect=effects or {},
            constitutions=constitutions,
            seasons=seasons,
        ),
    )


def make_record(
    axis: CategoryAxis,
    sub_label: str,
    *,
    record_id: str | None = None,
    recommended: tuple[str, ...] = ("Ghee", "Rice", "Moong dal", "Amla"),
    avoid: tuple[str, ...] = ("Fried food", "Cold drinks", "Alcohol"),
) -> CategoryRecord:
    return CategoryRecord(
        record_id=record_id or f"{axis.value}:{sub_label}",
        axis=axis,
        sub_label=sub_label,
        recommended_items=recommended,
        avoid_items=avoid,
        rationale="Because it balances the doshas",
        meal_suggestions="Warm cooked meals",
        special_notes="",
    )


def make_profile(**overrides: object) -> UserProfile:
    values: dict[str, object] = {
        "age": 28,
        "gender": "female",
        "constitution": "vata-pitta",
        "occupation": "Software Engineer",
        "health_conditions": ["Eye Strain"],
        "dietary_restrictions": [],
        "current_season": "summer",
        "activity_level": "moderate",
    }
    values.update(overrides)
    return UserProfile.model_validate(values)


@dataclass
class InMemoryReferenceRepository(ReferenceRepository):
    """In-memory reference repository for tests."""

    catalog: CatalogStore = field(default_factory=CatalogStore)
    foods: FoodRecordStore = field(default_factory=FoodRecordStore)
    loads: int = 0

    def load_catalog(self) -> CatalogStore:
        self.loads += 1
        return self.catalog

    def load_foods(self) -> FoodRecordStore:
        return self.foods


@pytest.fixture
def food_store() -> FoodRecordStore:
    return FoodRecordStore.of(
        [
            make_food(
                "food-rice",
                "Rice",
                calories=130,
                protein=2.7,
                rasa=("sweet",),
                virya=Virya.COOLING,
                effects={
                    Dosha.VATA: DoshaEffect.BALANCING,
                    Dosha.PITTA: DoshaEffect.BALANCING,
                    Dosha.KAPHA: DoshaEffect.AGGRAVATING,
                },
                vitamins={"B1": 0.02},
                constitutions=("vata", "pitta"),
                seasons=("all",),
            ),
            make_food(
                "food-ginger",
                "Ginger",
                calories=80,
                rasa=("pungent", "sweet"),
                virya=Virya.HEATING,
                effects={
                    Dosha.VATA: DoshaEffect.PACIFYING,
                    Dosha.PITTA: DoshaEffect.AGGRAVATING,
                    Dosha.KAPHA: DoshaEffect.PACIFYING,
                },
                vitamins={"C": 5.0},
                constitutions=("vata", "kapha"),
                seasons=("winter",),
            ),
            make_food(
                "food-ghee",
                "Ghee",
                calories=112,
                protein=0.0,
                rasa=("sweet",),
                virya=Virya.COOLING,
                effects={
                    Dosha.VATA: DoshaEffect.BALANCING,
                    Dosha.PITTA: DoshaEffect.BALANCING,
                    Dosha.KAPHA: DoshaEffect.AGGRAVATING,
                },
                vitamins={"A": 108.0},
                constitutions=("tridoshic",),
                seasons=("summer",),
            ),
        ]
    )


@pytest.fixture
def catalog() -> CatalogStore:
    return CatalogStore(
        (
            make_record(CategoryAxis.AGE, "Infants (0-1 years)"),
            make_record(CategoryAxis.AGE, "Young Adults (19-35 years)"),
            make_record(CategoryAxis.OCCUPATION, "Software Engineers"),
            make_record(CategoryAxis.OCCUPATION, "Teachers"),
            make_record(CategoryAxis.CONDITION, "Eye Strain - Digital Fatigue"),
            make_record(CategoryAxis.SEASONAL, "Summer Season Diet"),
            make_record(CategoryAxis.SEASONAL, "Winter Season Diet"),
            make_record(CategoryAxis.GENDER, "PCOS Management"),
            make_record(CategoryAxis.ENVIRONMENTAL, "Urban Pollution Exposure"),
            make_record(CategoryAxis.LIFESTYLE, "Night Owl Routine"),
        )
    )


@pytest.fixture
def reference_repository(
    catalog: CatalogStore, food_store: FoodRecordStore
) -> InMemoryReferenceRepository:
    return InMemoryReferenceRepository(catalog=catalog, foods=food_store)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        catalog_path=Path("unused-catalog.json"),
        food_database_path=Path("unused-foods.json"),
    )


@pytest.fixture
def container(
    settings: Settings, reference_repository: InMemoryReferenceRepository
) -> AppContainer:
    built = build_container(settings, repository=reference_repository)
    built.report_builder.clock = lambda: FIXED_NOW
    return built


@pytest.fixture
def reference_files(tmp_path: Path) -> Settings:
    catalog_path = tmp_path / "categories.json"
    foods_path = tmp_path / "foods.json"
    catalog_path.write_text(
        json.dumps(
            [
                {
                    "Category Type": "Occupation-Based",
                    "Sub-Category": "Software Engineers",
                    "Recommended Foods": "Almonds, Ghee, Leafy greens, Carrots",
                    "Avoid Foods": "Excess coffee, Fried snacks",
                    "Reason": "Screen time aggravates vata",
                    "Meal Suggestions": "Warm lunch away from the desk",
                    "Special Notes": "Take eye breaks",
                },
                {
                    "axis": "seasonal",
                    "sub_label": "Winter Season Diet",
                    "recommended_items": ["Sesame", "Jaggery"],
                    "avoid_items": ["Cold drinks"],
                },
            ]
        ),
        encoding="utf-8",
    )
    foods_path.write_text(
        json.dumps(
            [
                {
                    "id": "food-rice",
                    "name": "Rice",
                    "servingSize": "1 cup cooked",
                    "ayurvedicProperties": {
                        "rasa": ["Sweet"],
                        "virya": "cooling",
                        "vipaka": "sweet",
                        "doshaEffect": {
                            "vata": "balancing",
                            "pitta": "balancing",
                            "kapha": "aggravating",
                        },
                        "constitution": ["vata", "pitta"],
                        "season": ["all"],
                    },
                    "nutritionalInfo": {
                        "caloriesPerServing": 130,
                        "protein": 2.7,
                        "carbohydrates": 28,
                        "fat": 0.3,
                        "vitamins": {"B1": 0.02},
                    },
                }
            ]
        ),
        encoding="utf-8",
    )
    return Settings(catalog_path=catalog_path, food_database_path=foods_path)

"""Tests for the JSON reference data adapter."""

from pathlib import Path

import pytest

from ayur_nutrition.adapters.json_reference_repository import (
    JsonReferenceRepository,
    ReferenceDataError,
    parse_category,
    parse_food,
)
from ayur_nutrition.config import Settings
from ayur_nutrition.domain.catalog import CategoryAxis
from ayur_nutrition.domain.foods import Dosha, DoshaEffect, Virya


def _repository(settings: Settings) -> JsonReferenceRepository:
    return JsonReferenceRepository(
        catalog_path=settings.catalog_path,
        food_database_path=settings.food_database_path,
    )


def test_load_catalog_accepts_both_key_styles(reference_files: Settings) -> None:
    catalog = _repository(reference_files).load_catalog()

    first, second = catalog.records
    assert first.record_id == "cat-0"
    assert first.axis == CategoryAxis.OCCUPATION
    assert first.recommended_items == (
        "Almonds",
        "Ghee",
        "Leafy greens",
        "Carrots",
    )
    assert first.rationale == "Screen time aggravates vata"
    assert second.axis == CategoryAxis.SEASONAL
    assert second.avoid_items == ("Cold drinks",)
    assert second.special_notes == ""


def test_load_foods_parses_nested_documents(reference_files: Settings) -> None:
    foods = _repository(reference_files).load_foods()

    rice = foods.get("food-rice")
    assert rice is not None
    assert rice.nutrients.calories == 130
    assert rice.nutrients.fiber == 0
    assert rice.nutrients.vitamins == {"B1": 0.02}
    assert rice.ayurvedic.rasa == ("sweet",)
    assert rice.ayurvedic.virya == Virya.COOLING
    assert rice.ayurvedic.dosha_effect[Dosha.KAPHA] == DoshaEffect.AGGRAVATING
    assert rice.serving_size == "1 cup cooked"


def test_parse_category_rejects_unknown_axis() -> None:
    with pytest.raises(ReferenceDataError, match="unknown category axis"):
        parse_category({"Category Type": "Astrology", "Sub-Category": "Leo"}, 3)


def test_parse_category_rejects_missing_sub_label() -> None:
    with pytest.raises(ReferenceDataError, match="catalog row 1"):
        parse_category({"Category Type": "Age-Specific"}, 1)


def test_parse_food_accepts_effect_aliases() -> None:
    food = parse_food(
        {
            "id": "food-ginger",
            "name": "Ginger",
            "nutrients": {"calories": 80},
            "ayurvedic": {
                "rasa": ["pungent"],
                "virya": "heating",
                "dosha_effect": {"vata": "decreases", "pitta": "increases"},
            },
        }
    )

    assert food.ayurvedic.dosha_effect == {
        Dosha.VATA: DoshaEffect.PACIFYING,
        Dosha.PITTA: DoshaEffect.AGGRAVATING,
    }
    assert food.ayurvedic.vipaka == "sweet"


@pytest.mark.parametrize(
    ("row", "message"),
    [
        ({"name": "Ghee"}, "missing required field 'id'"),
        ({"id": "x", "name": "X", "ayurvedic": {}}, "nutritionalInfo"),
        (
            {
                "id": "x",
                "name": "X",
                "nutrients": {"calories": "lots"},
                "ayurvedic": {},
            },
            "calories must be a number",
        ),
        (
            {
                "id": "x",
                "name": "X",
                "nutrients": {},
                "ayurvedic": {"virya": "warm"},
            },
            "unknown virya",
        ),
        (
            {
                "id": "x",
                "name": "X",
                "nutrients": {},
                "ayurvedic": {"doshaEffect": {"vata": "soothing"}},
            },
            "unknown vata effect",
        ),
    ],
)
def test_parse_food_rejects_malformed_rows(row: dict, message: str) -> None:
    with pytest.raises(ReferenceDataError, match=message):
        parse_food(row)


def test_non_array_document_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text('{"categories": []}', encoding="utf-8")
    repository = JsonReferenceRepository(catalog_path=path, food_database_path=path)

    with pytest.raises(ReferenceDataError, match="JSON array"):
        repository.load_catalog()


def test_bundled_reference_data_loads() -> None:
    root = Path(__file__).resolve().parents[1] / "data"
    repository = JsonReferenceRepository(
        catalog_path=root / "ayurvedic_categories.json",
        food_database_path=root / "food_database.json",
    )

    assert len(repository.load_catalog()) > 0
    assert repository.load_foods().get("food-rice") is not None

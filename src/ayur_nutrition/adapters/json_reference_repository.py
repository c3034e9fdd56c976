"""JSON file implementation of the reference data repository."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ayur_nutrition.domain.catalog import AXIS_LABELS, CategoryAxis, CategoryRecord
from ayur_nutrition.domain.foods import (
    AyurvedicProperties,
    Dosha,
    DoshaEffect,
    FoodItem,
    NutrientProfile,
    Virya,
)
from ayur_nutrition.services.reference_data import (
    CatalogStore,
    FoodRecordStore,
    ReferenceRepository,
)

_logger = logging.getLogger(__name__)

_AXIS_BY_NAME: dict[str, CategoryAxis] = {
    **{axis.value: axis for axis in CategoryAxis},
    **{label.lower(): axis for axis, label in AXIS_LABELS.items()},
}

_EFFECT_ALIASES: dict[str, DoshaEffect] = {
    **{effect.value: effect for effect in DoshaEffect},
    "increases": DoshaEffect.AGGRAVATING,
    "decreases": DoshaEffect.PACIFYING,
    "balances": DoshaEffect.BALANCING,
}

_NUTRIENT_KEYS: dict[str, tuple[str, ...]] = {
    "calories": ("calories", "caloriesPerServing"),
    "protein": ("protein",),
    "carbohydrates": ("carbohydrates",),
    "fat": ("fat",),
    "fiber": ("fiber",),
    "sugar": ("sugar",),
    "sodium": ("sodium",),
    "potassium": ("potassium",),
    "calcium": ("calcium",),
    "iron": ("iron",),
}


class ReferenceDataError(ValueError):
    """Raised when a catalog or food document row is malformed."""


@dataclass
class JsonReferenceRepository(ReferenceRepository):
    """Loads the guidance catalog and food database from JSON files."""

    catalog_path: Path
    food_database_path: Path

    def load_catalog(self) -> CatalogStore:
        """Parse every catalog row, in file order."""
        rows = _read_rows(self.catalog_path)
        catalog = CatalogStore(
            tuple(parse_category(row, index) for index, row in enumerate(rows))
        )
        _logger.info(
            "Loaded catalog: path=%s records=%s", self.catalog_path, len(catalog)
        )
        return catalog

    def load_foods(self) -> FoodRecordStore:
        """Parse every food row."""
        rows = _read_rows(self.food_database_path)
        foods = FoodRecordStore(tuple(parse_food(row) for row in rows))
        _logger.info(
            "Loaded foods: path=%s records=%s", self.food_database_path, len(foods)
        )
        return foods


def parse_category(row: Mapping[str, object], index: int) -> CategoryRecord:
    """Build a catalog record from a raw document row."""
    where = f"catalog row {index}"
    raw_axis = _require_text(row, where, "axis", "Category Type")
    axis = _AXIS_BY_NAME.get(raw_axis.strip().lower())
    if axis is None:
        raise ReferenceDataError(f"{where}: unknown category axis {raw_axis!r}")
    record_id = _optional_text(row, "id", "record_id") or f"cat-{index}"
    return CategoryRecord(
        record_id=record_id,
        axis=axis,
        sub_label=_require_text(row, where, "sub_label", "Sub-Category"),
        recommended_items=_item_list(
            row, where, "recommended_items", "Recommended Foods"
        ),
        avoid_items=_item_list(row, where, "avoid_items", "Avoid Foods"),
        rationale=_optional_text(row, "rationale", "Reason") or "",
        meal_suggestions=(
            _optional_text(row, "meal_suggestions", "Meal Suggestions") or ""
        ),
        special_notes=_optional_text(row, "special_notes", "Special Notes") or "",
    )


def parse_food(row: Mapping[str, object]) -> FoodItem:
    """Build a food item from a raw document row."""
    food_id = _require_text(row, "food row", "id")
    where = f"food {food_id!r}"
    nutrition = _require_mapping(row, where, "nutrients", "nutritionalInfo")
    properties = _require_mapping(row, where, "ayurvedic", "ayurvedicProperties")
    return FoodItem(
        id=food_id,
        name=_require_text(row, where, "name"),
        nutrients=_parse_nutrients(nutrition, where),
        ayurvedic=_parse_properties(properties, where),
        serving_size=_optional_text(row, "serving_size", "servingSize"),
        category=_optional_text(row, "category"),
        tags=_text_tuple(row.get("tags"), where, "tags"),
    )


def _parse_nutrients(raw: Mapping[str, object], where: str) -> NutrientProfile:
    values: dict[str, float] = {}
    for name, keys in _NUTRIENT_KEYS.items():
        value = _first(raw, *keys)
        values[name] = _number(value, where, name) if value is not None else 0.0
    vitamins_raw = raw.get("vitamins") or {}
    if not isinstance(vitamins_raw, Mapping):
        raise ReferenceDataError(f"{where}: vitamins must be an object")
    vitamins = {
        str(name): _number(amount, where, f"vitamins.{name}")
        for name, amount in vitamins_raw.items()
    }
    return NutrientProfile(**values, vitamins=vitamins)


def _parse_properties(raw: Mapping[str, object], where: str) -> AyurvedicProperties:
    raw_virya = _optional_text(raw, "virya") or Virya.NEUTRAL.value
    try:
        virya = Virya(raw_virya.lower())
    except ValueError as exc:
        raise ReferenceDataError(f"{where}: unknown virya {raw_virya!r}") from exc

    effects_raw = _first(raw, "dosha_effect", "doshaEffect") or {}
    if not isinstance(effects_raw, Mapping):
        raise ReferenceDataError(f"{where}: dosha effect must be an object")
    dosha_effect: dict[Dosha, DoshaEffect] = {}
    for dosha in Dosha:
        value = effects_raw.get(dosha.value)
        if value is None:
            continue
        effect = _EFFECT_ALIASES.get(str(value).lower())
        if effect is None:
            raise ReferenceDataError(
                f"{where}: unknown {dosha.value} effect {value!r}"
            )
        dosha_effect[dosha] = effect

    return AyurvedicProperties(
        rasa=tuple(
            tag.lower() for tag in _text_tuple(raw.get("rasa"), where, "rasa")
        ),
        virya=virya,
        vipaka=_optional_text(raw, "vipaka") or "sweet",
        dosha_effect=dosha_effect,
        constitutions=_text_tuple(
            _first(raw, "constitutions", "constitution"), where, "constitution"
        ),
        seasons=_text_tuple(_first(raw, "seasons", "season"), where, "season"),
        time_of_day=_text_tuple(
            _first(raw, "time_of_day", "timeOfDay"), where, "time_of_day"
        ),
    )


def _read_rows(path: Path) -> list[Mapping[str, object]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ReferenceDataError(f"{path}: expected a JSON array of records")
    for index, row in enumerate(payload):
        if not isinstance(row, Mapping):
            raise ReferenceDataError(f"{path}: row {index} is not an object")
    return payload


def _first(row: Mapping[str, object], *keys: str) -> object | None:
    for key in keys:
        if key in row and row[key] is not None:
            return row[key]
    return None


def _require_text(row: Mapping[str, object], where: str, *keys: str) -> str:
    value = _first(row, *keys)
    if not isinstance(value, str) or not value.strip():
        raise ReferenceDataError(f"{where}: missing required field {keys[-1]!r}")
    return value


def _optional_text(row: Mapping[str, object], *keys: str) -> str | None:
    value = _first(row, *keys)
    if value is None:
        return None
    return str(value)


def _require_mapping(
    row: Mapping[str, object], where: str, *keys: str
) -> Mapping[str, object]:
    value = _first(row, *keys)
    if not isinstance(value, Mapping):
        raise ReferenceDataError(f"{where}: missing required field {keys[-1]!r}")
    return value


def _item_list(row: Mapping[str, object], where: str, *keys: str) -> tuple[str, ...]:
    value = _first(row, *keys)
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    return _text_tuple(value, where, keys[-1])


def _text_tuple(value: object, where: str, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list | tuple):
        raise ReferenceDataError(f"{where}: {name} must be a list")
    return tuple(str(item) for item in value)


def _number(value: object, where: str, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ReferenceDataError(f"{where}: {name} must be a number")
    return float(value)

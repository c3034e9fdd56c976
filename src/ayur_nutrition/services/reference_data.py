"""Read-only reference data passed into the engine."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol

from ayur_nutrition.domain.catalog import CategoryRecord
from ayur_nutrition.domain.foods import FoodItem, IngredientRef


class ReferenceRepository(Protocol):
    """Source of catalog and food reference data."""

    def load_catalog(self) -> "CatalogStore":
        """Return the full guidance catalog in catalog order."""

    def load_foods(self) -> "FoodRecordStore":
        """Return every known food item."""


@dataclass(frozen=True)
class CatalogStore:
    """Ordered, immutable collection of catalog records."""

    records: tuple[CategoryRecord, ...] = ()

    def __iter__(self) -> Iterator[CategoryRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class FoodRecordStore:
    """Immutable food collection with ingredient resolution."""

    foods: tuple[FoodItem, ...] = ()
    _by_id: dict[str, FoodItem] = field(init=False, repr=False, compare=False)
    _by_name: dict[str, FoodItem] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_id: dict[str, FoodItem] = {}
        by_name: dict[str, FoodItem] = {}
        for food in self.foods:
            by_id.setdefault(food.id, food)
            by_name.setdefault(food.name.lower(), food)
        object.__setattr__(self, "_by_id", by_id)
        object.__setattr__(self, "_by_name", by_name)

    @classmethod
    def of(cls, foods: Iterable[FoodItem]) -> "FoodRecordStore":
        """Build a store from any iterable of foods."""
        return cls(tuple(foods))

    def __iter__(self) -> Iterator[FoodItem]:
        return iter(self.foods)

    def __len__(self) -> int:
        return len(self.foods)

    def get(self, food_id: str) -> FoodItem | None:
        """Return a food by identifier."""
        return self._by_id.get(food_id)

    def resolve(self, ingredient: IngredientRef) -> FoodItem | None:
        """Resolve an ingredient by id, exact name, then substring match.

        The substring step accepts a hit in either direction, so "rice" also
        resolves to a food named "Apricot" when that food comes first.
        """
        exact = self.resolve_strict(ingredient)
        if exact is not None:
            return exact
        name = ingredient.name.lower()
        if not name:
            return None
        for food in self.foods:
            food_name = food.name.lower()
            if name in food_name or food_name in name:
                return food
        return None

    def resolve_strict(self, ingredient: IngredientRef) -> FoodItem | None:
        """Resolve an ingredient by id or case-insensitive exact name only."""
        if ingredient.food_id:
            found = self._by_id.get(ingredient.food_id)
            if found is not None:
                return found
        return self._by_name.get(ingredient.name.lower())

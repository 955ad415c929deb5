"""Domain models for meal entries and daily summaries."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import Enum
from types import MappingProxyType
from uuid import UUID, uuid4

from glucose_tracker.domain.foods import FoodItem


class MealType(str, Enum):
    """Meal slot chosen when logging."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def emoji(self) -> str:
        return _MEAL_EMOJI[self]


_MEAL_EMOJI = {
    MealType.BREAKFAST: "🌅",
    MealType.LUNCH: "☀️",
    MealType.DINNER: "🌙",
    MealType.SNACK: "🍎",
}


def compute_total_glucose(
    food_items: Iterable[FoodItem], quantities: Mapping[UUID, float]
) -> float:
    """Sum coefficient times grams; foods without a quantity count as zero."""
    return sum(
        food.glucose_content_per_gram * quantities.get(food.id, 0.0)
        for food in food_items
    )


@dataclass(frozen=True)
class MealEntry:
    """A logged meal.

    ``total_glucose_content`` is derived from the items and quantities when the
    entry is created with :meth:`create` and is never recomputed afterwards.
    Calling the constructor with an explicit total is reserved for decoding
    stored entries. Quantities are held read-only and the timestamp must be
    timezone-aware.
    """

    meal_type: MealType
    food_items: tuple[FoodItem, ...]
    quantities: Mapping[UUID, float]
    voice_input: str
    total_glucose_content: float
    notes: str | None = None
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    def __post_init__(self) -> None:
        if self.timestamp.utcoffset() is None:
            raise ValueError("MealEntry timestamp must be timezone-aware")
        object.__setattr__(self, "food_items", tuple(self.food_items))
        grams = MappingProxyType(dict(self.quantities))
        object.__setattr__(self, "quantities", grams)

    @classmethod
    def create(
        cls,
        meal_type: MealType,
        food_items: Iterable[FoodItem],
        quantities: Mapping[UUID, float],
        voice_input: str,
        notes: str | None = None,
        timestamp: datetime | None = None,
    ) -> "MealEntry":
        """Build an entry and freeze its glucose total."""
        items = tuple(food_items)
        grams = dict(quantities)
        return cls(
            meal_type=meal_type,
            food_items=items,
            quantities=grams,
            voice_input=voice_input,
            total_glucose_content=compute_total_glucose(items, grams),
            notes=notes,
            timestamp=timestamp or datetime.now(tz=UTC),
        )

    @property
    def food_names(self) -> list[str]:
        return [food.name for food in self.food_items]


@dataclass(frozen=True)
class DailySummary:
    """Meals of one local calendar day with derived totals."""

    date: date
    meals: list[MealEntry]
    meal_count: int = field(init=False)
    total_glucose: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meal_count", len(self.meals))
        object.__setattr__(
            self,
            "total_glucose",
            sum((meal.total_glucose_content for meal in self.meals), 0.0),
        )


@dataclass(frozen=True)
class NoFoodRecognized:
    """Signal returned when a transcript contained no catalog food."""

    transcript: str

    @property
    def message(self) -> str:
        return f"No food items recognized in: '{self.transcript}'"

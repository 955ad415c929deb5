"""JSON encoding of the stored meal entry collection."""

from uuid import UUID

from pydantic import AwareDatetime, BaseModel, TypeAdapter

from glucose_tracker.domain.foods import FoodCategory, FoodItem
from glucose_tracker.domain.meals import MealEntry, MealType


class StoredFoodItem(BaseModel):
    """Persisted form of a catalog food."""

    id: UUID
    name: str
    glucose_content_per_gram: float
    category: FoodCategory
    aliases: list[str]

    @classmethod
    def from_domain(cls, food: FoodItem) -> "StoredFoodItem":
        return cls(
            id=food.id,
            name=food.name,
            glucose_content_per_gram=food.glucose_content_per_gram,
            category=food.category,
            aliases=list(food.aliases),
        )

    def to_domain(self) -> FoodItem:
        return FoodItem(
            name=self.name,
            glucose_content_per_gram=self.glucose_content_per_gram,
            category=self.category,
            aliases=tuple(self.aliases),
            id=self.id,
        )


class StoredMealEntry(BaseModel):
    """Persisted form of a meal entry, including its frozen total."""

    id: UUID
    timestamp: AwareDatetime
    meal_type: MealType
    food_items: list[StoredFoodItem]
    quantities: dict[UUID, float]
    voice_input: str
    notes: str | None
    total_glucose_content: float

    @classmethod
    def from_domain(cls, entry: MealEntry) -> "StoredMealEntry":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            meal_type=entry.meal_type,
            food_items=[StoredFoodItem.from_domain(food) for food in entry.food_items],
            quantities=dict(entry.quantities),
            voice_input=entry.voice_input,
            notes=entry.notes,
            total_glucose_content=entry.total_glucose_content,
        )

    def to_domain(self) -> MealEntry:
        # The stored total is restored as-is rather than recomputed.
        return MealEntry(
            meal_type=self.meal_type,
            food_items=tuple(food.to_domain() for food in self.food_items),
            quantities=self.quantities,
            voice_input=self.voice_input,
            total_glucose_content=self.total_glucose_content,
            notes=self.notes,
            id=self.id,
            timestamp=self.timestamp,
        )


_ENTRIES_ADAPTER = TypeAdapter(list[StoredMealEntry])


class MealCodecError(ValueError):
    """Raised when stored meal data cannot be decoded."""


def encode_entries(entries: list[MealEntry]) -> bytes:
    """Serialize entries to JSON with ISO-8601 timestamps."""
    return _ENTRIES_ADAPTER.dump_json(
        [StoredMealEntry.from_domain(entry) for entry in entries]
    )


def decode_entries(data: bytes | str) -> list[MealEntry]:
    """Deserialize entries written by :func:`encode_entries`.

    Entries without a UTC offset or with invalid catalog values are rejected;
    pydantic validation errors are ``ValueError`` subclasses.
    """
    try:
        stored = _ENTRIES_ADAPTER.validate_json(data)
        return [entry.to_domain() for entry in stored]
    except ValueError as exc:
        raise MealCodecError(f"Malformed meal data: {exc}") from exc

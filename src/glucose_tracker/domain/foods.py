"""Domain models for catalog foods."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4


class FoodCategory(str, Enum):
    """Closed set of food categories used for default portions."""

    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    GRAINS = "Grains"
    PROTEINS = "Proteins"
    DAIRY = "Dairy"
    SWEETS = "Sweets"
    BEVERAGES = "Beverages"
    SNACKS = "Snacks"
    OTHER = "Other"


@dataclass(frozen=True)
class FoodItem:
    """A known food with its glucose coefficient.

    ``glucose_content_per_gram`` is grams of glucose per gram of food.
    """

    name: str
    glucose_content_per_gram: float
    category: FoodCategory
    aliases: tuple[str, ...] = ()
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.glucose_content_per_gram < 0:
            raise ValueError(
                f"glucose_content_per_gram must be non-negative for {self.name!r}"
            )
        # Accept any iterable of aliases but always store a tuple.
        object.__setattr__(self, "aliases", tuple(self.aliases))

    def match_keys(self) -> tuple[str, ...]:
        """Return the lowercased name followed by the lowercased aliases."""
        return (self.name.lower(), *(alias.lower() for alias in self.aliases))

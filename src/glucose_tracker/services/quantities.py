"""Portion estimation from quantity words in a transcript."""

from dataclasses import dataclass

from glucose_tracker.domain.foods import FoodCategory, FoodItem

# Order matters: the first cue found anywhere in the transcript wins.
QUANTITY_CUES: tuple[tuple[str, float], ...] = (
    ("one", 100.0),
    ("two", 200.0),
    ("three", 300.0),
    ("half", 50.0),
    ("small", 80.0),
    ("medium", 150.0),
    ("large", 250.0),
    ("cup", 240.0),
    ("tablespoon", 15.0),
    ("teaspoon", 5.0),
    ("slice", 30.0),
    ("piece", 100.0),
    ("handful", 50.0),
    ("bowl", 200.0),
    ("plate", 300.0),
)

CATEGORY_DEFAULT_GRAMS: dict[FoodCategory, float] = {
    FoodCategory.FRUITS: 150.0,
    FoodCategory.VEGETABLES: 100.0,
    FoodCategory.GRAINS: 200.0,
    FoodCategory.PROTEINS: 120.0,
    FoodCategory.DAIRY: 240.0,
    FoodCategory.SWEETS: 50.0,
    FoodCategory.BEVERAGES: 240.0,
    FoodCategory.SNACKS: 30.0,
    FoodCategory.OTHER: 100.0,
}


@dataclass
class QuantityEstimator:
    """Estimates grams for a food mentioned in a transcript.

    Cues are plain substrings of the whole transcript, not of the span that
    named the food, so one cue applies to every food in the same transcript.
    """

    cues: tuple[tuple[str, float], ...] = QUANTITY_CUES

    def find_cue(self, transcript: str) -> tuple[str, float] | None:
        """Return the first cue present in the transcript."""
        text = transcript.lower()
        for cue, grams in self.cues:
            if cue in text:
                return cue, grams
        return None

    def estimate(self, transcript: str, food: FoodItem) -> float:
        """Return the estimated grams of ``food``."""
        cue = self.find_cue(transcript)
        if cue is not None:
            return cue[1]
        return CATEGORY_DEFAULT_GRAMS[food.category]

"""Domain models for voice input and food recognition."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from glucose_tracker.domain.foods import FoodItem


@dataclass(frozen=True)
class VoiceTranscription:
    """Final transcript handed over by the voice capture layer."""

    transcription: str
    confidence: float = 0.0
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))


@dataclass(frozen=True)
class RecognitionMatch:
    """A recognised food with its estimated quantity in grams."""

    food: FoodItem
    grams: float

    def __post_init__(self) -> None:
        if self.grams < 0:
            raise ValueError("grams must be non-negative")


@dataclass(frozen=True)
class FoodRecognitionResult:
    """Outcome of parsing one transcript."""

    original_text: str
    matches: tuple[RecognitionMatch, ...] = ()
    confidence: float = 0.0

    @property
    def foods(self) -> list[FoodItem]:
        """Recognised foods in discovery order."""
        return [match.food for match in self.matches]

    @property
    def quantities(self) -> dict[UUID, float]:
        """Estimated grams keyed by food id."""
        return {match.food.id: match.grams for match in self.matches}

    @property
    def is_empty(self) -> bool:
        return not self.matches

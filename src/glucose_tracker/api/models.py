"""Pydantic models for the HTTP API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from glucose_tracker.domain.foods import FoodCategory, FoodItem
from glucose_tracker.domain.meals import DailySummary, MealEntry, MealType
from glucose_tracker.domain.recognition import FoodRecognitionResult


class VoiceInputRequest(BaseModel):
    """Finished transcript posted by the voice capture client."""

    transcription: str
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    meal_type: MealType | None = None


class RecognizeRequest(BaseModel):
    """Transcript to preview without logging."""

    transcript: str


class NotesUpdateRequest(BaseModel):
    notes: str | None = None


class CustomFoodRequest(BaseModel):
    """Payload for adding a food to the catalog."""

    name: str = Field(min_length=1)
    glucose_content_per_gram: float = Field(ge=0.0)
    category: FoodCategory = FoodCategory.OTHER
    aliases: list[str] = Field(default_factory=list)


class FoodItemModel(BaseModel):
    id: UUID
    name: str
    category: FoodCategory
    aliases: list[str]
    glucose_content_per_gram: float

    @classmethod
    def from_domain(cls, food: FoodItem) -> "FoodItemModel":
        return cls(
            id=food.id,
            name=food.name,
            category=food.category,
            aliases=list(food.aliases),
            glucose_content_per_gram=food.glucose_content_per_gram,
        )


class RecognitionMatchModel(BaseModel):
    food: FoodItemModel
    grams: float


class RecognitionResponse(BaseModel):
    """Parsed transcript with a percentage confidence for display."""

    original_text: str
    matches: list[RecognitionMatchModel]
    confidence: float
    confidence_percent: int

    @classmethod
    def from_domain(cls, result: FoodRecognitionResult) -> "RecognitionResponse":
        return cls(
            original_text=result.original_text,
            matches=[
                RecognitionMatchModel(
                    food=FoodItemModel.from_domain(match.food), grams=match.grams
                )
                for match in result.matches
            ],
            confidence=result.confidence,
            confidence_percent=int(result.confidence * 100),
        )


class MealEntryModel(BaseModel):
    id: UUID
    timestamp: datetime
    meal_type: MealType
    emoji: str
    food_items: list[FoodItemModel]
    quantities: dict[UUID, float]
    voice_input: str
    notes: str | None
    total_glucose_content: float

    @classmethod
    def from_domain(cls, entry: MealEntry) -> "MealEntryModel":
        return cls(
            id=entry.id,
            timestamp=entry.timestamp,
            meal_type=entry.meal_type,
            emoji=entry.meal_type.emoji,
            food_items=[FoodItemModel.from_domain(food) for food in entry.food_items],
            quantities=dict(entry.quantities),
            voice_input=entry.voice_input,
            notes=entry.notes,
            total_glucose_content=entry.total_glucose_content,
        )


class DailySummaryModel(BaseModel):
    date: date
    meal_count: int
    total_glucose: float
    meals: list[MealEntryModel]

    @classmethod
    def from_domain(cls, summary: DailySummary) -> "DailySummaryModel":
        return cls(
            date=summary.date,
            meal_count=summary.meal_count,
            total_glucose=summary.total_glucose,
            meals=[MealEntryModel.from_domain(meal) for meal in summary.meals],
        )


class StatsResponse(BaseModel):
    total_today: float
    average_per_meal: float
    meal_count: int

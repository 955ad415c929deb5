"""FastAPI application factory."""

import logging
from datetime import date
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, Response, status

from glucose_tracker.api.models import (
    CustomFoodRequest,
    DailySummaryModel,
    FoodItemModel,
    MealEntryModel,
    NotesUpdateRequest,
    RecognitionResponse,
    RecognizeRequest,
    StatsResponse,
    VoiceInputRequest,
)
from glucose_tracker.app_logging import configure_logging
from glucose_tracker.containers import AppContainer
from glucose_tracker.domain.foods import FoodCategory, FoodItem
from glucose_tracker.domain.meals import MealType, NoFoodRecognized
from glucose_tracker.domain.recognition import VoiceTranscription


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Glucose Tracker")
    app.state.container = container

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/recognize")
    async def recognize(
        payload: RecognizeRequest, request: Request
    ) -> RecognitionResponse:
        """Parse a transcript without logging a meal."""
        result = _container(request).pipeline.parse(payload.transcript)
        return RecognitionResponse.from_domain(result)

    @app.post("/meals/voice", status_code=status.HTTP_201_CREATED)
    async def log_voice_meal(
        payload: VoiceInputRequest, request: Request
    ) -> MealEntryModel:
        """Log a meal from a finished voice transcript."""
        tracker = _container(request).meal_tracker
        outcome = tracker.process_voice_input(
            VoiceTranscription(
                transcription=payload.transcription,
                confidence=payload.confidence,
            ),
            meal_type=payload.meal_type,
        )
        if isinstance(outcome, NoFoodRecognized):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=outcome.message,
            )
        if tracker.last_error:
            logger.warning("Meal logged without persistence: %s", tracker.last_error)
        return MealEntryModel.from_domain(outcome)

    @app.get("/meals")
    async def list_meals(
        request: Request, meal_type: MealType | None = None
    ) -> list[MealEntryModel]:
        """Return stored meals, most recent first."""
        tracker = _container(request).meal_tracker
        entries = (
            tracker.entries if meal_type is None else tracker.meals_by_type(meal_type)
        )
        return [MealEntryModel.from_domain(entry) for entry in entries]

    @app.patch("/meals/{entry_id}")
    async def update_meal_notes(
        entry_id: UUID, payload: NotesUpdateRequest, request: Request
    ) -> MealEntryModel:
        """Replace the notes of a meal."""
        updated = _container(request).meal_tracker.update_notes(entry_id, payload.notes)
        if updated is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return MealEntryModel.from_domain(updated)

    @app.delete("/meals/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_meal(entry_id: UUID, request: Request) -> Response:
        """Delete a meal; unknown ids are accepted."""
        _container(request).meal_tracker.delete(entry_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.delete("/meals", status_code=status.HTTP_204_NO_CONTENT)
    async def clear_meals(request: Request) -> Response:
        """Delete every stored meal."""
        _container(request).meal_tracker.clear_all()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/summary/today")
    async def today_summary(request: Request) -> DailySummaryModel:
        tracker = _container(request).meal_tracker
        return DailySummaryModel.from_domain(tracker.daily_summary(tracker.today()))

    @app.get("/summary/daily")
    async def daily_summary(day: date, request: Request) -> DailySummaryModel:
        tracker = _container(request).meal_tracker
        return DailySummaryModel.from_domain(tracker.daily_summary(day))

    @app.get("/summary/weekly")
    async def weekly_summary(request: Request) -> list[DailySummaryModel]:
        tracker = _container(request).meal_tracker
        return [
            DailySummaryModel.from_domain(summary)
            for summary in tracker.weekly_summary()
        ]

    @app.get("/stats")
    async def stats(request: Request) -> StatsResponse:
        tracker = _container(request).meal_tracker
        return StatsResponse(
            total_today=tracker.total_today(),
            average_per_meal=tracker.average_per_meal(),
            meal_count=len(tracker.entries),
        )

    @app.get("/export.csv")
    async def export_csv(request: Request) -> Response:
        """Download all meals as CSV."""
        body = _container(request).meal_tracker.export_csv()
        return Response(
            content=body,
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="meals.csv"'},
        )

    @app.get("/foods")
    async def list_foods(
        request: Request,
        query: str | None = None,
        category: FoodCategory | None = None,
    ) -> list[FoodItemModel]:
        """Search the catalog by text and/or category."""
        catalog = _container(request).catalog
        foods = catalog.search(query) if query else list(catalog.foods)
        if category is not None:
            foods = [food for food in foods if food.category == category]
        return [FoodItemModel.from_domain(food) for food in foods]

    @app.post("/foods", status_code=status.HTTP_201_CREATED)
    async def add_custom_food(
        payload: CustomFoodRequest, request: Request
    ) -> FoodItemModel:
        """Append a custom food to the catalog."""
        food = FoodItem(
            name=payload.name,
            glucose_content_per_gram=payload.glucose_content_per_gram,
            category=payload.category,
            aliases=tuple(payload.aliases),
        )
        _container(request).catalog.add_custom(food)
        logger.info("Added custom food: %s", food.name)
        return FoodItemModel.from_domain(food)

    return app

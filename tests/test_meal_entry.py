"""Tests for meal domain models."""

from datetime import UTC, date, datetime

import pytest

from glucose_tracker.domain.foods import FoodItem
from glucose_tracker.domain.meals import (
    DailySummary,
    MealEntry,
    MealType,
    NoFoodRecognized,
)
from glucose_tracker.domain.recognition import RecognitionMatch
from glucose_tracker.services.catalog import FoodCatalog


def _foods(catalog: FoodCatalog, *names: str) -> list[FoodItem]:
    foods = [catalog.find_exact(name) for name in names]
    assert all(food is not None for food in foods)
    return foods


def test_create_freezes_total_from_items_and_quantities(catalog: FoodCatalog) -> None:
    foods = _foods(catalog, "white rice", "banana", "salmon")
    quantities = {foods[0].id: 180.0, foods[1].id: 120.0, foods[2].id: 140.0}

    entry = MealEntry.create(
        meal_type=MealType.LUNCH,
        food_items=foods,
        quantities=quantities,
        voice_input="rice banana salmon",
    )

    expected = sum(
        food.glucose_content_per_gram * quantities.get(food.id, 0) for food in foods
    )
    assert entry.total_glucose_content == expected
    assert entry.food_items == tuple(foods)
    assert entry.timestamp.tzinfo is not None


def test_create_counts_missing_quantity_as_zero(catalog: FoodCatalog) -> None:
    rice, bread = _foods(catalog, "rice", "bread")

    entry = MealEntry.create(
        meal_type=MealType.DINNER,
        food_items=[rice, bread],
        quantities={rice.id: 100.0},
        voice_input="rice and bread",
    )

    assert entry.total_glucose_content == rice.glucose_content_per_gram * 100.0


def test_create_copies_quantities(catalog: FoodCatalog) -> None:
    (rice,) = _foods(catalog, "rice")
    quantities = {rice.id: 100.0}

    entry = MealEntry.create(MealType.SNACK, [rice], quantities, "rice")
    quantities[rice.id] = 500.0

    assert entry.quantities[rice.id] == 100.0


def test_create_uses_given_timestamp(catalog: FoodCatalog) -> None:
    (rice,) = _foods(catalog, "rice")
    when = datetime(2026, 1, 2, 8, 30, tzinfo=UTC)

    entry = MealEntry.create(MealType.BREAKFAST, [rice], {}, "rice", timestamp=when)

    assert entry.timestamp == when
    assert entry.total_glucose_content == 0.0


def test_meal_type_display() -> None:
    assert MealType.BREAKFAST.display_name == "Breakfast"
    assert {meal_type.emoji for meal_type in MealType} == {"🌅", "☀️", "🌙", "🍎"}


def test_daily_summary_derives_count_and_total(catalog: FoodCatalog) -> None:
    (rice,) = _foods(catalog, "rice")
    meals = [
        MealEntry.create(MealType.LUNCH, [rice], {rice.id: 100.0}, "rice"),
        MealEntry.create(MealType.DINNER, [rice], {rice.id: 50.0}, "rice"),
    ]

    summary = DailySummary(date=date(2026, 3, 10), meals=meals)

    assert summary.meal_count == 2
    assert summary.total_glucose == pytest.approx(0.78 * 150.0)


def test_daily_summary_empty() -> None:
    summary = DailySummary(date=date(2026, 3, 10), meals=[])

    assert summary.meal_count == 0
    assert summary.total_glucose == 0.0


def test_no_food_message_quotes_transcript() -> None:
    signal = NoFoodRecognized("just water")

    assert signal.message == "No food items recognized in: 'just water'"


def test_recognition_match_rejects_negative_grams(catalog: FoodCatalog) -> None:
    (rice,) = _foods(catalog, "rice")

    with pytest.raises(ValueError):
        RecognitionMatch(food=rice, grams=-1.0)


def test_quantities_are_read_only(catalog: FoodCatalog) -> None:
    (apple,) = _foods(catalog, "apple")
    entry = MealEntry.create(MealType.SNACK, [apple], {apple.id: 200.0}, "two apples")

    with pytest.raises(TypeError):
        entry.quantities[apple.id] = 1000.0  # type: ignore[index]

    assert entry.total_glucose_content == (
        apple.glucose_content_per_gram * entry.quantities[apple.id]
    )


def test_create_rejects_naive_timestamp(catalog: FoodCatalog) -> None:
    (rice,) = _foods(catalog, "rice")

    with pytest.raises(ValueError):
        MealEntry.create(
            MealType.LUNCH, [rice], {}, "rice", timestamp=datetime(2026, 3, 10, 12)
        )

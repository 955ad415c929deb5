"""Tests for transcript recognition."""

import pytest

from glucose_tracker.domain.foods import FoodCategory, FoodItem
from glucose_tracker.services.catalog import FoodCatalog
from glucose_tracker.services.recognition import RecognitionPipeline


@pytest.mark.parametrize("transcript", ["", "   ", "\n\t"])
def test_parse_blank_transcript(pipeline: RecognitionPipeline, transcript: str) -> None:
    result = pipeline.parse(transcript)

    assert result.matches == ()
    assert result.confidence == 0.0
    assert result.is_empty
    assert result.original_text == transcript


def test_parse_applies_first_cue_to_every_food(pipeline: RecognitionPipeline) -> None:
    transcript = "I had two apples and a large cup of rice"

    result = pipeline.parse(transcript)

    assert [food.name for food in result.foods] == ["Apple", "White Rice"]
    assert [match.grams for match in result.matches] == [200.0, 200.0]
    assert result.confidence == pytest.approx(0.2)
    assert result.original_text == transcript


def test_parse_uses_category_default_without_cue(
    pipeline: RecognitionPipeline,
) -> None:
    result = pipeline.parse("I ate some salmon")

    assert [food.name for food in result.foods] == ["Salmon"]
    assert result.matches[0].grams == 120.0
    assert result.confidence == pytest.approx(0.25)


def test_parse_records_repeated_food_once(pipeline: RecognitionPipeline) -> None:
    result = pipeline.parse("rice with more rice")

    assert [food.name for food in result.foods] == ["White Rice"]
    assert result.matches[0].grams == 200.0
    assert result.confidence == pytest.approx(0.25)


def test_parse_counts_anchor_positions_not_foods(
    pipeline: RecognitionPipeline,
) -> None:
    result = pipeline.parse("chocolate chip cookie")

    assert [food.name for food in result.foods] == ["Chocolate", "Cookie"]
    assert result.confidence == pytest.approx(1 / 3)


def test_parse_overlapping_phrases(pipeline: RecognitionPipeline) -> None:
    result = pipeline.parse("brown rice")

    assert [food.name for food in result.foods] == ["Brown Rice", "White Rice"]
    assert result.confidence == 1.0


def test_parse_is_case_insensitive_and_keeps_original_text(
    pipeline: RecognitionPipeline,
) -> None:
    result = pipeline.parse("GRILLED CHICKEN")

    assert [food.name for food in result.foods] == ["Chicken Breast"]
    assert result.original_text == "GRILLED CHICKEN"
    assert result.confidence == pytest.approx(0.5)


def test_parse_quantities_are_keyed_by_food_id(pipeline: RecognitionPipeline) -> None:
    result = pipeline.parse("a bowl of oatmeal and blueberries")

    assert result.quantities == {food.id: 200.0 for food in result.foods}
    assert [food.name for food in result.foods] == ["Oats", "Blueberries"]


def test_parse_without_catalog_food(pipeline: RecognitionPipeline) -> None:
    result = pipeline.parse("a plate of mystery stew")

    assert result.is_empty
    assert result.confidence == 0.0


def test_parse_sees_custom_foods(
    catalog: FoodCatalog, pipeline: RecognitionPipeline
) -> None:
    catalog.add_custom(FoodItem("Mango", 0.14, FoodCategory.FRUITS, ("mangoes",)))

    result = pipeline.parse("two mangoes")

    assert [food.name for food in result.foods] == ["Mango"]
    assert result.matches[0].grams == 200.0

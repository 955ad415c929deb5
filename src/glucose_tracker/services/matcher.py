"""Exact phrase matching of transcript spans against the catalog."""

from collections.abc import Sequence
from dataclasses import dataclass

from glucose_tracker.domain.foods import FoodItem
from glucose_tracker.services.catalog import FoodCatalog

MAX_SPAN_TOKENS = 3


@dataclass
class LexicalMatcher:
    """Matches 1- to 3-token spans to catalog names and aliases."""

    catalog: FoodCatalog

    def match_span(
        self, tokens: Sequence[str], start: int, size: int
    ) -> FoodItem | None:
        """Return the food named by ``tokens[start:start + size]``, if any."""
        if size < 1 or start < 0 or start + size > len(tokens):
            return None
        phrase = " ".join(tokens[start : start + size])
        return self.catalog.find_exact(phrase)

    def match_at(self, tokens: Sequence[str], start: int) -> list[FoodItem]:
        """Return foods matched by spans anchored at ``start``, shortest first."""
        matched: list[FoodItem] = []
        for size in range(1, MAX_SPAN_TOKENS + 1):
            food = self.match_span(tokens, start, size)
            if food is not None:
                matched.append(food)
        return matched

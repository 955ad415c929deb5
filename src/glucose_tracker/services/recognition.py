"""Transcript parsing into recognised foods."""

import logging
from dataclasses import dataclass
from uuid import UUID

from glucose_tracker.domain.recognition import FoodRecognitionResult, RecognitionMatch
from glucose_tracker.services.matcher import LexicalMatcher
from glucose_tracker.services.quantities import QuantityEstimator

_logger = logging.getLogger(__name__)


@dataclass
class RecognitionPipeline:
    """Turns a final transcript into foods, grams and a coverage score."""

    matcher: LexicalMatcher
    estimator: QuantityEstimator

    def parse(self, transcript: str) -> FoodRecognitionResult:
        """Parse a transcript; any string, including an empty one, is valid.

        Confidence is the share of token positions that introduced at least
        one new food, capped at 1.0.
        """
        tokens = transcript.lower().split()
        matches: list[RecognitionMatch] = []
        seen: set[UUID] = set()
        productive_anchors = 0

        for index in range(len(tokens)):
            found_new = False
            for food in self.matcher.match_at(tokens, index):
                if food.id in seen:
                    continue
                seen.add(food.id)
                matches.append(
                    RecognitionMatch(
                        food=food,
                        grams=self.estimator.estimate(transcript, food),
                    )
                )
                found_new = True
            if found_new:
                productive_anchors += 1

        confidence = min(productive_anchors / len(tokens), 1.0) if tokens else 0.0
        _logger.info(
            "Parsed transcript: tokens=%s foods=%s confidence=%.2f",
            len(tokens),
            len(matches),
            confidence,
        )
        return FoodRecognitionResult(
            original_text=transcript,
            matches=tuple(matches),
            confidence=confidence,
        )

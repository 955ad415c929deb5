"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from glucose_tracker.config import Settings
from glucose_tracker.containers import AppContainer, build_container
from glucose_tracker.services.catalog import FoodCatalog, default_catalog
from glucose_tracker.services.matcher import LexicalMatcher
from glucose_tracker.services.meals import MealTracker
from glucose_tracker.services.quantities import QuantityEstimator
from glucose_tracker.services.recognition import RecognitionPipeline
from glucose_tracker.services.storage import BlobStore, InMemoryBlobStore

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


@dataclass
class FailingBlobStore(BlobStore):
    """Blob store whose operations raise, to exercise best-effort persistence."""

    fail_load: bool = False
    fail_save: bool = True
    fail_delete: bool = True
    saved: dict[str, bytes] = field(default_factory=dict)

    def load(self, key: str) -> bytes | None:
        if self.fail_load:
            raise RuntimeError("disk unavailable")
        return self.saved.get(key)

    def save(self, key: str, data: bytes) -> None:
        if self.fail_save:
            raise RuntimeError("disk full")
        self.saved[key] = data

    def delete(self, key: str) -> None:
        if self.fail_delete:
            raise RuntimeError("disk unavailable")
        self.saved.pop(key, None)


@pytest.fixture
def catalog() -> FoodCatalog:
    return default_catalog()


@pytest.fixture
def pipeline(catalog: FoodCatalog) -> RecognitionPipeline:
    return RecognitionPipeline(
        matcher=LexicalMatcher(catalog),
        estimator=QuantityEstimator(),
    )


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def tracker(
    pipeline: RecognitionPipeline, blob_store: InMemoryBlobStore
) -> MealTracker:
    return MealTracker(
        pipeline=pipeline,
        store=blob_store,
        timezone=ZoneInfo("UTC"),
        clock=lambda: NOW,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", timezone="UTC")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)

"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from glucose_tracker.adapters.file_blob_store import FileBlobStore
from glucose_tracker.adapters.supabase_blob_store import SupabaseBlobStore
from glucose_tracker.config import Settings, resolve_timezone
from glucose_tracker.services.catalog import FoodCatalog, default_catalog
from glucose_tracker.services.matcher import LexicalMatcher
from glucose_tracker.services.meals import MealTracker
from glucose_tracker.services.quantities import QuantityEstimator
from glucose_tracker.services.recognition import RecognitionPipeline
from glucose_tracker.services.storage import BlobStore, InMemoryBlobStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    pipeline: RecognitionPipeline
    meal_tracker: MealTracker


def build_store(settings: Settings) -> BlobStore:
    """Create the blob store selected by ``storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryBlobStore()
    if settings.storage_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase storage backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseBlobStore(client, table=settings.supabase_table)
    return FileBlobStore(Path(settings.storage_dir))


def build_container(
    settings: Settings | None = None,
    catalog: FoodCatalog | None = None,
    store: BlobStore | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = default_catalog() if catalog is None else catalog
    pipeline = RecognitionPipeline(
        matcher=LexicalMatcher(resolved_catalog),
        estimator=QuantityEstimator(),
    )
    meal_tracker = MealTracker(
        pipeline=pipeline,
        store=build_store(resolved_settings) if store is None else store,
        timezone=resolve_timezone(resolved_settings.timezone),
        storage_key=resolved_settings.storage_key,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        pipeline=pipeline,
        meal_tracker=meal_tracker,
    )

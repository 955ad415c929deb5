"""Meal entry bookkeeping, aggregation and export."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from uuid import UUID

from glucose_tracker.domain.meals import (
    DailySummary,
    MealEntry,
    MealType,
    NoFoodRecognized,
)
from glucose_tracker.domain.recognition import (
    FoodRecognitionResult,
    VoiceTranscription,
)
from glucose_tracker.services.meal_codec import decode_entries, encode_entries
from glucose_tracker.services.recognition import RecognitionPipeline
from glucose_tracker.services.storage import BlobStore

_logger = logging.getLogger(__name__)

MEAL_ENTRIES_KEY = "SavedMealEntries"
CSV_HEADER = "Date,Meal Type,Food Items,Voice Input,Glucose Content (g)"
CSV_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
WEEK_DAYS = 7


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class MealTracker:
    """Owns the meal entries of one session.

    Entries are kept most-recent-first. Every mutation is written to the blob
    store on a best-effort basis: storage failures are logged and reported via
    ``last_error`` while the in-memory collection stays authoritative.
    """

    pipeline: RecognitionPipeline
    store: BlobStore
    timezone: tzinfo
    storage_key: str = MEAL_ENTRIES_KEY
    clock: Callable[[], datetime] = _utc_now
    current_meal_type: MealType = MealType.BREAKFAST
    last_error: str | None = field(default=None, init=False)
    _entries: list[MealEntry] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self._load()

    @property
    def entries(self) -> tuple[MealEntry, ...]:
        """Stored entries, most recent first."""
        return tuple(self._entries)

    def process_voice_input(
        self, transcription: VoiceTranscription, meal_type: MealType | None = None
    ) -> MealEntry | NoFoodRecognized:
        """Parse a finished transcript and log it as a meal."""
        result = self.pipeline.parse(transcription.transcription)
        return self.record_from_recognition(
            result,
            meal_type or self.current_meal_type,
            notes=f"Confidence: {int(result.confidence * 100)}%",
        )

    def record_from_recognition(
        self,
        result: FoodRecognitionResult,
        meal_type: MealType,
        notes: str | None = None,
    ) -> MealEntry | NoFoodRecognized:
        """Create an entry from a recognition result.

        Returns :class:`NoFoodRecognized` instead of an entry when nothing was
        recognised.
        """
        if result.is_empty:
            signal = NoFoodRecognized(result.original_text)
            self.last_error = signal.message
            _logger.info("No food recognized in transcript")
            return signal
        entry = MealEntry.create(
            meal_type=meal_type,
            food_items=result.foods,
            quantities=result.quantities,
            voice_input=result.original_text,
            notes=notes,
            timestamp=self.clock(),
        )
        self.add_entry(entry)
        _logger.info(
            "Recorded meal: id=%s type=%s foods=%s glucose=%.2f",
            entry.id,
            meal_type.value,
            len(entry.food_items),
            entry.total_glucose_content,
        )
        return entry

    def add_entry(self, entry: MealEntry) -> None:
        """Insert an entry at the head of the collection."""
        self._entries.insert(0, entry)
        self._save()

    def delete(self, entry_id: UUID) -> None:
        """Remove an entry by id; unknown ids are ignored."""
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        if len(remaining) == len(self._entries):
            return
        self._entries = remaining
        self._save()

    def update_notes(self, entry_id: UUID, notes: str | None) -> MealEntry | None:
        """Replace the notes of an entry, keeping its id, time and total."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                updated = replace(entry, notes=notes)
                self._entries[index] = updated
                self._save()
                return updated
        return None

    def get(self, entry_id: UUID) -> MealEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def daily_summary(self, day: date) -> DailySummary:
        """Summarise entries within the local calendar day ``day``."""
        if isinstance(day, datetime):
            day = day.astimezone(self.timezone).date()
        start = datetime.combine(day, time.min, tzinfo=self.timezone)
        end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=self.timezone)
        meals = [entry for entry in self._entries if start <= entry.timestamp < end]
        return DailySummary(date=day, meals=meals)

    def weekly_summary(self) -> list[DailySummary]:
        """Summaries for today and the six previous days, most recent first."""
        today = self.today()
        return [
            self.daily_summary(today - timedelta(days=offset))
            for offset in range(WEEK_DAYS)
        ]

    def today(self) -> date:
        return self.clock().astimezone(self.timezone).date()

    def total_today(self) -> float:
        return self.daily_summary(self.today()).total_glucose

    def average_per_meal(self) -> float:
        if not self._entries:
            return 0.0
        total = sum(entry.total_glucose_content for entry in self._entries)
        return total / len(self._entries)

    def meals_by_type(self, meal_type: MealType) -> list[MealEntry]:
        return [entry for entry in self._entries if entry.meal_type == meal_type]

    def export_csv(self) -> str:
        """Render stored entries as CSV in stored order."""
        lines = [CSV_HEADER]
        for entry in self._entries:
            timestamp = entry.timestamp.astimezone(self.timezone).strftime(
                CSV_TIMESTAMP_FORMAT
            )
            lines.append(
                ",".join(
                    (
                        timestamp,
                        entry.meal_type.display_name,
                        _quote("; ".join(entry.food_names)),
                        _quote(entry.voice_input),
                        f"{entry.total_glucose_content:.2f}",
                    )
                )
            )
        return "\n".join(lines) + "\n"

    def clear_all(self) -> None:
        """Drop every entry and the persisted blob."""
        self._entries = []
        try:
            self.store.delete(self.storage_key)
        except Exception as exc:
            self._report_storage_error("Failed to clear meal entries", exc)

    def _load(self) -> None:
        try:
            data = self.store.load(self.storage_key)
            if data is None:
                return
            self._entries = decode_entries(data)
        except Exception as exc:
            self._entries = []
            self._report_storage_error("Failed to load meal entries", exc)
        else:
            _logger.info("Loaded %s meal entries", len(self._entries))

    def _save(self) -> None:
        try:
            self.store.save(self.storage_key, encode_entries(self._entries))
        except Exception as exc:
            self._report_storage_error("Failed to save meal entries", exc)
        else:
            self.last_error = None

    def _report_storage_error(self, prefix: str, exc: Exception) -> None:
        self.last_error = f"{prefix}: {exc}"
        _logger.warning("%s", self.last_error, exc_info=exc)


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'

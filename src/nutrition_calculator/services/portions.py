"""Portion state service with persisted last-used inputs."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from nutrition_calculator.domain.nutrition import (
    DEFAULT_PORTION,
    DerivedNutrition,
    PortionInput,
)
from nutrition_calculator.domain.report import NutritionReport
from nutrition_calculator.services.calculator import compute, normalize_portion
from nutrition_calculator.services.report import build_report

STORAGE_KEY = "nutriCalcState:v1"
QUICK_GRAM_OPTIONS = (30, 50, 75, 100, 150, 200, 250, 300)
GRAMS_SLIDER_MIN = 1
GRAMS_SLIDER_MAX = 1000

_PER100_FIELDS = {
    "kcal": "calories_per_100",
    "fat": "fat_per_100",
    "carb": "carb_per_100",
    "protein": "protein_per_100",
}

_logger = logging.getLogger(__name__)


class PortionStateRepository(Protocol):
    """Persistence interface for the last-used portion record."""

    def load(self) -> dict[str, object] | None:
        """Return the stored record, if any."""

    def save(self, record: dict[str, object]) -> None:
        """Replace the stored record."""


@dataclass
class PortionService:
    """Holds the current portion input and keeps it persisted."""

    repository: PortionStateRepository
    debug: bool = False
    portion: PortionInput = DEFAULT_PORTION

    def restore(self) -> PortionInput:
        """Load the persisted snapshot, falling back to defaults."""
        try:
            record = self.repository.load()
        except Exception:
            _logger.exception("Failed to load portion state")
            self.portion = DEFAULT_PORTION
            return self.portion
        self.portion = portion_from_record(record)
        if self.debug:
            _logger.info("Portion state restored: %s", self.portion)
        return self.portion

    def set_per100(self, key: str, value: object) -> PortionInput:
        """Update one per-100 g label value; negatives clamp to 0."""
        field_name = _PER100_FIELDS.get(key)
        if field_name is None:
            raise ValueError(f"Unknown per-100 g field: {key}")
        return self._update(**{field_name: value})

    def set_grams(self, grams: object) -> PortionInput:
        """Set grams per serving (at least 1)."""
        return self._update(grams_per_serving=grams)

    def set_servings(self, servings: object) -> PortionInput:
        """Set the serving count (at least 1)."""
        return self._update(serving_count=servings)

    def increment_servings(self) -> PortionInput:
        return self._update(serving_count=self.portion.serving_count + 1)

    def decrement_servings(self) -> PortionInput:
        return self._update(serving_count=max(1, self.portion.serving_count - 1))

    def reset(self) -> PortionInput:
        """Return to the default portion."""
        self.portion = DEFAULT_PORTION
        self._persist()
        return self.portion

    def derived(self) -> DerivedNutrition:
        return compute(self.portion)

    def report(self) -> NutritionReport:
        return build_report(self.portion)

    def _update(self, **changes: object) -> PortionInput:
        self.portion = normalize_portion(replace(self.portion, **changes))
        self._persist()
        if self.debug:
            _logger.info("Portion state updated: %s", self.portion)
        return self.portion

    def _persist(self) -> None:
        try:
            self.repository.save(portion_to_record(self.portion))
        except Exception:
            _logger.exception("Failed to save portion state")


def portion_to_record(portion: PortionInput) -> dict[str, object]:
    """Serialize a portion into the stored snapshot shape."""
    return {
        "per100": {
            "kcal": portion.calories_per_100,
            "fat": portion.fat_per_100,
            "carb": portion.carb_per_100,
            "protein": portion.protein_per_100,
        },
        "grams": portion.grams_per_serving,
        "servings": portion.serving_count,
    }


def portion_from_record(record: object) -> PortionInput:
    """Rebuild a portion from a stored snapshot.

    Each part is applied only when present and truthy; anything else keeps
    the default.
    """
    if not isinstance(record, dict):
        if record is not None:
            _logger.warning("Ignoring malformed portion state: %r", record)
        return DEFAULT_PORTION
    portion = DEFAULT_PORTION
    per100 = record.get("per100")
    if isinstance(per100, dict) and per100:
        portion = replace(
            portion,
            calories_per_100=per100.get("kcal"),
            fat_per_100=per100.get("fat"),
            carb_per_100=per100.get("carb"),
            protein_per_100=per100.get("protein"),
        )
    if record.get("grams"):
        portion = replace(portion, grams_per_serving=record["grams"])
    if record.get("servings"):
        portion = replace(portion, serving_count=record["servings"])
    return normalize_portion(portion)

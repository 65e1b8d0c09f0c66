"""Nutrition domain models."""

from dataclasses import dataclass
from enum import Enum

FAT_KCAL_PER_G = 9.0
CARB_KCAL_PER_G = 4.0
PROTEIN_KCAL_PER_G = 4.0

OK_BELOW_PCT = 5.0
WARN_FROM_PCT = 15.0


@dataclass(frozen=True)
class PortionInput:
    """Per-100 g label values plus the chosen portion."""

    calories_per_100: float
    fat_per_100: float
    carb_per_100: float
    protein_per_100: float
    grams_per_serving: float = 100.0
    serving_count: float = 1.0


DEFAULT_PORTION = PortionInput(
    calories_per_100=250.0,
    fat_per_100=10.0,
    carb_per_100=30.0,
    protein_per_100=12.0,
    grams_per_serving=100.0,
    serving_count=1.0,
)


@dataclass(frozen=True)
class MacroValues:
    """One value per macronutrient."""

    fat: float
    carb: float
    protein: float

    @property
    def total(self) -> float:
        return self.fat + self.carb + self.protein


@dataclass(frozen=True)
class DerivedNutrition:
    """Values derived from a portion input."""

    total_grams: float
    scale_factor: float
    fat_grams: float
    carb_grams: float
    protein_grams: float
    labeled_calories: float
    calories_from_macros_per_100: float
    calories_from_macros: float
    consistency_abs_diff: float
    consistency_pct_diff: float
    macro_calories: MacroValues
    macro_calorie_total: float
    macro_percent: MacroValues


class ConsistencyIntent(Enum):
    """Band of the label-vs-macros calorie discrepancy."""

    OK = "ok"
    DEFAULT = "default"
    WARN = "warn"

"""View models for rendering derived nutrition."""

from dataclasses import dataclass

from nutrition_calculator.domain.nutrition import ConsistencyIntent, DerivedNutrition

CHART_COLORS = ("#60a5fa", "#f472b6", "#34d399")


@dataclass(frozen=True)
class StatCard:
    """Headline value for the portion with a secondary hint."""

    title: str
    value: str
    hint: str | None = None


@dataclass(frozen=True)
class ChartPoint:
    """Single named value in a chart series."""

    name: str
    value: float
    color: str


@dataclass(frozen=True)
class MacroPill:
    """Percentage share of one macro with a clamped bar width."""

    label: str
    percent: float
    percent_label: str
    bar_width: float
    color: str


@dataclass(frozen=True)
class NutritionReport:
    """Everything a front end needs to present a portion."""

    derived: DerivedNutrition
    consistency_intent: ConsistencyIntent
    consistency_message: str
    total_grams_label: str
    stats: list[StatCard]
    calorie_split: list[ChartPoint]
    grams_by_macro: list[ChartPoint]
    macro_pills: list[MacroPill]
    tip: str

"""Derived nutrition computation."""

import math
from collections.abc import Mapping
from dataclasses import asdict

from nutrition_calculator.domain.nutrition import (
    CARB_KCAL_PER_G,
    FAT_KCAL_PER_G,
    OK_BELOW_PCT,
    PROTEIN_KCAL_PER_G,
    WARN_FROM_PCT,
    ConsistencyIntent,
    DerivedNutrition,
    MacroValues,
    PortionInput,
)

_FIELD_ALIASES = {
    "calories_per_100": ("calories_per_100", "kcal"),
    "fat_per_100": ("fat_per_100", "fat"),
    "carb_per_100": ("carb_per_100", "carb"),
    "protein_per_100": ("protein_per_100", "protein"),
    "grams_per_serving": ("grams_per_serving", "grams"),
    "serving_count": ("serving_count", "servings"),
}


def normalize_portion(raw: PortionInput | Mapping[str, object]) -> PortionInput:
    """Coerce raw values into a valid portion input.

    Label values that are missing, non-numeric, non-finite or negative become 0.
    Grams per serving and serving count fall back to 1 under the same
    conditions and whenever they are below 1. No upper bound is applied.

    Mappings may use the snake_case field names or the compact keys
    ``kcal``/``fat``/``carb``/``protein``/``grams``/``servings``, with the
    label values optionally nested under ``per100``.
    """
    if isinstance(raw, PortionInput):
        values: Mapping[str, object] = asdict(raw)
    else:
        values = _flatten(raw)
    return PortionInput(
        calories_per_100=_non_negative(_lookup(values, "calories_per_100")),
        fat_per_100=_non_negative(_lookup(values, "fat_per_100")),
        carb_per_100=_non_negative(_lookup(values, "carb_per_100")),
        protein_per_100=_non_negative(_lookup(values, "protein_per_100")),
        grams_per_serving=_at_least_one(_lookup(values, "grams_per_serving")),
        serving_count=_at_least_one(_lookup(values, "serving_count")),
    )


def compute(portion: PortionInput | Mapping[str, object]) -> DerivedNutrition:
    """Compute scaled macros, calorie breakdown and consistency for a portion.

    Pure and total: the input is normalized first, and both divisions are
    guarded so the result never contains NaN or infinity for finite input.
    """
    p = normalize_portion(portion)

    total_grams = p.grams_per_serving * p.serving_count
    scale_factor = total_grams / 100

    fat_grams = p.fat_per_100 * scale_factor
    carb_grams = p.carb_per_100 * scale_factor
    protein_grams = p.protein_per_100 * scale_factor

    labeled_calories = p.calories_per_100 * scale_factor

    # Per-100 g basis so the consistency check does not depend on portion size.
    calories_from_macros_per_100 = (
        p.fat_per_100 * FAT_KCAL_PER_G
        + p.carb_per_100 * CARB_KCAL_PER_G
        + p.protein_per_100 * PROTEIN_KCAL_PER_G
    )
    calories_from_macros = calories_from_macros_per_100 * scale_factor

    consistency_abs_diff = abs(p.calories_per_100 - calories_from_macros_per_100)
    consistency_pct_diff = (
        consistency_abs_diff / calories_from_macros_per_100 * 100
        if calories_from_macros_per_100 > 0
        else 0.0
    )

    macro_calories = MacroValues(
        fat=fat_grams * FAT_KCAL_PER_G,
        carb=carb_grams * CARB_KCAL_PER_G,
        protein=protein_grams * PROTEIN_KCAL_PER_G,
    )
    macro_calorie_total = macro_calories.total
    if macro_calorie_total > 0:
        macro_percent = MacroValues(
            fat=macro_calories.fat / macro_calorie_total * 100,
            carb=macro_calories.carb / macro_calorie_total * 100,
            protein=macro_calories.protein / macro_calorie_total * 100,
        )
    else:
        macro_percent = MacroValues(fat=0.0, carb=0.0, protein=0.0)

    return DerivedNutrition(
        total_grams=total_grams,
        scale_factor=scale_factor,
        fat_grams=fat_grams,
        carb_grams=carb_grams,
        protein_grams=protein_grams,
        labeled_calories=labeled_calories,
        calories_from_macros_per_100=calories_from_macros_per_100,
        calories_from_macros=calories_from_macros,
        consistency_abs_diff=consistency_abs_diff,
        consistency_pct_diff=consistency_pct_diff,
        macro_calories=macro_calories,
        macro_calorie_total=macro_calorie_total,
        macro_percent=macro_percent,
    )


def classify_consistency(pct_diff: float) -> ConsistencyIntent:
    """Band a percentage discrepancy into ok / default / warn."""
    if not math.isfinite(pct_diff) or pct_diff < OK_BELOW_PCT:
        return ConsistencyIntent.OK
    if pct_diff < WARN_FROM_PCT:
        return ConsistencyIntent.DEFAULT
    return ConsistencyIntent.WARN


def _flatten(raw: Mapping[str, object]) -> dict[str, object]:
    values = dict(raw)
    nested = values.pop("per100", None)
    if isinstance(nested, Mapping):
        for key, value in nested.items():
            values.setdefault(key, value)
    return values


def _lookup(values: Mapping[str, object], field_name: str) -> object:
    for key in _FIELD_ALIASES[field_name]:
        if key in values:
            return values[key]
    return None


def _to_float(value: object) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _non_negative(value: object) -> float:
    number = _to_float(value)
    if number is None:
        return 0.0
    return max(0.0, number)


def _at_least_one(value: object) -> float:
    number = _to_float(value)
    if number is None or number < 1:
        return 1.0
    return number

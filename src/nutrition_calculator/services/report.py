"""Build presentation view models from derived nutrition."""

from collections.abc import Mapping

from nutrition_calculator.domain.nutrition import PortionInput
from nutrition_calculator.domain.report import (
    CHART_COLORS,
    ChartPoint,
    MacroPill,
    NutritionReport,
    StatCard,
)
from nutrition_calculator.services.calculator import (
    classify_consistency,
    compute,
    normalize_portion,
)
from nutrition_calculator.services.formatting import format_number, format_percent

LABEL_ROUNDING_TIP = (
    "Tip: If calories differ from macro calories by more than ~5-10%, "
    "the label may round values or include fiber/polyols."
)


def build_report(portion: PortionInput | Mapping[str, object]) -> NutritionReport:
    """Compute a portion and arrange the results for display."""
    normalized = normalize_portion(portion)
    derived = compute(normalized)
    intent = classify_consistency(derived.consistency_pct_diff)

    consistency_message = (
        f"From macros: {format_number(derived.calories_from_macros_per_100)} kcal "
        f"per 100 g. Label says {format_number(normalized.calories_per_100)} kcal. "
        f"Diff: {format_percent(derived.consistency_pct_diff)}."
    )

    stats = [
        StatCard(
            title="Calories",
            value=f"{format_number(derived.labeled_calories)} kcal",
            hint=f"{format_number(derived.calories_from_macros)} kcal from macros",
        ),
        StatCard(
            title="Fat",
            value=f"{format_number(derived.fat_grams, 1)} g",
            hint=f"{format_number(derived.macro_calories.fat)} kcal",
        ),
        StatCard(
            title="Carbs",
            value=f"{format_number(derived.carb_grams, 1)} g",
            hint=f"{format_number(derived.macro_calories.carb)} kcal",
        ),
        StatCard(
            title="Protein",
            value=f"{format_number(derived.protein_grams, 1)} g",
            hint=f"{format_number(derived.macro_calories.protein)} kcal",
        ),
    ]

    calorie_split = _series(
        [
            ("Carbs", derived.macro_calories.carb),
            ("Protein", derived.macro_calories.protein),
            ("Fat", derived.macro_calories.fat),
        ]
    )
    grams_by_macro = _series(
        [
            ("Fat", derived.fat_grams),
            ("Carbs", derived.carb_grams),
            ("Protein", derived.protein_grams),
        ]
    )
    macro_pills = [
        _pill(label, percent, CHART_COLORS[index])
        for index, (label, percent) in enumerate(
            [
                ("Carbs", derived.macro_percent.carb),
                ("Protein", derived.macro_percent.protein),
                ("Fat", derived.macro_percent.fat),
            ]
        )
    ]

    return NutritionReport(
        derived=derived,
        consistency_intent=intent,
        consistency_message=consistency_message,
        total_grams_label=f"Total considered: {format_number(derived.total_grams)} g",
        stats=stats,
        calorie_split=calorie_split,
        grams_by_macro=grams_by_macro,
        macro_pills=macro_pills,
        tip=LABEL_ROUNDING_TIP,
    )


def render_text(report: NutritionReport) -> str:
    """Render a report as plain text lines."""
    lines = [
        "Nutrition Calculator",
        report.total_grams_label,
        f"Consistency: {report.consistency_intent.value}. "
        f"{report.consistency_message}",
        "Totals for your portion:",
    ]
    for stat in report.stats:
        hint = f" ({stat.hint})" if stat.hint else ""
        lines.append(f"- {stat.title}: {stat.value}{hint}")
    lines.append("Macro calorie split:")
    for pill in report.macro_pills:
        lines.append(f"- {pill.label}: {pill.percent_label}")
    lines.append(report.tip)
    return "\n".join(lines)


def _series(points: list[tuple[str, float]]) -> list[ChartPoint]:
    return [
        ChartPoint(name=name, value=value, color=CHART_COLORS[i % len(CHART_COLORS)])
        for i, (name, value) in enumerate(points)
    ]


def _pill(label: str, percent: float, color: str) -> MacroPill:
    return MacroPill(
        label=label,
        percent=percent,
        percent_label=format_percent(percent),
        bar_width=min(100.0, max(0.0, percent)),
        color=color,
    )

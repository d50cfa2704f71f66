"""Plain-text prompt rendering for computed metrics."""

from nutrition_planner.domain.metrics import MetricsResult

_VOWELS = frozenset("aeiouAEIOU")


def format_diet_prompt(result: MetricsResult, cuisine: str = "Indian") -> str:
    """Render daily targets into a copyable diet-plan request."""
    article = "an" if cuisine[:1] in _VOWELS else "a"
    lines = [
        f"Create {article} {cuisine} diet plan based on:",
        f"- Daily Calories: {result.daily_calories} kcal",
        f"- Protein: {result.protein_g} g",
        f"- Carbs: {result.carbs_g} g",
        f"- Fats: {result.fat_g} g",
        f"- Water Intake: {result.water_l_per_day:.2f} L/day",
        "Provide meal-wise breakdown (Breakfast, Lunch, Dinner).",
    ]
    return "\n".join(lines)

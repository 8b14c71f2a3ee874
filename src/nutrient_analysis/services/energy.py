"""Calorie estimation from macronutrients."""

import math

ATWATER_KCAL_PER_G = {
    "protein": 4.0,
    "carbs": 4.0,
    "fat": 9.0,
}


def estimate_calories(protein_g: float, carbs_g: float, fat_g: float) -> int:
    """Estimate kcal with Atwater factors, rounding half up.

    Returns 0 when the estimate is not a finite number.
    """
    total = (
        protein_g * ATWATER_KCAL_PER_G["protein"]
        + carbs_g * ATWATER_KCAL_PER_G["carbs"]
        + fat_g * ATWATER_KCAL_PER_G["fat"]
    )
    if not math.isfinite(total) or total < 0:
        return 0
    return math.floor(total + 0.5)

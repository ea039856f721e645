"""Body mass index (IMT) arithmetic.

This module is the single home of the category thresholds; every view that
needs a category goes through :func:`classify`.
"""
import enum

UNDERWEIGHT_BELOW = 18.5
NORMAL_BELOW = 25.0
OVERWEIGHT_BELOW = 30.0


class Category(str, enum.Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


CATEGORY_VALUES = tuple(c.value for c in Category)


def compute_index(weight_kg: float, height_cm: float) -> float:
    """weight / height(m)^2. Non-positive heights are the caller's job to reject."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def classify(index: float) -> Category:
    # lower bound of each bucket is inclusive
    if index < UNDERWEIGHT_BELOW:
        return Category.UNDERWEIGHT
    if index < NORMAL_BELOW:
        return Category.NORMAL
    if index < OVERWEIGHT_BELOW:
        return Category.OVERWEIGHT
    return Category.OBESE


def evaluate(weight_kg: float, height_cm: float):
    index = compute_index(weight_kg, height_cm)
    return index, classify(index)

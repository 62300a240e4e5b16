"""
Constants Package

Unit tables, validation whitelists and sample data.
"""

from .units import BASE_UNIT_FACTORS, UNIT_MAPPINGS
from .validation import (
    VALID_INGREDIENT_UNITS,
    VALID_RECIPE_UNITS,
    VALID_ITEM_TYPES,
    VALID_EXPENSE_TYPES,
    MAX_AMOUNT,
    MIN_LINE_QUANTITY,
    MAX_LENGTHS,
)
from .samples import SAMPLE_INGREDIENTS, SAMPLE_RECIPES, SAMPLE_DISHES, SAMPLE_EXPENSES

"""
Services Package

Business logic modules for the food cost application.
"""

from .cost import (
    base_unit_factor,
    unit_cost,
    ingredient_unit_cost,
    recipe_cost,
    recipe_cost_per_base_unit,
    dish_cost,
    dish_cost_breakdown,
    find_dangling_references,
)

from .pricing import (
    DEFAULT_DESIRED_MARGIN,
    PricingError,
    margin_from_price,
    price_from_margin,
    profit,
    simulate,
)

from .advisor import (
    ADVISOR_FIELDS,
    AdvisorError,
    suggest_price,
)

from .expenses import (
    months_ago,
    summarize_expenses,
)

__all__ = [
    # Cost
    'base_unit_factor',
    'unit_cost',
    'ingredient_unit_cost',
    'recipe_cost',
    'recipe_cost_per_base_unit',
    'dish_cost',
    'dish_cost_breakdown',
    'find_dangling_references',
    # Pricing
    'DEFAULT_DESIRED_MARGIN',
    'PricingError',
    'margin_from_price',
    'price_from_margin',
    'profit',
    'simulate',
    # Advisor
    'ADVISOR_FIELDS',
    'AdvisorError',
    'suggest_price',
    # Expenses
    'months_ago',
    'summarize_expenses',
]

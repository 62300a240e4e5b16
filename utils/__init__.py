# Utility modules for the food cost app
from .sanitizer import sanitize_text, sanitize_name
from .validation import (
    ValidationError,
    validate_ingredient, validate_recipe, validate_dish, validate_expense,
    validate_pricing, validate_advisor
)

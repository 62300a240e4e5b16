"""
Validation Constants

Contains whitelist values for validating user input to prevent
injection attacks and ensure data integrity.
"""

# Units an ingredient can be purchased in
VALID_INGREDIENT_UNITS = {'g', 'kg', 'ml', 'l', 'un'}

# Units a recipe's output can be declared in
VALID_RECIPE_UNITS = {'kg', 'l', 'un'}

# Kinds of line items on a dish
VALID_ITEM_TYPES = {'ingredient', 'recipe'}

# Expense kinds
VALID_EXPENSE_TYPES = {'fixed', 'variable'}

# Upper bound for any money or quantity field
MAX_AMOUNT = 9_999_999.99

# Smallest quantity accepted on a recipe or dish line
MIN_LINE_QUANTITY = 0.01

# Maximum field lengths for security
MAX_LENGTHS = {
    'ingredient_name': 255,
    'recipe_name': 255,
    'dish_name': 255,
    'description': 255,
    'category': 255,
}

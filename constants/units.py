"""
Unit Constants and Conversion Tables

Contains the unit codes accepted for ingredients and recipes and the
factors that bring them to the base units used for costing.
"""

# Multiplier from a unit to its base unit (g, ml or un)
BASE_UNIT_FACTORS = {
    'g': 1,
    'kg': 1000,
    'ml': 1,
    'l': 1000,
    'un': 1,
}

# Spelled-out aliases accepted from forms (lowercase input -> unit code)
UNIT_MAPPINGS = {
    'gram': 'g', 'grams': 'g', 'gr': 'g',
    'kilogram': 'kg', 'kilograms': 'kg', 'kilo': 'kg', 'kilos': 'kg',
    'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml',
    'liter': 'l', 'liters': 'l', 'litre': 'l', 'litres': 'l', 'lt': 'l',
    'each': 'un', 'unit': 'un', 'units': 'un', 'ea': 'un', 'pc': 'un', 'pcs': 'un',
}

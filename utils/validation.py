"""
Request Payload Validation

Checks JSON bodies before anything is computed or stored. Every problem
is collected per field so the client gets all messages at once.
"""

from datetime import date

from constants import (
    VALID_INGREDIENT_UNITS,
    VALID_RECIPE_UNITS,
    VALID_ITEM_TYPES,
    VALID_EXPENSE_TYPES,
    UNIT_MAPPINGS,
    MAX_AMOUNT,
    MIN_LINE_QUANTITY,
    MAX_LENGTHS,
)
from services.advisor import ADVISOR_FIELDS
from .sanitizer import sanitize_name, sanitize_text


class ValidationError(Exception):
    """Raised when a payload fails validation; `errors` maps field -> messages."""

    def __init__(self, errors):
        super().__init__('Invalid data')
        self.errors = errors


class _Errors(dict):

    def add(self, field, message):
        self.setdefault(field, []).append(message)

    def raise_if_any(self):
        if self:
            raise ValidationError(dict(self))


def _number(payload, field, errors, minimum=None, exclusive=False, maximum=MAX_AMOUNT,
            required=True, default=None, label=None):
    """Coerce payload[field] to float, recording an error under `label` (or field) on failure."""
    value = payload.get(field)
    field = label or field
    if value is None or value == '':
        if required:
            errors.add(field, 'This field is required')
        return default

    if isinstance(value, bool):
        errors.add(field, 'Must be a number')
        return default
    try:
        value = float(value)
    except (ValueError, TypeError):
        errors.add(field, 'Must be a number')
        return default

    if value != value or value in (float('inf'), float('-inf')):
        errors.add(field, 'Must be a finite number')
        return default
    if minimum is not None:
        if exclusive and value <= minimum:
            errors.add(field, f'Must be greater than {minimum:g}')
            return default
        if not exclusive and value < minimum:
            errors.add(field, f'Must be at least {minimum:g}')
            return default
    if maximum is not None and value > maximum:
        errors.add(field, f'Must be at most {maximum:g}')
        return default
    return value


def _integer_id(value):
    if isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (ValueError, TypeError):
        return None
    if number < 1 or number != float(value):
        return None
    return number


def _name(payload, field, errors, max_length):
    name = sanitize_name(payload.get(field), max_length=max_length)
    if not name:
        errors.add(field, 'This field is required')
    return name


def _unit(payload, errors, allowed):
    raw = str(payload.get('unit') or '').strip().lower()
    unit = UNIT_MAPPINGS.get(raw, raw)
    if unit not in allowed:
        errors.add('unit', f"Must be one of: {', '.join(sorted(allowed))}")
    return unit


def _require_object(payload):
    if not isinstance(payload, dict):
        raise ValidationError({'_': ['Request body must be a JSON object']})


def validate_ingredient(payload):
    """Validate an ingredient body; returns name, price, package_size, unit."""
    _require_object(payload)
    errors = _Errors()
    data = {
        'name': _name(payload, 'name', errors, MAX_LENGTHS['ingredient_name']),
        'price': _number(payload, 'price', errors, minimum=0),
        'package_size': _number(payload, 'package_size', errors, minimum=0, exclusive=True),
        'unit': _unit(payload, errors, VALID_INGREDIENT_UNITS),
    }
    errors.raise_if_any()
    return data


def validate_recipe(payload):
    """
    Validate a recipe body.

    Ingredient lines are normalized to {"ingredient_id": int, "quantity": float}.
    An empty line list is allowed for recipes.
    """
    _require_object(payload)
    errors = _Errors()
    data = {
        'name': _name(payload, 'name', errors, MAX_LENGTHS['recipe_name']),
        'yield_factor': _number(payload, 'yield_factor', errors, minimum=0, exclusive=True),
        'gross_weight': _number(payload, 'gross_weight', errors, minimum=0, required=False, default=0.0),
        'unit': _unit(payload, errors, VALID_RECIPE_UNITS),
    }

    lines = payload.get('ingredients', [])
    if not isinstance(lines, list):
        errors.add('ingredients', 'Must be a list')
        lines = []

    normalized = []
    for index, line in enumerate(lines):
        field = f'ingredients.{index}'
        if not isinstance(line, dict):
            errors.add(field, 'Must be an object')
            continue
        ingredient_id = _integer_id(line.get('ingredient_id'))
        if ingredient_id is None:
            errors.add(f'{field}.ingredient_id', 'Must be a positive integer')
        quantity = _number(line, 'quantity', errors, minimum=MIN_LINE_QUANTITY,
                           label=f'{field}.quantity')
        if ingredient_id is not None and quantity is not None:
            normalized.append({'ingredient_id': ingredient_id, 'quantity': quantity})

    data['ingredients'] = normalized
    errors.raise_if_any()
    return data


def validate_dish(payload):
    """
    Validate a dish body.

    Needs at least one item; items are normalized to
    {"item_id": int, "item_type": str, "quantity": float}. Any total_cost
    in the body is ignored.
    """
    _require_object(payload)
    errors = _Errors()
    data = {
        'name': _name(payload, 'name', errors, MAX_LENGTHS['dish_name']),
        'selling_price': _number(payload, 'selling_price', errors, minimum=0),
    }

    items = payload.get('items')
    if not isinstance(items, list) or not items:
        errors.add('items', 'At least one item is required')
        items = []

    normalized = []
    for index, item in enumerate(items):
        field = f'items.{index}'
        if not isinstance(item, dict):
            errors.add(field, 'Must be an object')
            continue
        item_id = _integer_id(item.get('item_id'))
        if item_id is None:
            errors.add(f'{field}.item_id', 'Must be a positive integer')
        item_type = str(item.get('item_type') or '').strip().lower()
        if item_type not in VALID_ITEM_TYPES:
            errors.add(f'{field}.item_type', "Must be 'ingredient' or 'recipe'")
        quantity = _number(item, 'quantity', errors, minimum=MIN_LINE_QUANTITY,
                           label=f'{field}.quantity')
        if item_id is not None and item_type in VALID_ITEM_TYPES and quantity is not None:
            normalized.append({'item_id': item_id, 'item_type': item_type, 'quantity': quantity})

    data['items'] = normalized
    errors.raise_if_any()
    return data


def validate_expense(payload):
    """Validate an expense body; the date must be ISO formatted (YYYY-MM-DD)."""
    _require_object(payload)
    errors = _Errors()
    data = {
        'description': _name(payload, 'description', errors, MAX_LENGTHS['description']),
        'amount': _number(payload, 'amount', errors, minimum=0),
        'category': sanitize_text(payload.get('category'), max_length=MAX_LENGTHS['category']),
    }
    if not data['category']:
        errors.add('category', 'This field is required')

    expense_type = str(payload.get('type') or '').strip().lower()
    if expense_type not in VALID_EXPENSE_TYPES:
        errors.add('type', "Must be 'fixed' or 'variable'")
    data['type'] = expense_type

    raw_date = payload.get('date')
    try:
        data['date'] = date.fromisoformat(str(raw_date)[:10])
    except (ValueError, TypeError):
        errors.add('date', 'Must be a date in YYYY-MM-DD format')
        data['date'] = None

    errors.raise_if_any()
    return data


def validate_pricing(payload):
    """Validate a pricing simulation body (total_cost, desired_margin, selling_price)."""
    _require_object(payload)
    errors = _Errors()
    data = {
        'total_cost': _number(payload, 'total_cost', errors, minimum=0),
        'desired_margin': _number(payload, 'desired_margin', errors, minimum=None,
                                  maximum=None, required=False),
        'selling_price': _number(payload, 'selling_price', errors, minimum=0, required=False),
    }
    errors.raise_if_any()
    return data


def validate_advisor(payload):
    """Validate the five price advisor inputs; all are non-negative numbers."""
    _require_object(payload)
    errors = _Errors()
    data = {field: _number(payload, field, errors, minimum=0, maximum=None) for field in ADVISOR_FIELDS}
    errors.raise_if_any()
    return data

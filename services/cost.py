"""
Cost Calculation Service

Functions for propagating costs from ingredients to recipes to dishes.

All quantities on recipe and dish lines are in base units (g, ml or un).
Ingredient package sizes and recipe outputs declared in kg or l are
brought to g or ml with a factor of 1000 before dividing.
"""

import logging

from constants import BASE_UNIT_FACTORS

logger = logging.getLogger(__name__)


def base_unit_factor(unit):
    """Multiplier that converts a quantity in `unit` to its base unit."""
    return BASE_UNIT_FACTORS.get((unit or '').lower(), 1)


def unit_cost(price, package_size, unit):
    """
    Cost of one base unit of a purchased package.

    Args:
        price: What the package costs
        package_size: Package size expressed in `unit`
        unit: One of g, kg, ml, l, un

    Returns:
        Cost per gram, millilitre or each. 0.0 when package_size <= 0.
    """
    size = float(package_size or 0)
    if size <= 0:
        return 0.0
    return float(price or 0) / (size * base_unit_factor(unit))


def ingredient_unit_cost(ingredient):
    """Unit cost computed from an ingredient's current price and package."""
    return unit_cost(ingredient.price, ingredient.package_size, ingredient.unit)


def recipe_cost(lines, resolve_ingredient):
    """
    Total cost of a recipe batch.

    Args:
        lines: Iterable of {"ingredient_id", "quantity"} dicts
        resolve_ingredient: Callable id -> Ingredient or None

    Unresolved ingredients contribute nothing.
    """
    total = 0.0
    for line in lines or []:
        ingredient = resolve_ingredient(line['ingredient_id'])
        if ingredient is None:
            logger.warning("Recipe line references unknown ingredient %s", line['ingredient_id'])
            continue
        total += ingredient_unit_cost(ingredient) * float(line['quantity'])
    return total


def recipe_cost_per_base_unit(recipe):
    """
    Cost of one base unit (g, ml or each) of a recipe's output.

    The batch total is spread over yield_factor x base-unit factor of the
    recipe's declared unit, so a 1.2 kg yield spreads over 1200 g.
    Returns 0.0 when the yield is not positive.
    """
    yield_factor = float(recipe.yield_factor or 0)
    if yield_factor <= 0:
        return 0.0
    return float(recipe.total_cost or 0) / (yield_factor * base_unit_factor(recipe.unit))


def _line_unit_cost(line, resolve_ingredient, resolve_recipe):
    """Return (item, cost per base unit) for a dish line; item is None if unresolved."""
    if line['item_type'] == 'ingredient':
        ingredient = resolve_ingredient(line['item_id'])
        if ingredient is None:
            return None, 0.0
        return ingredient, ingredient_unit_cost(ingredient)

    if line['item_type'] == 'recipe':
        recipe = resolve_recipe(line['item_id'])
        if recipe is None:
            return None, 0.0
        return recipe, recipe_cost_per_base_unit(recipe)

    return None, 0.0


def dish_cost_breakdown(lines, resolve_ingredient, resolve_recipe):
    """
    Per-line costs of a dish.

    Args:
        lines: Iterable of {"item_id", "item_type", "quantity"} dicts
        resolve_ingredient: Callable id -> Ingredient or None
        resolve_recipe: Callable id -> Recipe or None

    Returns:
        List of dicts with item_id, item_type, quantity, name, unit_cost,
        cost and resolved. Unresolved lines have cost 0.0.
    """
    breakdown = []
    for line in lines or []:
        quantity = float(line['quantity'])
        item, per_unit = _line_unit_cost(line, resolve_ingredient, resolve_recipe)
        if item is None:
            logger.warning(
                "Dish line references unknown %s %s", line['item_type'], line['item_id']
            )
        breakdown.append({
            'item_id': line['item_id'],
            'item_type': line['item_type'],
            'quantity': quantity,
            'name': item.name if item is not None else None,
            'unit_cost': per_unit,
            'cost': per_unit * quantity,
            'resolved': item is not None,
        })
    return breakdown


def dish_cost(lines, resolve_ingredient, resolve_recipe):
    """Total cost of a dish: sum of its line costs."""
    return sum(
        entry['cost']
        for entry in dish_cost_breakdown(lines, resolve_ingredient, resolve_recipe)
    )


def find_dangling_references(recipes, dishes, ingredient_ids, recipe_ids):
    """
    List recipe and dish lines whose reference no longer resolves.

    Args:
        recipes: Iterable of Recipe objects
        dishes: Iterable of Dish objects
        ingredient_ids: Set of existing ingredient ids
        recipe_ids: Set of existing recipe ids

    Returns:
        List of dicts describing each dangling line
    """
    dangling = []
    for recipe in recipes:
        for line in recipe.ingredients or []:
            if line['ingredient_id'] not in ingredient_ids:
                dangling.append({
                    'owner_type': 'recipe',
                    'owner_id': recipe.id,
                    'owner_name': recipe.name,
                    'item_type': 'ingredient',
                    'item_id': line['ingredient_id'],
                })

    known = {'ingredient': ingredient_ids, 'recipe': recipe_ids}
    for dish in dishes:
        for line in dish.items or []:
            if line['item_id'] not in known.get(line['item_type'], ()):
                dangling.append({
                    'owner_type': 'dish',
                    'owner_id': dish.id,
                    'owner_name': dish.name,
                    'item_type': line['item_type'],
                    'item_id': line['item_id'],
                })
    return dangling

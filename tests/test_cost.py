from types import SimpleNamespace

import pytest

from services.cost import (
    unit_cost, ingredient_unit_cost, recipe_cost, recipe_cost_per_base_unit,
    dish_cost, dish_cost_breakdown, find_dangling_references,
)


def ingredient(id, price, package_size, unit, name='Item'):
    return SimpleNamespace(id=id, name=name, price=price, package_size=package_size, unit=unit)


def recipe(id, total_cost, yield_factor, unit, name='Prep', ingredients=None):
    return SimpleNamespace(id=id, name=name, total_cost=total_cost, yield_factor=yield_factor,
                           unit=unit, ingredients=ingredients or [])


@pytest.mark.parametrize('price,size', [(20, 5000), (0, 10), (3.5, 0.25), (1000, 1)])
def test_unit_cost_base_units(price, size):
    assert unit_cost(price, size, 'g') == pytest.approx(price / size)
    assert unit_cost(price, size, 'ml') == pytest.approx(price / size)
    assert unit_cost(price, size, 'un') == pytest.approx(price / size)


@pytest.mark.parametrize('price,size', [(40, 1), (12, 2.5), (0, 3)])
def test_unit_cost_normalizes_kilograms_and_litres(price, size):
    assert unit_cost(price, size, 'kg') == pytest.approx(price / (size * 1000))
    assert unit_cost(price, size, 'l') == pytest.approx(price / (size * 1000))


@pytest.mark.parametrize('size', [0, -1, -0.5, None])
def test_unit_cost_non_positive_package_is_zero(size):
    assert unit_cost(20, size, 'g') == 0.0
    assert unit_cost(20, size, 'kg') == 0.0


def test_unit_cost_rice_scenario():
    rice = ingredient(1, 20, 5000, 'g')
    assert ingredient_unit_cost(rice) == pytest.approx(0.004)
    lines = [{'ingredient_id': 1, 'quantity': 500}]
    assert recipe_cost(lines, {1: rice}.get) == pytest.approx(2.00)


def test_recipe_cost_sums_lines():
    catalog = {
        1: ingredient(1, 20, 5000, 'g'),
        2: ingredient(2, 9, 900, 'ml'),
        3: ingredient(3, 40, 1, 'kg'),
    }
    lines = [
        {'ingredient_id': 1, 'quantity': 500},
        {'ingredient_id': 2, 'quantity': 10},
        {'ingredient_id': 3, 'quantity': 1000},
    ]
    assert recipe_cost(lines, catalog.get) == pytest.approx(2.0 + 0.1 + 40.0)


def test_recipe_cost_is_linear_in_quantities():
    catalog = {1: ingredient(1, 20, 5000, 'g'), 2: ingredient(2, 4, 200, 'g')}
    lines = [{'ingredient_id': 1, 'quantity': 500}, {'ingredient_id': 2, 'quantity': 37.5}]
    doubled = [dict(line, quantity=line['quantity'] * 2) for line in lines]
    assert recipe_cost(doubled, catalog.get) == pytest.approx(2 * recipe_cost(lines, catalog.get))


def test_recipe_cost_skips_unknown_ingredient():
    catalog = {1: ingredient(1, 20, 5000, 'g')}
    lines = [{'ingredient_id': 1, 'quantity': 500}, {'ingredient_id': 99, 'quantity': 100}]
    assert recipe_cost(lines, catalog.get) == pytest.approx(2.0)


def test_recipe_cost_empty():
    assert recipe_cost([], {}.get) == 0.0


def test_recipe_cost_per_base_unit_uses_yield_and_unit():
    stroganoff = recipe(4, 49.31, 1.2, 'kg')
    assert recipe_cost_per_base_unit(stroganoff) == pytest.approx(49.31 / 1200)

    per_portion = recipe(5, 30, 10, 'un')
    assert recipe_cost_per_base_unit(per_portion) == pytest.approx(3.0)


@pytest.mark.parametrize('yield_factor', [0, -1])
def test_recipe_cost_per_base_unit_non_positive_yield(yield_factor):
    assert recipe_cost_per_base_unit(recipe(1, 10, yield_factor, 'kg')) == 0.0


def test_dish_cost_recipe_line_scenario():
    recipes = {4: recipe(4, 49.31, 1.2, 'kg')}
    lines = [{'item_id': 4, 'item_type': 'recipe', 'quantity': 300}]
    assert dish_cost(lines, {}.get, recipes.get) == pytest.approx(12.3275)


def test_dish_cost_mixes_ingredients_and_recipes():
    ingredients = {7: ingredient(7, 15, 500, 'g')}
    recipes = {1: recipe(1, 2.19, 1, 'kg'), 4: recipe(4, 49.31, 1.2, 'kg')}
    lines = [
        {'item_id': 1, 'item_type': 'recipe', 'quantity': 200},
        {'item_id': 4, 'item_type': 'recipe', 'quantity': 300},
        {'item_id': 7, 'item_type': 'ingredient', 'quantity': 50},
    ]
    expected = 2.19 / 1000 * 200 + 49.31 / 1200 * 300 + 0.03 * 50
    assert dish_cost(lines, ingredients.get, recipes.get) == pytest.approx(expected)


def test_dish_cost_unresolved_line_contributes_nothing():
    ingredients = {7: ingredient(7, 15, 500, 'g')}
    recipes = {4: recipe(4, 49.31, 1.2, 'kg')}
    lines = [
        {'item_id': 4, 'item_type': 'recipe', 'quantity': 300},
        {'item_id': 7, 'item_type': 'ingredient', 'quantity': 50},
    ]
    with_missing = lines + [
        {'item_id': 99, 'item_type': 'recipe', 'quantity': 100},
        {'item_id': 98, 'item_type': 'ingredient', 'quantity': 100},
    ]
    assert dish_cost(with_missing, ingredients.get, recipes.get) == pytest.approx(
        dish_cost(lines, ingredients.get, recipes.get)
    )


def test_dish_cost_does_not_confuse_item_types():
    # Same id exists only as an ingredient; a recipe line with that id is unresolved
    ingredients = {1: ingredient(1, 10, 10, 'g')}
    lines = [{'item_id': 1, 'item_type': 'recipe', 'quantity': 5}]
    assert dish_cost(lines, ingredients.get, {}.get) == 0.0


def test_dish_cost_breakdown_entries():
    ingredients = {7: ingredient(7, 15, 500, 'g', name='Shoestring Potatoes')}
    lines = [
        {'item_id': 7, 'item_type': 'ingredient', 'quantity': 50},
        {'item_id': 3, 'item_type': 'recipe', 'quantity': 10},
    ]
    first, second = dish_cost_breakdown(lines, ingredients.get, {}.get)

    assert first['name'] == 'Shoestring Potatoes'
    assert first['resolved'] is True
    assert first['unit_cost'] == pytest.approx(0.03)
    assert first['cost'] == pytest.approx(1.5)

    assert second['resolved'] is False
    assert second['name'] is None
    assert second['cost'] == 0.0


def test_find_dangling_references():
    recipes = [recipe(1, 0, 1, 'kg', name='Rice', ingredients=[
        {'ingredient_id': 1, 'quantity': 10},
        {'ingredient_id': 2, 'quantity': 10},
    ])]
    dishes = [SimpleNamespace(id=5, name='Plate', items=[
        {'item_id': 1, 'item_type': 'recipe', 'quantity': 100},
        {'item_id': 8, 'item_type': 'recipe', 'quantity': 100},
        {'item_id': 1, 'item_type': 'ingredient', 'quantity': 100},
    ])]

    dangling = find_dangling_references(recipes, dishes, ingredient_ids={1}, recipe_ids={1})

    assert dangling == [
        {'owner_type': 'recipe', 'owner_id': 1, 'owner_name': 'Rice',
         'item_type': 'ingredient', 'item_id': 2},
        {'owner_type': 'dish', 'owner_id': 5, 'owner_name': 'Plate',
         'item_type': 'recipe', 'item_id': 8},
    ]

"""
Smoke tests for the food cost app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('FLASK_ENV', 'testing')

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, db
    assert app is not None
    assert db is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Ingredient, Recipe, Dish, Expense
    assert Ingredient is not None
    assert Dish is not None
    print("OK: Models import successfully")

def test_services_import():
    """Verify cost and pricing services can be imported."""
    from services import unit_cost, recipe_cost, dish_cost, price_from_margin, suggest_price
    assert callable(unit_cost)
    assert callable(recipe_cost)
    assert callable(dish_cost)
    assert callable(price_from_margin)
    assert callable(suggest_price)
    print("OK: Services import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import BASE_UNIT_FACTORS, VALID_INGREDIENT_UNITS, VALID_ITEM_TYPES
    assert 'kg' in BASE_UNIT_FACTORS
    assert 'un' in VALID_INGREDIENT_UNITS
    assert 'recipe' in VALID_ITEM_TYPES
    print("OK: Constants import successfully")

def test_conversion_constants_unchanged():
    """Verify critical conversion constants have expected values."""
    from constants import BASE_UNIT_FACTORS

    # These values must not change
    assert BASE_UNIT_FACTORS['g'] == 1
    assert BASE_UNIT_FACTORS['kg'] == 1000
    assert BASE_UNIT_FACTORS['ml'] == 1
    assert BASE_UNIT_FACTORS['l'] == 1000
    assert BASE_UNIT_FACTORS['un'] == 1
    print("OK: Conversion constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import app, db
    app.config['TESTING'] = True
    with app.app_context():
        db.create_all()
        with app.test_client() as client:
            response = client.get('/')
            assert response.status_code == 200
        db.drop_all()
    print("OK: App serves dashboard")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_services_import,
        test_constants_import,
        test_conversion_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)

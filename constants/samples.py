"""
Sample Restaurant Data

Seed rows loaded into an empty database. Line items reference rows by
their 1-based position in these lists and are remapped to real ids when
seeding. Derived costs are recomputed, never copied.
"""

SAMPLE_INGREDIENTS = [
    {'name': 'Raw Rice', 'price': 20, 'package_size': 5000, 'unit': 'g'},
    {'name': 'Raw Beans', 'price': 8, 'package_size': 1000, 'unit': 'g'},
    {'name': 'Soybean Oil', 'price': 9, 'package_size': 900, 'unit': 'ml'},
    {'name': 'Garlic', 'price': 15, 'package_size': 1000, 'unit': 'g'},
    {'name': 'Salt', 'price': 3, 'package_size': 1000, 'unit': 'g'},
    {'name': 'Ground Beef', 'price': 40, 'package_size': 1, 'unit': 'kg'},
    {'name': 'Shoestring Potatoes', 'price': 15, 'package_size': 500, 'unit': 'g'},
    {'name': 'Table Cream', 'price': 4, 'package_size': 200, 'unit': 'g'},
    {'name': 'Tomato Paste', 'price': 5, 'package_size': 340, 'unit': 'g'},
]

SAMPLE_RECIPES = [
    {
        'name': 'Cooked Rice', 'yield_factor': 1, 'gross_weight': 1000, 'unit': 'kg',
        'ingredients': [
            {'ingredient_id': 1, 'quantity': 500},
            {'ingredient_id': 3, 'quantity': 10},
            {'ingredient_id': 4, 'quantity': 5},
            {'ingredient_id': 5, 'quantity': 5},
        ],
    },
    {
        'name': 'Cooked Beans', 'yield_factor': 1, 'gross_weight': 1200, 'unit': 'kg',
        'ingredients': [
            {'ingredient_id': 2, 'quantity': 1000},
            {'ingredient_id': 4, 'quantity': 10},
            {'ingredient_id': 5, 'quantity': 8},
        ],
    },
    {
        'name': 'Sauteed Ground Beef', 'yield_factor': 0.8, 'gross_weight': 1000, 'unit': 'kg',
        'ingredients': [
            {'ingredient_id': 6, 'quantity': 1000},
            {'ingredient_id': 3, 'quantity': 20},
            {'ingredient_id': 4, 'quantity': 5},
            {'ingredient_id': 5, 'quantity': 5},
        ],
    },
    {
        'name': 'Beef Stroganoff', 'yield_factor': 1.2, 'gross_weight': 1200, 'unit': 'kg',
        'ingredients': [
            {'ingredient_id': 6, 'quantity': 1000},
            {'ingredient_id': 8, 'quantity': 400},
            {'ingredient_id': 9, 'quantity': 340},
            {'ingredient_id': 3, 'quantity': 20},
            {'ingredient_id': 4, 'quantity': 5},
            {'ingredient_id': 5, 'quantity': 5},
        ],
    },
]

SAMPLE_DISHES = [
    {
        'name': 'Stroganoff Plate', 'selling_price': 29.9,
        'items': [
            {'item_id': 1, 'item_type': 'recipe', 'quantity': 200},
            {'item_id': 4, 'item_type': 'recipe', 'quantity': 300},
            {'item_id': 7, 'item_type': 'ingredient', 'quantity': 50},
        ],
    },
]

SAMPLE_EXPENSES = [
    {'description': 'Rent', 'amount': 3000, 'type': 'fixed', 'category': 'Property', 'date': '2023-05-01'},
    {'description': 'Electricity Bill', 'amount': 450, 'type': 'fixed', 'category': 'Utilities', 'date': '2023-05-10'},
    {'description': 'Water Bill', 'amount': 200, 'type': 'fixed', 'category': 'Utilities', 'date': '2023-05-12'},
    {'description': 'Digital Marketing', 'amount': 800, 'type': 'variable', 'category': 'Marketing', 'date': '2023-05-15'},
    {'description': 'Equipment Maintenance', 'amount': 500, 'type': 'variable', 'category': 'Maintenance', 'date': '2023-05-20'},
]

from flask import Flask, request, jsonify
from flask_migrate import Migrate
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from datetime import date
import logging
import math

from config import get_config
from constants import SAMPLE_INGREDIENTS, SAMPLE_RECIPES, SAMPLE_DISHES, SAMPLE_EXPENSES
from models import db, Ingredient, Recipe, Dish, Expense
from services import (
    ingredient_unit_cost, recipe_cost, dish_cost_breakdown, find_dangling_references,
    margin_from_price, simulate, PricingError,
    suggest_price, AdvisorError,
    months_ago, summarize_expenses,
)
from utils.validation import (
    ValidationError,
    validate_ingredient, validate_recipe, validate_dish, validate_expense,
    validate_pricing, validate_advisor
)

app = Flask(__name__)
app.config.from_object(get_config())
app.json.sort_keys = app.config['JSON_SORT_KEYS']

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)


def _json_body():
    """Request body as parsed JSON, or None when it is missing or malformed."""
    return request.get_json(silent=True)


def _query_float(name):
    """Optional float query parameter; raises ValidationError when malformed."""
    raw = request.args.get(name)
    if raw is None or raw == '':
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError({name: ['Must be a number']})
    if not math.isfinite(value):
        raise ValidationError({name: ['Must be a finite number']})
    return value


# ============================================
# DERIVED COSTS
# ============================================

def load_resolvers():
    """
    Read every ingredient and recipe once and return lookup callables.

    Costs are recomputed against whatever these two reads return; a
    concurrent write in between is not isolated from us.
    """
    ingredients = {i.id: i for i in Ingredient.query.all()}
    recipes = {r.id: r for r in Recipe.query.all()}
    return ingredients.get, recipes.get


def apply_ingredient_cost(ingredient):
    ingredient.unit_cost = ingredient_unit_cost(ingredient)


def apply_recipe_cost(recipe, resolve_ingredient):
    # Unrounded: dish lines divide this by yield, so cents would be magnified
    recipe.total_cost = recipe_cost(recipe.ingredients, resolve_ingredient)


def apply_dish_cost(dish, resolve_ingredient, resolve_recipe):
    breakdown = dish_cost_breakdown(dish.items, resolve_ingredient, resolve_recipe)
    dish.total_cost = round(sum(entry['cost'] for entry in breakdown), 2)
    return breakdown


def refresh_derived_costs():
    """Recompute every recipe total, then every dish total (dishes read recipe totals)."""
    resolve_ingredient, resolve_recipe = load_resolvers()
    recipes = Recipe.query.all()
    for recipe in recipes:
        apply_recipe_cost(recipe, resolve_ingredient)
    dishes = Dish.query.all()
    for dish in dishes:
        apply_dish_cost(dish, resolve_ingredient, resolve_recipe)
    logger.debug("Recomputed costs for %d recipes and %d dishes", len(recipes), len(dishes))


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(ValidationError)
def handle_validation_error(e):
    return jsonify({'message': 'Invalid data', 'errors': e.errors}), 400


@app.errorhandler(PricingError)
def handle_pricing_error(e):
    return jsonify({'message': str(e)}), 400


@app.errorhandler(AdvisorError)
def handle_advisor_error(e):
    return jsonify({'message': 'Could not get a price suggestion. Please try again later.'}), 502


@app.errorhandler(SQLAlchemyError)
def handle_database_error(e):
    logger.exception("Database error")
    db.session.rollback()
    return jsonify({'message': 'Database error'}), 500


@app.errorhandler(HTTPException)
def handle_http_error(e):
    message = 'Not found' if e.code == 404 else e.description
    return jsonify({'message': message}), e.code


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    dishes = Dish.query.all()
    margins = [margin_from_price(d.selling_price, d.total_cost) for d in dishes if d.selling_price > 0]
    return jsonify({
        'ingredients': Ingredient.query.count(),
        'recipes': Recipe.query.count(),
        'dishes': len(dishes),
        'average_margin': sum(margins) / len(margins) if margins else 0.0,
        'expenses': summarize_expenses(Expense.query.all()),
    })

# ============================================
# ROUTES - INGREDIENTS
# ============================================

@app.route('/api/ingredients', methods=['GET'])
def ingredients_list():
    ingredients = Ingredient.query.order_by(Ingredient.name).all()
    return jsonify([i.to_dict() for i in ingredients])


@app.route('/api/ingredients', methods=['POST'])
def ingredient_add():
    data = validate_ingredient(_json_body())
    ingredient = Ingredient(**data)
    apply_ingredient_cost(ingredient)
    db.session.add(ingredient)
    db.session.flush()
    # A new id may match a dangling reference left by a deleted ingredient
    refresh_derived_costs()
    db.session.commit()
    logger.info("Ingredient %s created (%s)", ingredient.id, ingredient.name)
    return jsonify(ingredient.to_dict()), 201


@app.route('/api/ingredients/<int:id>', methods=['GET'])
def ingredient_view(id):
    return jsonify(Ingredient.query.get_or_404(id).to_dict())


@app.route('/api/ingredients/<int:id>', methods=['PUT'])
def ingredient_edit(id):
    ingredient = Ingredient.query.get_or_404(id)
    data = validate_ingredient(_json_body())
    for field, value in data.items():
        setattr(ingredient, field, value)
    apply_ingredient_cost(ingredient)
    refresh_derived_costs()
    db.session.commit()
    logger.info("Ingredient %s updated", id)
    return jsonify(ingredient.to_dict())


@app.route('/api/ingredients/<int:id>', methods=['DELETE'])
def ingredient_delete(id):
    ingredient = Ingredient.query.get_or_404(id)
    db.session.delete(ingredient)
    db.session.flush()
    # Lines pointing at it stay in place and now cost nothing
    refresh_derived_costs()
    db.session.commit()
    logger.info("Ingredient %s deleted", id)
    return '', 204

# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes', methods=['GET'])
def recipes_list():
    recipes = Recipe.query.order_by(Recipe.name).all()
    return jsonify([r.to_dict() for r in recipes])


@app.route('/api/recipes', methods=['POST'])
def recipe_add():
    data = validate_recipe(_json_body())
    recipe = Recipe(**data)
    db.session.add(recipe)
    db.session.flush()
    refresh_derived_costs()
    db.session.commit()
    logger.info("Recipe %s created (%s)", recipe.id, recipe.name)
    return jsonify(recipe.to_dict()), 201


@app.route('/api/recipes/<int:id>', methods=['GET'])
def recipe_view(id):
    return jsonify(Recipe.query.get_or_404(id).to_dict())


@app.route('/api/recipes/<int:id>', methods=['PUT'])
def recipe_edit(id):
    recipe = Recipe.query.get_or_404(id)
    data = validate_recipe(_json_body())
    for field, value in data.items():
        setattr(recipe, field, value)
    refresh_derived_costs()
    db.session.commit()
    logger.info("Recipe %s updated", id)
    return jsonify(recipe.to_dict())


@app.route('/api/recipes/<int:id>', methods=['DELETE'])
def recipe_delete(id):
    recipe = Recipe.query.get_or_404(id)
    db.session.delete(recipe)
    db.session.flush()
    refresh_derived_costs()
    db.session.commit()
    logger.info("Recipe %s deleted", id)
    return '', 204

# ============================================
# ROUTES - DISHES
# ============================================

@app.route('/api/dishes', methods=['GET'])
def dishes_list():
    dishes = Dish.query.order_by(Dish.name).all()
    return jsonify([d.to_dict() for d in dishes])


@app.route('/api/dishes', methods=['POST'])
def dish_add():
    data = validate_dish(_json_body())
    resolve_ingredient, resolve_recipe = load_resolvers()
    dish = Dish(**data)
    apply_dish_cost(dish, resolve_ingredient, resolve_recipe)
    db.session.add(dish)
    db.session.commit()
    logger.info("Dish %s created (%s), cost %.2f", dish.id, dish.name, dish.total_cost)
    return jsonify(dish.to_dict()), 201


@app.route('/api/dishes/<int:id>', methods=['GET'])
def dish_view(id):
    dish = Dish.query.get_or_404(id)
    resolve_ingredient, resolve_recipe = load_resolvers()
    result = dish.to_dict()
    result['breakdown'] = dish_cost_breakdown(dish.items, resolve_ingredient, resolve_recipe)
    result['margin'] = margin_from_price(dish.selling_price, dish.total_cost)
    result['profit'] = dish.selling_price - dish.total_cost
    return jsonify(result)


@app.route('/api/dishes/<int:id>', methods=['PUT'])
def dish_edit(id):
    dish = Dish.query.get_or_404(id)
    data = validate_dish(_json_body())
    for field, value in data.items():
        setattr(dish, field, value)
    resolve_ingredient, resolve_recipe = load_resolvers()
    apply_dish_cost(dish, resolve_ingredient, resolve_recipe)
    db.session.commit()
    logger.info("Dish %s updated, cost %.2f", id, dish.total_cost)
    return jsonify(dish.to_dict())


@app.route('/api/dishes/<int:id>', methods=['DELETE'])
def dish_delete(id):
    dish = Dish.query.get_or_404(id)
    db.session.delete(dish)
    db.session.commit()
    logger.info("Dish %s deleted", id)
    return '', 204


@app.route('/api/dishes/<int:id>/pricing', methods=['GET'])
def dish_pricing(id):
    dish = Dish.query.get_or_404(id)
    result = simulate(dish.total_cost, desired_margin=_query_float('margin'),
                      selling_price=dish.selling_price)
    result['dish_id'] = dish.id
    return jsonify(result)

# ============================================
# ROUTES - EXPENSES
# ============================================

@app.route('/api/expenses', methods=['GET'])
def expenses_list():
    query = Expense.query
    expense_type = request.args.get('type')
    if expense_type:
        query = query.filter_by(type=expense_type)
    expenses = query.order_by(Expense.date.desc(), Expense.id).all()
    return jsonify([e.to_dict() for e in expenses])


@app.route('/api/expenses', methods=['POST'])
def expense_add():
    data = validate_expense(_json_body())
    expense = Expense(**data)
    db.session.add(expense)
    db.session.commit()
    logger.info("Expense %s created (%s)", expense.id, expense.description)
    return jsonify(expense.to_dict()), 201


@app.route('/api/expenses/summary', methods=['GET'])
def expenses_summary():
    since = None
    months = request.args.get('months')
    if months:
        try:
            months = int(months)
        except ValueError:
            raise ValidationError({'months': ['Must be a whole number']})
        if months < 1:
            raise ValidationError({'months': ['Must be at least 1']})
        since = months_ago(date.today(), months)
    return jsonify(summarize_expenses(Expense.query.all(), since=since))


@app.route('/api/expenses/<int:id>', methods=['GET'])
def expense_view(id):
    return jsonify(Expense.query.get_or_404(id).to_dict())


@app.route('/api/expenses/<int:id>', methods=['PUT'])
def expense_edit(id):
    expense = Expense.query.get_or_404(id)
    data = validate_expense(_json_body())
    for field, value in data.items():
        setattr(expense, field, value)
    db.session.commit()
    logger.info("Expense %s updated", id)
    return jsonify(expense.to_dict())


@app.route('/api/expenses/<int:id>', methods=['DELETE'])
def expense_delete(id):
    expense = Expense.query.get_or_404(id)
    db.session.delete(expense)
    db.session.commit()
    logger.info("Expense %s deleted", id)
    return '', 204

# ============================================
# ROUTES - PRICING
# ============================================

@app.route('/api/pricing/simulate', methods=['POST'])
def pricing_simulate():
    data = validate_pricing(_json_body())
    return jsonify(simulate(**data))


@app.route('/api/pricing/suggest', methods=['POST'])
def pricing_suggest():
    inputs = validate_advisor(_json_body())
    try:
        suggestion = suggest_price(
            inputs,
            api_key=app.config['GEMINI_API_KEY'],
            model=app.config['GEMINI_MODEL'],
            base_url=app.config['GEMINI_API_URL'],
            timeout=app.config['ADVISOR_TIMEOUT'],
        )
    except AdvisorError as e:
        logger.error("Price suggestion failed: %s", e)
        raise
    return jsonify(suggestion)

# ============================================
# ROUTES - ADMIN
# ============================================

@app.route('/api/integrity', methods=['GET'])
def integrity_check():
    ingredient_ids = {row[0] for row in db.session.query(Ingredient.id).all()}
    recipe_ids = {row[0] for row in db.session.query(Recipe.id).all()}
    dangling = find_dangling_references(Recipe.query.all(), Dish.query.all(), ingredient_ids, recipe_ids)
    return jsonify({'ok': not dangling, 'dangling': dangling})


# ============================================
# INITIALIZE DATABASE
# ============================================

def seed_sample_data():
    """
    Load the sample restaurant into empty tables.

    Sample line items refer to rows by list position; they are remapped to
    the ids the database assigns, and all derived costs are recomputed.
    """
    if Ingredient.query.count() == 0:
        ingredients = [Ingredient(**row) for row in SAMPLE_INGREDIENTS]
        for ingredient in ingredients:
            apply_ingredient_cost(ingredient)
        db.session.add_all(ingredients)
        db.session.flush()

        recipes = []
        for row in SAMPLE_RECIPES:
            lines = [
                {'ingredient_id': ingredients[line['ingredient_id'] - 1].id, 'quantity': line['quantity']}
                for line in row['ingredients']
            ]
            recipes.append(Recipe(**dict(row, ingredients=lines)))
        db.session.add_all(recipes)
        db.session.flush()

        by_type = {'ingredient': ingredients, 'recipe': recipes}
        for row in SAMPLE_DISHES:
            items = [
                dict(item, item_id=by_type[item['item_type']][item['item_id'] - 1].id)
                for item in row['items']
            ]
            db.session.add(Dish(**dict(row, items=items)))
        db.session.flush()

        refresh_derived_costs()
        logger.info("Seeded %d ingredients, %d recipes, %d dishes",
                    len(ingredients), len(recipes), len(SAMPLE_DISHES))

    if Expense.query.count() == 0:
        for row in SAMPLE_EXPENSES:
            db.session.add(Expense(**dict(row, date=date.fromisoformat(row['date']))))
        logger.info("Seeded %d expenses", len(SAMPLE_EXPENSES))

    db.session.commit()


def init_db():
    with app.app_context():
        db.create_all()

        if app.config['SEED_SAMPLE_DATA']:
            seed_sample_data()


@app.cli.command('init-db')
def init_db_command():
    """Create tables and load the sample data."""
    init_db()
    print("Database initialized")


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)

"""
Recipe Model

Contains the Recipe model. Ingredient lines are stored as a JSON list of
{"ingredient_id", "quantity"} objects, quantities in the ingredient's
base unit.
"""

from .base import db


class Recipe(db.Model):
    """Batch preparation built from ingredients."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    yield_factor = db.Column(db.Float, nullable=False, default=1.0)
    gross_weight = db.Column(db.Float, nullable=False, default=0.0)
    unit = db.Column(db.String(10), nullable=False, default='kg')  # kg, l or un
    total_cost = db.Column(db.Float, nullable=False, default=0.0)  # derived
    ingredients = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'yield_factor': self.yield_factor,
            'gross_weight': self.gross_weight,
            'unit': self.unit,
            'total_cost': self.total_cost,
            'ingredients': list(self.ingredients or []),
        }

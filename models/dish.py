"""
Dish Model

Contains the Dish model, the sellable plate. Line items are stored as a
JSON list of {"item_id", "item_type", "quantity"} objects where
item_type is 'ingredient' or 'recipe'.
"""

from .base import db


class Dish(db.Model):
    """Menu item with selling price and derived total cost."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    selling_price = db.Column(db.Float, nullable=False, default=0.0)
    total_cost = db.Column(db.Float, nullable=False, default=0.0)  # derived
    items = db.Column(db.JSON, nullable=False, default=list)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'selling_price': self.selling_price,
            'total_cost': self.total_cost,
            'items': list(self.items or []),
        }

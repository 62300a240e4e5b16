"""
Ingredient Model

Contains the Ingredient model: a purchased package and the derived cost
of one base unit (gram, millilitre or each) of it.
"""

from .base import db


class Ingredient(db.Model):
    """
    Raw ingredient bought in packages.

    unit_cost is derived from price, package_size and unit and is
    recomputed on every write, never taken from the client.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)

    # What one package costs
    price = db.Column(db.Float, nullable=False, default=0.0)

    # Package size expressed in `unit` (g, kg, ml, l, un)
    package_size = db.Column(db.Float, nullable=False, default=1.0)
    unit = db.Column(db.String(10), nullable=False, default='g')

    # Cost per ONE base unit (per g, per ml or per each)
    unit_cost = db.Column(db.Float, nullable=False, default=0.0)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'package_size': self.package_size,
            'unit': self.unit,
            'unit_cost': self.unit_cost,
        }

"""
Expense Model

Contains the Expense model for fixed and variable running costs.
"""

from .base import db


class Expense(db.Model):
    """Fixed (rent, utilities) or variable (marketing, repairs) expense."""
    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(255), nullable=False)
    amount = db.Column(db.Float, nullable=False, default=0.0)
    type = db.Column(db.String(20), nullable=False, default='fixed', index=True)
    category = db.Column(db.String(255), default='')
    date = db.Column(db.Date, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'description': self.description,
            'amount': self.amount,
            'type': self.type,
            'category': self.category,
            'date': self.date.isoformat() if self.date else None,
        }

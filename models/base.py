"""
Database Base Module

Creates the SQLAlchemy instance shared by every model.
Kept apart from app.py so models can be imported without the app.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py via db.init_app(app)
db = SQLAlchemy()

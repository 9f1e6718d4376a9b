"""
Database Base Module

Creates the SQLAlchemy instance shared by the menu, meal log and wallet models.
Kept separate so services can import it without importing the app.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py via db.init_app
db = SQLAlchemy()

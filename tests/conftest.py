"""
Shared fixtures: an in-memory database holding a small five-item menu, plus a
file-backed app for multi-threaded tests.
"""

import os
from datetime import timedelta
from decimal import Decimal

import pytest
from flask import Flask

os.environ['FLASK_ENV'] = 'testing'

from app import app as flask_app  # noqa: E402
from models import db, MenuItem, MealLogEntry  # noqa: E402
from utils.dates import utcnow  # noqa: E402

# id, name, category, price, is_vegan, ingredients
MENU = [
    (1, 'Beef Burger', 'Dinner', '50.00', False, 'Beef, Bun'),
    (2, 'Vegan Salad', 'Lunch', '30.00', True, 'Lettuce, Tomato'),
    (3, 'Oatmeal', 'Breakfast', '15.00', True, 'Oats, Water'),
    (4, 'Pizza', 'Dinner', '45.00', False, 'Cheese, Dough'),
    (5, 'Cookie', 'Snack', '10.00', False, 'Sugar, Flour'),
]


@pytest.fixture
def app():
    with flask_app.app_context():
        db.drop_all()
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def add_menu():
    items = []
    for item_id, name, category, price, is_vegan, ingredients in MENU:
        item = MenuItem(id=item_id, name=name, category=category, price=Decimal(price),
                        is_vegan=is_vegan, ingredients=ingredients, calories=400,
                        is_available=True, popularity_score=0, restaurant_name='Proxy')
        db.session.add(item)
        items.append(item)
    db.session.commit()
    return items


@pytest.fixture
def menu(app):
    return add_menu()


@pytest.fixture
def file_app(tmp_path):
    """A second app on a file database, for tests that use several connections."""
    other = Flask('file_app')
    other.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'plans.db'}",
        SQLALCHEMY_ENGINE_OPTIONS={'connect_args': {'timeout': 30, 'check_same_thread': False}},
    )
    db.init_app(other)
    with other.app_context():
        db.create_all()
        add_menu()
        db.session.remove()
    yield other
    with other.app_context():
        db.engine.dispose()


@pytest.fixture
def log_meal(app):
    """Add a meal log entry `days_ago` days back and commit it."""
    def _log(student_id, meal_id, days_ago=0):
        entry = MealLogEntry(student_id=student_id, meal_id=meal_id,
                             log_date=utcnow() - timedelta(days=days_ago))
        db.session.add(entry)
        db.session.commit()
        return entry
    return _log

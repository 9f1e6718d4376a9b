import logging
from decimal import Decimal

from flask import Flask, request, jsonify
from flask_migrate import Migrate

from config import get_config
from constants import DEFAULT_DAILY_BUDGET, MAX_DAILY_BUDGET, DEMO_MENU_ITEMS
from models import db, MenuItem, DemoWallet
from services import (
    PlannerError, PlanNotSavedError, WalletUnavailableError, PlanPreferences,
    generate_meal_plan, preview_meal_plan, get_policy,
    get_today_plan, get_student_history, get_restaurant_menu, get_student_balance,
)
from utils.parsing import safe_decimal, safe_bool, format_money
from utils.sanitizer import sanitize_student_id, sanitize_restaurant_name

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)


def _student_from_args():
    return sanitize_student_id(request.args.get('studentId'), app.config['DEFAULT_STUDENT_ID'])


def _error(message, status=500):
    return jsonify({'error': message}), status


@app.errorhandler(500)
def server_error(err):
    return _error('Server Error')


# ============================================
# ROUTES - STUDENT
# ============================================

@app.route('/api/student/plan', methods=['POST'])
def student_plan():
    data = request.get_json(silent=True) or {}
    student_id = sanitize_student_id(data.get('studentId'), 'guest')
    budget = safe_decimal(data.get('daysRemaining', data.get('budget')),
                          default=DEFAULT_DAILY_BUDGET, min_val=Decimal('0'), max_val=MAX_DAILY_BUDGET)
    preferences = PlanPreferences.from_dict(data.get('preferences'))

    try:
        result = generate_meal_plan(student_id, budget, preferences,
                                    policy=get_policy(app.config['PLANNER_POLICY']))
    except PlanNotSavedError:
        return _error('Plan generated but not saved')
    except PlannerError:
        return _error('Failed to generate plan')
    return jsonify(result.to_dict())


@app.route('/api/student/plan/quick', methods=['POST'])
def student_quick_plan():
    data = request.get_json(silent=True) or {}
    student_id = sanitize_student_id(data.get('studentId'), app.config['DEFAULT_STUDENT_ID'])
    budget = safe_decimal(data.get('budget'), default=DEFAULT_DAILY_BUDGET,
                          min_val=Decimal('0'), max_val=MAX_DAILY_BUDGET)
    preferences = PlanPreferences.from_dict(data)

    try:
        result = preview_meal_plan(student_id, budget, preferences, persist=safe_bool(data.get('logging')))
    except PlanNotSavedError:
        return _error('Plan generated but not saved')
    except PlannerError:
        return _error('Failed to generate plan')
    return jsonify(result.to_dict())


@app.route('/api/student/plan/today')
def student_plan_today():
    try:
        result = get_today_plan(_student_from_args())
    except PlannerError:
        return _error('Failed to restore plan')
    return jsonify(result.to_dict())


@app.route('/api/student/history')
def student_history():
    try:
        history = get_student_history(_student_from_args())
    except PlannerError:
        return _error('Failed to fetch history')
    return jsonify(history)


@app.route('/api/student/balance')
def student_balance():
    student_id = _student_from_args()
    try:
        balance = get_student_balance(student_id)
    except WalletUnavailableError:
        return _error('Failed to fetch balance')
    return jsonify({'studentId': student_id, 'balance': format_money(balance)})


# ============================================
# ROUTES - RESTAURANT
# ============================================

@app.route('/api/restaurant/stats')
def restaurant_stats():
    restaurant = sanitize_restaurant_name(request.args.get('restaurant'))
    try:
        menu = get_restaurant_menu(restaurant)
    except PlannerError:
        return _error('Failed to fetch menu')
    return jsonify([item.to_dict() for item in menu])


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        # Enable SQLite foreign key enforcement
        from sqlalchemy import event
        from sqlalchemy.engine import Engine
        import sqlite3

        @event.listens_for(Engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            if isinstance(dbapi_connection, sqlite3.Connection):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        db.create_all()


def seed_menu():
    """Load the demo catalog and a demo wallet into an empty database. Returns items added."""
    if MenuItem.query.count():
        return 0

    for (name, category, price, ingredients, calories, is_vegan,
         gluten, peanuts, dairy, restaurant) in DEMO_MENU_ITEMS:
        db.session.add(MenuItem(
            name=name, category=category, price=Decimal(price), ingredients=ingredients,
            calories=calories, is_vegan=is_vegan, contains_gluten=gluten,
            contains_peanuts=peanuts, contains_dairy=dairy,
            is_available=True, popularity_score=0, restaurant_name=restaurant,
        ))

    student_id = app.config['DEFAULT_STUDENT_ID']
    if db.session.get(DemoWallet, student_id) is None:
        db.session.add(DemoWallet(student_id=student_id, balance=Decimal('1500.00')))

    db.session.commit()
    return len(DEMO_MENU_ITEMS)


@app.cli.command('init-db')
def init_db_command():
    """Create database tables."""
    init_db()
    print("Database initialized")


@app.cli.command('seed-menu')
def seed_menu_command():
    """Insert the demo menu into an empty catalog."""
    init_db()
    added = seed_menu()
    print(f"Added {added} menu items" if added else "Catalog already has items, nothing added")


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=3000, use_reloader=False)

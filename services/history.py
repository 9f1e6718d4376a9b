"""
History Service

Read access to a student's meal log.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from models import db, MealLogEntry, MenuItem
from utils.dates import today_utc, window_start
from .errors import HistoryUnavailableError

logger = logging.getLogger(__name__)


def fetch_recent_logs(student_id, window_days, today=None):
    """
    Return the student's log entries from midnight `window_days` days ago onward.

    Entries come back oldest first.
    """
    today = today or today_utc()
    since = window_start(today, window_days)
    try:
        return (MealLogEntry.query
                .filter(MealLogEntry.student_id == student_id,
                        MealLogEntry.log_date >= since)
                .order_by(MealLogEntry.log_date, MealLogEntry.id)
                .all())
    except SQLAlchemyError as exc:
        logger.exception("History query failed for student %s", student_id)
        raise HistoryUnavailableError('Meal history unavailable') from exc


def get_student_history(student_id):
    """Every logged meal for the student joined to its menu item, newest first."""
    try:
        rows = (db.session.query(MealLogEntry, MenuItem)
                .join(MenuItem, MealLogEntry.meal_id == MenuItem.id)
                .filter(MealLogEntry.student_id == student_id)
                .order_by(MealLogEntry.log_date.desc(), MealLogEntry.id.desc())
                .all())
    except SQLAlchemyError as exc:
        logger.exception("History query failed for student %s", student_id)
        raise HistoryUnavailableError('Meal history unavailable') from exc

    history = []
    for log, item in rows:
        history.append({
            'log_date': log.log_date.isoformat(),
            'id': item.id,
            'name': item.name,
            'category': item.category,
            'price': float(item.price or 0),
            'calories': item.calories or 0,
            'ingredients': item.ingredients or '',
            'restaurant_name': item.restaurant_name,
        })
    return history

"""
Plan Persistence Service

Writes the chosen plan to the meal log and reads back today's plan.
"""

import logging

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from models import db, MealLogEntry, MenuItem
from utils.dates import utcnow, today_utc, day_bounds
from .errors import PlanNotSavedError, HistoryUnavailableError
from .plan_types import PlanResult

logger = logging.getLogger(__name__)


def increment_popularity(item_id):
    """Add one to an item's popularity in SQL so concurrent increments add up."""
    db.session.execute(
        update(MenuItem)
        .where(MenuItem.id == item_id)
        .values(popularity_score=MenuItem.popularity_score + 1)
        .execution_options(synchronize_session=False)
    )


def replace_daily_plan(student_id, items, now=None):
    """
    Replace the student's log for today with `items`, in one transaction.

    Today's existing entries are deleted, then each item gets a log entry
    stamped `now` and a popularity increment, in selection order. Any
    database error rolls the whole replacement back.

    Raises:
        PlanNotSavedError: if the transaction failed
    """
    now = now or utcnow()
    start, end = day_bounds(now.date())

    try:
        removed = (MealLogEntry.query
                   .filter(MealLogEntry.student_id == student_id,
                           MealLogEntry.log_date >= start,
                           MealLogEntry.log_date < end)
                   .delete(synchronize_session=False))

        for item in items:
            db.session.add(MealLogEntry(student_id=student_id, meal_id=item.id, log_date=now))
            db.session.flush()  # ids follow selection order
            increment_popularity(item.id)

        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("Saving plan failed for student %s, rolled back", student_id)
        raise PlanNotSavedError(student_id) from exc

    logger.debug("Replaced %d log entries with %d for student %s", removed, len(items), student_id)


def get_today_plan(student_id, today=None):
    """
    Today's saved plan in the order it was chosen.

    The cost is summed from current menu prices, so it follows price changes
    made after the plan was saved.
    """
    start, end = day_bounds(today or today_utc())
    try:
        rows = (db.session.query(MealLogEntry, MenuItem)
                .join(MenuItem, MealLogEntry.meal_id == MenuItem.id)
                .filter(MealLogEntry.student_id == student_id,
                        MealLogEntry.log_date >= start,
                        MealLogEntry.log_date < end)
                .order_by(MealLogEntry.log_date, MealLogEntry.id)
                .all())
    except SQLAlchemyError as exc:
        logger.exception("Today's plan query failed for student %s", student_id)
        raise HistoryUnavailableError('Meal history unavailable') from exc

    return PlanResult(suggestions=[item for _, item in rows], daily_safe_budget=None)

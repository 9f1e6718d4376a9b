"""
Meal Log Model

Contains the MealLogEntry model recording what a student was planned to eat.
"""

from .base import db


class MealLogEntry(db.Model):
    """One consumption record. Created by plan persistence, never updated."""
    __tablename__ = 'meal_log'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.String(100), nullable=False, index=True)
    meal_id = db.Column(db.Integer, db.ForeignKey('menu_item.id', ondelete='CASCADE'), nullable=False, index=True)
    log_date = db.Column(db.DateTime, nullable=False, index=True)  # naive UTC
    meal = db.relationship('MenuItem')

"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .menu import MenuItem
from .meal_log import MealLogEntry
from .wallet import DemoWallet

__all__ = [
    'db',
    'MenuItem',
    'MealLogEntry',
    'DemoWallet',
]

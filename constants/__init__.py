"""
Constants Package

Planning thresholds, validation whitelists and demo catalog data.
"""

from .planning import (
    CATEGORY_ORDER,
    BONUS_CATEGORY,
    TREAT_THRESHOLD,
    VARIETY_WINDOW_DAYS,
    RECENCY_WINDOW_DAYS,
    WEEKLY_REPEAT_CAP,
    MIN_POOL_SIZE,
    DEFAULT_DAILY_BUDGET,
    MAX_DAILY_BUDGET,
    PREMIUM_BUDGET,
    TREAT_BUDGET,
    TREAT_PRICE_CAP,
    TREAT_CATEGORIES,
    EXTRA_TREAT_LABEL,
    MONEY_PLACES,
)
from .validation import (
    MAX_LENGTHS,
    MAX_CUSTOM_ALLERGIES,
)
from .demo_menu import DEMO_MENU_ITEMS

"""
Services Package

Business logic for the meal planner.
"""

from .errors import (
    PlannerError,
    CatalogUnavailableError,
    HistoryUnavailableError,
    PlanNotSavedError,
    WalletUnavailableError,
)

from .plan_types import PlanPreferences, PlanResult

from .catalog import fetch_available_items, get_restaurant_menu

from .history import fetch_recent_logs, get_student_history

from .filters import matches_dietary_flags, contains_allergen, filter_candidates

from .variety import summarize_history, apply_variety_rules

from .selection import (
    Pick,
    SelectionPolicy,
    GreedyRandomPolicy,
    TieredBudgetPolicy,
    get_policy,
)

from .persistence import increment_popularity, replace_daily_plan, get_today_plan

from .locks import student_lock

from .wallet import get_student_balance

from .planner import generate_meal_plan, preview_meal_plan

__all__ = [
    # Errors
    'PlannerError',
    'CatalogUnavailableError',
    'HistoryUnavailableError',
    'PlanNotSavedError',
    'WalletUnavailableError',
    # Types
    'PlanPreferences',
    'PlanResult',
    # Catalog / history
    'fetch_available_items',
    'get_restaurant_menu',
    'fetch_recent_logs',
    'get_student_history',
    # Stages
    'matches_dietary_flags',
    'contains_allergen',
    'filter_candidates',
    'summarize_history',
    'apply_variety_rules',
    'Pick',
    'SelectionPolicy',
    'GreedyRandomPolicy',
    'TieredBudgetPolicy',
    'get_policy',
    'increment_popularity',
    'replace_daily_plan',
    'get_today_plan',
    'student_lock',
    # Wallet
    'get_student_balance',
    # Pipeline
    'generate_meal_plan',
    'preview_meal_plan',
]

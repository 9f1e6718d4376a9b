"""
Meal Planner Service

Runs the recommendation pipeline: catalog -> dietary filters -> variety ->
selection -> (optionally) saving the plan to the student's log.
"""

import logging
from decimal import Decimal

from constants import VARIETY_WINDOW_DAYS
from utils.dates import today_utc
from .catalog import fetch_available_items
from .filters import filter_candidates
from .history import fetch_recent_logs
from .locks import student_lock
from .persistence import replace_daily_plan
from .plan_types import PlanResult
from .selection import GreedyRandomPolicy, TieredBudgetPolicy
from .variety import apply_variety_rules

logger = logging.getLogger(__name__)


def generate_meal_plan(student_id, daily_budget, preferences, policy=None, persist=True, today=None):
    """
    Build a plan for one day and, by default, save it as today's log.

    Args:
        student_id: Student the plan is for
        daily_budget: Spending limit for the day (MAD)
        preferences: PlanPreferences
        policy: SelectionPolicy, GreedyRandomPolicy when omitted
        persist: Replace today's log with the plan
        today: Calendar day used for the variety rules (defaults to today, UTC)

    Returns:
        PlanResult whose cost never exceeds daily_budget

    Raises:
        CatalogUnavailableError, HistoryUnavailableError: a read failed
        PlanNotSavedError: the plan could not be saved
    """
    budget = Decimal(str(daily_budget))
    policy = policy or GreedyRandomPolicy()

    with student_lock(student_id):
        today = today or today_utc()

        items = fetch_available_items(preferences)
        candidates = filter_candidates(items, preferences)
        logs = fetch_recent_logs(student_id, VARIETY_WINDOW_DAYS, today)
        pool = apply_variety_rules(candidates, logs, today)

        picks = policy.select(pool, budget, extra_treat=preferences.extra_treat)
        result = PlanResult(
            suggestions=[pick.item for pick in picks],
            daily_safe_budget=budget,
            labels={pick.item.id: pick.slot for pick in picks if pick.slot != pick.item.category},
        )
        cost = result.plan_cost

        if persist:
            replace_daily_plan(student_id, result.suggestions)

    logger.info("Plan for %s (%s policy): %d items, cost %s of %s, %d candidates, pool %d",
                student_id, policy.name, len(result.suggestions), cost, budget,
                len(candidates), len(pool))
    return result


def preview_meal_plan(student_id, daily_budget, preferences, persist=False, rng=None):
    """Plan with the tiered price policy. Only saved when `persist` is set."""
    return generate_meal_plan(student_id, daily_budget, preferences,
                              policy=TieredBudgetPolicy(rng=rng), persist=persist)

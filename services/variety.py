"""
Variety Service

Keeps plans from repeating what the student ate today, yesterday, or too
often this week. Variety gives way when it would starve the pool.
"""

import logging
from collections import Counter
from datetime import timedelta

from constants import RECENCY_WINDOW_DAYS, WEEKLY_REPEAT_CAP, MIN_POOL_SIZE

logger = logging.getLogger(__name__)


def summarize_history(logs, today, recency_days=RECENCY_WINDOW_DAYS):
    """
    Derive the recency set and weekly counts from log entries.

    Recency is by calendar date: with the default window, anything logged
    on `today` or the day before, whatever the time of day.

    Returns:
        (eaten_recently, weekly_counts) - a set of meal ids and a Counter
    """
    recent_days = {(today - timedelta(days=offset)).isoformat() for offset in range(recency_days)}

    eaten_recently = set()
    weekly_counts = Counter()
    for log in logs:
        if log.log_date.date().isoformat() in recent_days:
            eaten_recently.add(log.meal_id)
        weekly_counts[log.meal_id] += 1

    return eaten_recently, weekly_counts


def apply_variety_rules(candidates, logs, today,
                        repeat_cap=WEEKLY_REPEAT_CAP, min_pool=MIN_POOL_SIZE):
    """
    Build the selection pool from filtered candidates and recent history.

    Drops items eaten recently or `repeat_cap`+ times in the window. If that
    leaves fewer than `min_pool` items, the unrestricted candidates are used.
    """
    eaten_recently, weekly_counts = summarize_history(logs, today)

    varied = [
        item for item in candidates
        if item.id not in eaten_recently and weekly_counts[item.id] < repeat_cap
    ]

    if len(varied) < min_pool:
        logger.debug("Variety pool too small (%d < %d), using all %d candidates",
                     len(varied), min_pool, len(candidates))
        return list(candidates)

    return varied

"""
Selection Service

Chooses at most one item per meal slot within the daily budget.

Two policies are available:
- GreedyRandomPolicy: Breakfast, Lunch, Dinner in turn, a random affordable
  item each, plus an optional Snack. Used by the saved daily plan.
- TieredBudgetPolicy: price-ranked trios with a fallback ladder down to a
  single cheap lunch. Used by the quick plan endpoint.

Both return a list of Pick(item, slot) in slot order and never exceed the budget.
"""

import random
from collections import namedtuple
from decimal import Decimal

from constants import (
    CATEGORY_ORDER, BONUS_CATEGORY, TREAT_THRESHOLD,
    PREMIUM_BUDGET, TREAT_BUDGET, TREAT_PRICE_CAP, TREAT_CATEGORIES, EXTRA_TREAT_LABEL,
)

Pick = namedtuple('Pick', ['item', 'slot'])


def item_price(item):
    return Decimal(item.price or 0)


def total_cost(picks):
    return sum((item_price(p.item) for p in picks), Decimal('0'))


class SelectionPolicy:
    """Interface for plan selection strategies."""
    name = None

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def select(self, pool, daily_budget, extra_treat=False):
        raise NotImplementedError


class GreedyRandomPolicy(SelectionPolicy):
    """Random affordable item per category, in fixed category order."""
    name = 'greedy'

    def __init__(self, rng=None, category_order=CATEGORY_ORDER,
                 bonus_category=BONUS_CATEGORY, treat_threshold=TREAT_THRESHOLD):
        super().__init__(rng)
        self.category_order = tuple(category_order)
        self.bonus_category = bonus_category
        self.treat_threshold = Decimal(treat_threshold)

    def _pick_affordable(self, pool, category, remaining):
        """Scan the category in a random permutation, take the first item that fits."""
        items = [item for item in pool if item.category == category]
        for item in self.rng.sample(items, len(items)):
            if item_price(item) <= remaining:
                return item
        return None

    def select(self, pool, daily_budget, extra_treat=False):
        budget = Decimal(str(daily_budget))
        picks = []
        current_total = Decimal('0')

        for category in self.category_order:
            item = self._pick_affordable(pool, category, budget - current_total)
            if item is not None:
                picks.append(Pick(item, category))
                current_total += item_price(item)

        # Gate on leftover budget before looking at snacks at all
        if extra_treat and (budget - current_total) > self.treat_threshold:
            item = self._pick_affordable(pool, self.bonus_category, budget - current_total)
            if item is not None:
                picks.append(Pick(item, self.bonus_category))

        return picks


class TieredBudgetPolicy(SelectionPolicy):
    """
    Price-tiered trio with a deterministic fallback ladder.

    Budgets at PREMIUM_BUDGET or more start from the most expensive item of
    each category, falling back to a random trio. Smaller budgets start from
    a random trio. While over budget: cheapest trio, then cheapest lunch and
    dinner, then the cheapest lunch alone, then nothing.
    """
    name = 'tiered'

    def __init__(self, rng=None, category_order=CATEGORY_ORDER):
        super().__init__(rng)
        self.category_order = tuple(category_order)

    def _pick_random(self, items):
        return self.rng.choice(items) if items else None

    @staticmethod
    def _pick_expensive(items):
        return items[-1] if items else None

    @staticmethod
    def _pick_cheap(items):
        return items[0] if items else None

    @staticmethod
    def _is_treat(item):
        return item.category in TREAT_CATEGORIES or item_price(item) < TREAT_PRICE_CAP

    def _build(self, ranked, categories, picker):
        picks = []
        for category in categories:
            item = picker(ranked[category])
            if item is not None:
                picks.append(Pick(item, category))
        return picks

    def select(self, pool, daily_budget, extra_treat=False):
        budget = Decimal(str(daily_budget))
        ranked = {
            category: sorted((item for item in pool if item.category == category), key=item_price)
            for category in self.category_order
        }
        trio = self.category_order

        if budget >= PREMIUM_BUDGET:
            picks = self._build(ranked, trio, self._pick_expensive)
            if total_cost(picks) > budget:
                picks = self._build(ranked, trio, self._pick_random)
            if budget >= TREAT_BUDGET and extra_treat:
                remaining = budget - total_cost(picks)
                chosen = {p.item.id for p in picks}
                treat = next((item for item in pool
                              if self._is_treat(item)
                              and item_price(item) <= remaining
                              and item.id not in chosen), None)
                if treat is not None:
                    picks.append(Pick(treat, EXTRA_TREAT_LABEL))
        else:
            picks = self._build(ranked, trio, self._pick_random)

        # Fallback ladder: cheapest trio, drop breakfast, lunch only
        lunch, dinner = trio[1], trio[2]
        for categories in (trio, (lunch, dinner), (lunch,)):
            if total_cost(picks) <= budget:
                break
            picks = self._build(ranked, categories, self._pick_cheap)

        if total_cost(picks) > budget:
            return []
        return picks


POLICIES = {
    GreedyRandomPolicy.name: GreedyRandomPolicy,
    TieredBudgetPolicy.name: TieredBudgetPolicy,
}


def get_policy(name, rng=None):
    """Instantiate a selection policy by name ('greedy' or 'tiered')."""
    try:
        policy_cls = POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown selection policy: {name!r}") from None
    return policy_cls(rng=rng)

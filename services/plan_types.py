"""
Plan Types

Request preferences and the plan result handed back to the delivery layer.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from utils.parsing import safe_bool, format_money
from utils.sanitizer import sanitize_allergies


@dataclass(frozen=True)
class PlanPreferences:
    """Hard dietary constraints plus the extra-treat intent."""
    vegan_only: bool = False
    gluten: bool = False
    peanuts: bool = False
    dairy: bool = False
    custom_allergies: tuple = ()
    extra_treat: bool = False

    @classmethod
    def from_dict(cls, data):
        """
        Build preferences from a request body.

        Reads the flags either at the top level or nested under 'allergies',
        and 'extraTreat' or the older 'includeTreats' key.
        """
        data = data or {}
        flags = data.get('allergies') if isinstance(data.get('allergies'), dict) else data
        extra_treat = data.get('extraTreat', data.get('includeTreats'))
        return cls(
            vegan_only=safe_bool(flags.get('veganOnly')),
            gluten=safe_bool(flags.get('gluten')),
            peanuts=safe_bool(flags.get('peanuts')),
            dairy=safe_bool(flags.get('dairy')),
            custom_allergies=sanitize_allergies(data.get('customAllergies')),
            extra_treat=safe_bool(extra_treat),
        )


@dataclass
class PlanResult:
    """Ordered suggestions plus the financial summary."""
    suggestions: list = field(default_factory=list)
    daily_safe_budget: Decimal = None
    labels: dict = field(default_factory=dict)  # item id -> display category override

    @property
    def plan_cost(self):
        return sum((Decimal(item.price) for item in self.suggestions), Decimal('0'))

    def to_dict(self):
        budget = 'N/A' if self.daily_safe_budget is None else format_money(self.daily_safe_budget)
        return {
            'financialStatus': {
                'dailySafeBudget': budget,
                'planCost': format_money(self.plan_cost),
            },
            'suggestions': [item.to_dict(category=self.labels.get(item.id)) for item in self.suggestions],
        }

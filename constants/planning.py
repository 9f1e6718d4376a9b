"""
Planning Constants

Thresholds and category rules used by the meal-plan recommendation engine.
Amounts are in MAD.
"""

from decimal import Decimal

# Meal slots filled in this order by the greedy planner
CATEGORY_ORDER = ('Breakfast', 'Lunch', 'Dinner')

# Fourth slot unlocked by the "extra treat" preference
BONUS_CATEGORY = 'Snack'

# Remaining budget must be strictly above this before a bonus item is tried
TREAT_THRESHOLD = Decimal('15')

# History lookback for the weekly repeat cap
VARIETY_WINDOW_DAYS = 7

# Today and yesterday count as "eaten recently"
RECENCY_WINDOW_DAYS = 2

# Items eaten this many times in the window are held back
WEEKLY_REPEAT_CAP = 3

# Variety filtering is dropped when it leaves fewer candidates than this
MIN_POOL_SIZE = 3

# Budget used when the request carries none (or an unparseable one)
DEFAULT_DAILY_BUDGET = Decimal('50')

# Tiered planner: budgets at or above this start from the priciest trio
PREMIUM_BUDGET = Decimal('80')

# Tiered planner: budgets at or above this may add a treat
TREAT_BUDGET = Decimal('120')

# Tiered planner: anything cheaper than this counts as a treat
TREAT_PRICE_CAP = Decimal('20')

# Categories the tiered planner always treats as treats
TREAT_CATEGORIES = {'Snack', 'Drink'}

# Label given to the treat slot in tiered plans
EXTRA_TREAT_LABEL = 'Extra Treat'

# Two decimal places for every reported amount
MONEY_PLACES = Decimal('0.01')

# Budgets above this are capped before planning
MAX_DAILY_BUDGET = Decimal('100000')

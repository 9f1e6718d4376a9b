"""
Request Value Parsing

Lenient parsers for numbers and flags coming from JSON bodies and query strings.
"""

from decimal import Decimal, InvalidOperation

from constants import MONEY_PLACES


def safe_decimal(value, default=Decimal('0'), min_val=None, max_val=None):
    """Safely parse a Decimal value with optional bounds."""
    if value is None or value == '' or isinstance(value, bool):
        return default
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not result.is_finite():
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def safe_bool(value, default=False):
    """Interpret JSON booleans and the usual string spellings ('true', 'on', '1')."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {'true', '1', 'yes', 'on'}
    return default


def format_money(amount):
    """Format an amount with exactly two decimal places, e.g. Decimal('5') -> '5.00'."""
    if amount is None:
        return '0.00'
    return str(Decimal(amount).quantize(MONEY_PLACES))

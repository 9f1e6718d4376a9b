# Utility modules for the planner app
from .sanitizer import (
    sanitize_text, sanitize_allergies, sanitize_student_id, sanitize_restaurant_name
)
from .parsing import safe_decimal, safe_bool, format_money
from .dates import utcnow, today_utc, day_bounds, window_start

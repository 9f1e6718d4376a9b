"""
Validation Constants

Limits for validating user input before it reaches the planner.
"""

# Maximum field lengths for security
MAX_LENGTHS = {
    'allergy': 100,
    'restaurant_name': 200,
    'student_id': 100,
}

# Upper bound on the number of custom allergy tokens accepted per request
MAX_CUSTOM_ALLERGIES = 50

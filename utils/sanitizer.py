"""
Input Sanitization Module

Cleans free-text request values before they reach the planner or the database.
"""

import re

from constants import MAX_LENGTHS, MAX_CUSTOM_ALLERGIES


def sanitize_text(text, max_length=200):
    """
    Clean a short free-text value.

    Strips whitespace, removes control characters and null bytes,
    collapses runs of whitespace and truncates.

    Args:
        text: The text to clean (can be None)
        max_length: Maximum allowed length (default 200)

    Returns:
        Cleaned string, possibly empty
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', text)

    # Collapse multiple spaces
    text = re.sub(r'\s+', ' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_allergies(values):
    """
    Clean a list of custom allergy tokens.

    Accepts a list or a comma-separated string. Empty tokens are dropped,
    duplicates (case-insensitive) are kept only once, original order is kept.

    Returns:
        Tuple of cleaned tokens
    """
    if not values:
        return ()

    if isinstance(values, str):
        values = values.split(',')

    tokens = []
    seen = set()
    for value in values:
        token = sanitize_text(value, max_length=MAX_LENGTHS['allergy'])
        if not token or token.lower() in seen:
            continue
        seen.add(token.lower())
        tokens.append(token)
        if len(tokens) >= MAX_CUSTOM_ALLERGIES:
            break

    return tuple(tokens)


def sanitize_student_id(student_id, default):
    """Clean a student identifier, falling back to `default` when blank."""
    cleaned = sanitize_text(student_id, max_length=MAX_LENGTHS['student_id'])
    return cleaned or default


def sanitize_restaurant_name(name):
    """Clean a restaurant name used as a catalog filter. Returns None when blank."""
    cleaned = sanitize_text(name, max_length=MAX_LENGTHS['restaurant_name'])
    return cleaned or None

"""
Dietary Filter Service

Hard constraints applied to plan candidates: diet flags and free-text allergies.
"""


def matches_dietary_flags(item, preferences):
    """True if the item satisfies every enabled dietary flag."""
    if preferences.vegan_only and not item.is_vegan:
        return False
    if preferences.gluten and item.contains_gluten:
        return False
    if preferences.peanuts and item.contains_peanuts:
        return False
    if preferences.dairy and item.contains_dairy:
        return False
    return True


def contains_allergen(item, allergies):
    """
    Check whether any allergy token appears in the item's name or ingredients.

    Plain case-insensitive substring match, so 'ham' also hits 'Hamburger'.
    """
    if not allergies:
        return False
    content = f"{item.name or ''} {item.ingredients or ''}".lower()
    return any(allergy.lower() in content for allergy in allergies)


def filter_candidates(items, preferences):
    """Keep the items that pass all hard constraints, in their original order."""
    return [
        item for item in items
        if matches_dietary_flags(item, preferences)
        and not contains_allergen(item, preferences.custom_allergies)
    ]

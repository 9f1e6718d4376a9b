"""
Catalog Service

Read access to the menu catalog for the planner and the restaurant stats view.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from models import MenuItem
from .errors import CatalogUnavailableError

logger = logging.getLogger(__name__)


def fetch_available_items(preferences=None):
    """
    Return available menu items in catalog (id) order.

    When preferences are given, the dietary flags are pushed into the query.
    Custom allergies are left to the filter stage.
    """
    query = MenuItem.query.filter(MenuItem.is_available.is_(True))
    if preferences is not None:
        if preferences.vegan_only:
            query = query.filter(MenuItem.is_vegan.is_(True))
        if preferences.gluten:
            query = query.filter(MenuItem.contains_gluten.is_(False))
        if preferences.peanuts:
            query = query.filter(MenuItem.contains_peanuts.is_(False))
        if preferences.dairy:
            query = query.filter(MenuItem.contains_dairy.is_(False))

    try:
        items = query.order_by(MenuItem.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Catalog query failed")
        raise CatalogUnavailableError('Menu catalog unavailable') from exc

    logger.debug("Catalog returned %d available items", len(items))
    return items


def get_restaurant_menu(restaurant_name=None):
    """Menu items, optionally for one restaurant, most popular first."""
    query = MenuItem.query
    if restaurant_name:
        query = query.filter(MenuItem.restaurant_name == restaurant_name)
    try:
        return query.order_by(MenuItem.popularity_score.desc(), MenuItem.id).all()
    except SQLAlchemyError as exc:
        logger.exception("Restaurant menu query failed for %r", restaurant_name)
        raise CatalogUnavailableError('Menu catalog unavailable') from exc

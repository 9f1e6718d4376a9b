"""
Menu Models

Contains the MenuItem model, the catalog the planner draws suggestions from.
"""

from .base import db


class MenuItem(db.Model):
    """Restaurant menu item with allergen flags and popularity tracking."""
    __tablename__ = 'menu_item'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), nullable=False, index=True)  # 'Breakfast', 'Lunch', ... or restaurant-defined
    price = db.Column(db.Numeric(8, 2), nullable=False, default=0)  # MAD
    ingredients = db.Column(db.Text, default='')
    calories = db.Column(db.Integer, default=0)

    # Diet / allergen flags
    is_vegan = db.Column(db.Boolean, default=False)
    contains_gluten = db.Column(db.Boolean, default=False)
    contains_peanuts = db.Column(db.Boolean, default=False)
    contains_dairy = db.Column(db.Boolean, default=False)

    is_available = db.Column(db.Boolean, default=True, index=True)  # Unavailable items are never suggested
    popularity_score = db.Column(db.Integer, default=0, nullable=False)  # +1 per saved selection
    restaurant_name = db.Column(db.String(200), default='Campus Kitchen', index=True)

    def to_dict(self, category=None):
        """Serialize for JSON responses. `category` overrides the stored label."""
        return {
            'id': self.id,
            'name': self.name,
            'category': category or self.category,
            'price': float(self.price or 0),
            'ingredients': self.ingredients or '',
            'calories': self.calories or 0,
            'is_vegan': bool(self.is_vegan),
            'contains_gluten': bool(self.contains_gluten),
            'contains_peanuts': bool(self.contains_peanuts),
            'contains_dairy': bool(self.contains_dairy),
            'is_available': bool(self.is_available),
            'popularity_score': self.popularity_score or 0,
            'restaurant_name': self.restaurant_name,
        }

    def __repr__(self):
        return f'<MenuItem {self.id} {self.name!r} {self.category} {self.price}>'

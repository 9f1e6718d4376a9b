"""
Demo Menu Constants

Starter catalog loaded by `flask seed-menu` so a fresh database can produce
plans straight away. Prices in MAD.
"""

# (name, category, price, ingredients, calories, is_vegan, gluten, peanuts, dairy, restaurant)
DEMO_MENU_ITEMS = [
    ('Msemen with Honey', 'Breakfast', '12.00', 'Flour, Semolina, Butter, Honey', 380, False, True, False, True, 'Campus Kitchen'),
    ('Oatmeal', 'Breakfast', '15.00', 'Oats, Water, Dates', 300, True, False, False, False, 'Campus Kitchen'),
    ('Baghrir Plate', 'Breakfast', '18.00', 'Semolina, Yeast, Amlou', 420, False, True, True, True, 'Campus Kitchen'),
    ('Egg Sandwich', 'Breakfast', '20.00', 'Eggs, Bread, Cheese', 450, False, True, False, True, 'Proxy'),
    ('Vegan Salad', 'Lunch', '30.00', 'Lettuce, Tomato, Cucumber, Olive Oil', 250, True, False, False, False, 'Proxy'),
    ('Chicken Tajine', 'Lunch', '45.00', 'Chicken, Olives, Preserved Lemon', 620, False, False, False, False, 'Campus Kitchen'),
    ('Lentil Soup', 'Lunch', '22.00', 'Lentils, Carrot, Cumin', 340, True, False, False, False, 'Campus Kitchen'),
    ('Beef Burger', 'Dinner', '50.00', 'Beef, Bun, Cheddar', 850, False, True, False, True, 'American'),
    ('Pizza Margherita', 'Dinner', '45.00', 'Cheese, Dough, Tomato', 780, False, True, False, True, 'American'),
    ('Vegetable Couscous', 'Dinner', '35.00', 'Couscous, Carrot, Zucchini, Chickpeas', 560, True, True, False, False, 'Campus Kitchen'),
    ('Cookie', 'Snack', '10.00', 'Sugar, Flour, Butter', 220, False, True, False, True, 'American'),
    ('Peanut Bar', 'Snack', '8.00', 'Peanuts, Dates, Oats', 260, True, False, True, False, 'Proxy'),
    ('Mint Tea', 'Drink', '6.00', 'Green Tea, Mint, Sugar', 80, True, False, False, False, 'Campus Kitchen'),
    ('Avocado Juice', 'Drink', '14.00', 'Avocado, Milk, Sugar', 310, False, False, False, True, 'Proxy'),
]

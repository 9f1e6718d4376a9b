"""Tests for the JSON API."""

from decimal import Decimal

import app as app_module
from models import db, MenuItem, MealLogEntry, DemoWallet
from services import PlanNotSavedError, CatalogUnavailableError


def post_plan(client, **body):
    return client.post('/api/student/plan', json=body)


class TestStudentPlan:

    def test_generates_plan(self, client, menu):
        response = post_plan(client, studentId='s-1', daysRemaining=100, preferences={})
        assert response.status_code == 200
        data = response.get_json()
        assert len(data['suggestions']) == 3
        assert data['financialStatus']['dailySafeBudget'] == '100.00'
        assert Decimal(data['financialStatus']['planCost']) <= Decimal('100')
        assert MealLogEntry.query.filter_by(student_id='s-1').count() == 3

    def test_budget_as_string(self, client, menu):
        data = post_plan(client, studentId='s-1', daysRemaining='5', preferences={}).get_json()
        assert data['suggestions'] == []
        assert data['financialStatus'] == {'dailySafeBudget': '5.00', 'planCost': '0.00'}

    def test_unparseable_budget_uses_default(self, client, menu):
        data = post_plan(client, studentId='s-1', daysRemaining='lots').get_json()
        assert data['financialStatus']['dailySafeBudget'] == '50.00'

    def test_negative_budget_clamps_to_zero(self, client, menu):
        data = post_plan(client, studentId='s-1', daysRemaining=-20).get_json()
        assert data['financialStatus']['dailySafeBudget'] == '0.00'
        assert data['suggestions'] == []

    def test_huge_budget_is_capped(self, client, menu):
        response = post_plan(client, studentId='s-1', daysRemaining=1e30, preferences={})
        assert response.status_code == 200
        data = response.get_json()
        assert data['financialStatus']['dailySafeBudget'] == '100000.00'
        assert len(data['suggestions']) == 3

    def test_missing_student_uses_guest(self, client, menu):
        post_plan(client, daysRemaining=100)
        assert MealLogEntry.query.filter_by(student_id='guest').count() == 3

    def test_vegan_and_allergies(self, client, menu):
        prefs = {'veganOnly': True, 'customAllergies': ['oats']}
        data = post_plan(client, studentId='s-1', daysRemaining=100, preferences=prefs).get_json()
        assert [s['name'] for s in data['suggestions']] == ['Vegan Salad']

    def test_save_failure_is_distinguishable(self, client, menu, monkeypatch):
        def fail(*args, **kwargs):
            raise PlanNotSavedError('s-1')
        monkeypatch.setattr(app_module, 'generate_meal_plan', fail)

        response = post_plan(client, studentId='s-1', daysRemaining=100)
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Plan generated but not saved'}

    def test_store_failure_is_generic(self, client, menu, monkeypatch):
        def fail(*args, **kwargs):
            raise CatalogUnavailableError('down')
        monkeypatch.setattr(app_module, 'generate_meal_plan', fail)

        response = post_plan(client, studentId='s-1', daysRemaining=100)
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Failed to generate plan'}


class TestQuickPlan:

    def test_quick_plan_not_logged(self, client, menu):
        response = client.post('/api/student/plan/quick', json={'budget': 50, 'allergies': {}})
        data = response.get_json()
        assert [s['name'] for s in data['suggestions']] == ['Vegan Salad']
        assert MealLogEntry.query.count() == 0

    def test_quick_plan_logged_with_treat(self, client, menu):
        body = {'studentId': 's-2', 'budget': 200, 'allergies': {'gluten': False},
                'includeTreats': True, 'logging': True}
        data = client.post('/api/student/plan/quick', json=body).get_json()
        assert data['suggestions'][-1]['category'] == 'Extra Treat'
        assert MealLogEntry.query.filter_by(student_id='s-2').count() == 4

    def test_quick_plan_huge_budget_is_capped(self, client, menu):
        response = client.post('/api/student/plan/quick', json={'budget': '1e30'})
        assert response.status_code == 200
        assert response.get_json()['financialStatus']['dailySafeBudget'] == '100000.00'

    def test_quick_plan_nested_flags(self, client, menu):
        body = {'budget': 200, 'allergies': {'veganOnly': True}}
        data = client.post('/api/student/plan/quick', json=body).get_json()
        assert all(s['is_vegan'] for s in data['suggestions'])


class TestReadEndpoints:

    def test_today_plan_round_trip(self, client, menu):
        generated = post_plan(client, studentId='s-3', daysRemaining=100).get_json()
        today = client.get('/api/student/plan/today?studentId=s-3').get_json()
        assert [s['id'] for s in today['suggestions']] == [s['id'] for s in generated['suggestions']]
        assert today['financialStatus']['planCost'] == generated['financialStatus']['planCost']
        assert today['financialStatus']['dailySafeBudget'] == 'N/A'

    def test_today_plan_default_student(self, client, menu):
        post_plan(client, studentId='student-123', daysRemaining=100)
        today = client.get('/api/student/plan/today').get_json()
        assert len(today['suggestions']) == 3

    def test_history(self, client, menu, log_meal):
        log_meal('s-4', 2, days_ago=2)
        history = client.get('/api/student/history?studentId=s-4').get_json()
        assert len(history) == 1
        assert history[0]['name'] == 'Vegan Salad'
        assert 'log_date' in history[0]

    def test_balance(self, client, app):
        db.session.add(DemoWallet(student_id='s-5', balance=Decimal('320.5')))
        db.session.commit()
        data = client.get('/api/student/balance?studentId=s-5').get_json()
        assert data == {'studentId': 's-5', 'balance': '320.50'}

    def test_balance_unknown_student(self, client, app):
        data = client.get('/api/student/balance?studentId=nobody').get_json()
        assert data['balance'] == '0.00'

    def test_balance_read_failure(self, client, app):
        DemoWallet.__table__.drop(db.engine)
        response = client.get('/api/student/balance?studentId=s-5')
        assert response.status_code == 500
        assert response.get_json() == {'error': 'Failed to fetch balance'}


class TestRestaurantStats:

    def test_sorted_by_popularity(self, client, menu):
        db.session.get(MenuItem, 4).popularity_score = 7
        db.session.get(MenuItem, 2).popularity_score = 3
        db.session.commit()
        data = client.get('/api/restaurant/stats').get_json()
        assert [item['id'] for item in data][:2] == [4, 2]
        assert len(data) == 5

    def test_filter_by_restaurant(self, client, menu):
        db.session.add(MenuItem(name='Harira', category='Dinner', price=Decimal('12'),
                                restaurant_name='Campus Kitchen'))
        db.session.commit()
        data = client.get('/api/restaurant/stats?restaurant=Campus%20Kitchen').get_json()
        assert [item['name'] for item in data] == ['Harira']

    def test_popularity_reflects_saved_plans(self, client, menu):
        post_plan(client, studentId='s-6', daysRemaining=100)
        data = client.get('/api/restaurant/stats?restaurant=Proxy').get_json()
        assert sum(item['popularity_score'] for item in data) == 3


def test_seed_menu_fills_empty_catalog(app):
    added = app_module.seed_menu()
    assert added == MenuItem.query.count() > 0
    assert app_module.seed_menu() == 0
    assert db.session.get(DemoWallet, app.config['DEFAULT_STUDENT_ID']) is not None

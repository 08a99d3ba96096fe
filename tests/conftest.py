"""
Shared pytest fixtures for Rewards360 tests.

Every test gets a fresh in-memory SQLite database with the app context
pushed for the duration of the test.
"""
import pytest
from datetime import date, datetime

from rewards360 import create_app
from rewards360.extensions import db


@pytest.fixture
def app():
    """Application configured for testing with empty tables."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    """Runner for `flask` CLI commands."""
    return app.test_cli_runner()


@pytest.fixture
def sample_users(app):
    """Two users in Jan 2024 and one in Mar 2024."""
    from rewards360.models import User

    users = [
        User(name='Ana', email='ana@example.com', created_at=datetime(2024, 1, 10, 9, 30)),
        User(name='Ben', email='ben@example.com', created_at=datetime(2024, 1, 25, 18, 0)),
        User(name='Cai', email='cai@example.com', created_at=datetime(2024, 3, 2, 12, 0)),
    ]
    db.session.add_all(users)
    db.session.commit()
    return users


@pytest.fixture
def sample_offers(app):
    """One offer starting Dec 2023 and one starting Feb 2024."""
    from rewards360.models import Offer

    offers = [
        Offer(title='Free Coffee', cost_points=10, start_date=date(2023, 12, 1)),
        Offer(title='Movie Ticket', cost_points=25, start_date=date(2024, 2, 15),
              end_date=date(2024, 6, 30)),
    ]
    db.session.add_all(offers)
    db.session.commit()
    return offers


@pytest.fixture
def sample_redemptions(app, sample_users, sample_offers):
    """Two January redemptions (10 and 5 points) and one in February."""
    from rewards360.models import Redemption

    redemptions = [
        Redemption(user_id=sample_users[0].id, offer_id=sample_offers[0].id,
                   date=date(2024, 1, 5), cost_points=10),
        Redemption(user_id=sample_users[1].id, offer_id=sample_offers[0].id,
                   date=date(2024, 1, 20), cost_points=5),
        Redemption(user_id=sample_users[0].id, offer_id=sample_offers[1].id,
                   date=date(2024, 2, 3), cost_points=25),
    ]
    db.session.add_all(redemptions)
    db.session.commit()
    return redemptions

import os

import pytest

# Must be set before the app module is imported
os.environ['FLASK_ENV'] = 'testing'

from app import app, seed_sample_data  # noqa: E402
from models import db  # noqa: E402


@pytest.fixture
def client():
    """Test client over a fresh in-memory database."""
    app.config['TESTING'] = True
    with app.app_context():
        db.create_all()
        with app.test_client() as client:
            yield client
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seeded_client(client):
    """Test client with the sample restaurant loaded."""
    seed_sample_data()
    return client

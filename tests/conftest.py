"""
IT Portal - Test Configuration and Fixtures
"""
import os
from typing import Generator

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the application engine off the on-disk default database
os.environ['DATABASE_URL'] = 'sqlite://'

from itportal_core.app.main import app
from itportal_core.app.db import Base
from itportal_core.app.deps import get_db
from itportal_core.app.services.introspection import SchemaIntrospector
from itportal_core.app import models  # noqa: F401

fake = Faker()

# One in-memory database shared by the test session and the app threads
test_engine = create_engine(
    'sqlite://',
    connect_args={'check_same_thread': False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope='function')
def db_session() -> Generator:
    """Create a fresh schema and session for each test"""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)
        SchemaIntrospector.clear()


@pytest.fixture
def client(db_session) -> Generator:
    """Test client with the database dependency pointed at the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_asset(client):
    """Factory posting an asset and returning the stored row"""
    def _create(**fields):
        payload = {
            'location': 'Pune',
            'department': 'IT',
            'user_name': fake.name(),
            'asset_number': fake.bothify('AST-####'),
            'serial_number': fake.bothify('SN-??####'),
        }
        payload.update(fields)
        response = client.post('/api/asset-details', json=payload)
        assert response.status_code == 201, response.text
        return response.json()['data']
    return _create

"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Local upload storage in a temporary directory
- Seed helpers for sequenced rows
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.storage import LocalStorage, get_storage
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def test_engine():
    return engine


@pytest.fixture
def db_session():
    """
    Create a fresh database schema and session for each test.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def upload_storage(tmp_path):
    """Local storage rooted in a per-test temporary directory"""
    return LocalStorage(str(tmp_path / "uploads"))


@pytest.fixture
def client(db_session, upload_storage):
    """
    FastAPI test client with overridden database and storage dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: upload_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed(db_session):
    """
    Insert rows and return them.

    Usage: seed(Model, dict(...), dict(...))
    """
    def _seed(model, *rows):
        objs = [model(**row) for row in rows]
        db_session.add_all(objs)
        db_session.commit()
        for obj in objs:
            db_session.refresh(obj)
        return objs
    return _seed


@pytest.fixture
def sample_employee_plan():
    """Sample employee plan payload"""
    return {
        "plan_name_english": "Basic",
        "plan_name_hindi": "बेसिक",
        "plan_validity_days": 30,
        "plan_tagline_english": "Start applying today",
        "plan_price": "99.00",
        "contact_credits": 10,
        "interest_credits": "5.00",
    }


@pytest.fixture
def sample_employer_plan(sample_employee_plan):
    """Sample employer plan payload (employee fields plus ad credits)"""
    return {**sample_employee_plan, "plan_name_english": "Hiring Pro", "ad_credits": 3}

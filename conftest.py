"""
Shared pytest fixtures: a throwaway SQLite database and a TestClient
"""
import os
import tempfile
from datetime import date, timedelta
from pathlib import Path

# Must be set before hrd_api.config is imported
_TEST_DB_DIR = tempfile.mkdtemp(prefix="hrd_api_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TEST_DB_DIR) / 'test.db'}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["SEED_DUMMY_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from hrd_api.database import Base, SessionLocal, engine
from hrd_api.main import app
from hrd_api.models import Division, Employee, User
from hrd_api.services.auth import get_password_hash


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # Not used as a context manager, so startup seeding does not run
    return TestClient(app)


@pytest.fixture
def admin_user(db):
    user = User(
        username="admin",
        password_hash=get_password_hash("admin123"),
        email="admin@hrd.local",
        role="admin"
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def it_division(db):
    division = Division(name="IT", description="Information Technology", color="#3b82f6", icon="desktop")
    db.add(division)
    db.commit()
    db.refresh(division)
    return division


@pytest.fixture
def make_employee(db):
    """Factory inserting an employee directly through the ORM"""

    def _make(name="Budi Santoso", contract_days=None, **fields):
        if contract_days is not None:
            fields["contract_end_date"] = date.today() + timedelta(days=contract_days)
        employee = Employee(name=name, **fields)
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make

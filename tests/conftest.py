import os

# Must be set before money_reminders is imported: settings and the engine are module singletons
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["METRICS_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["API_PREFIX"] = "/api"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from money_reminders.db.base import Base
from money_reminders.db.session import SessionLocal, engine
from money_reminders.main import app
from money_reminders.utils.timezone import now_utc
import money_reminders.models  # noqa: F401


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def rahul_payload():
    return {
        "personName": "Rahul Sharma",
        "phoneNumber": "9876543210",
        "amount": 500,
        "dueDate": (now_utc() + timedelta(days=2)).isoformat(),
    }

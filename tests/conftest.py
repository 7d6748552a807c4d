import os

# Required settings must exist before the app modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"
os.environ["ENVIRONMENT"] = "test"
# General budget high enough for a whole test run; login keeps its own limit
os.environ["RATE_LIMIT_MAX"] = "100000"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.rate_limit import limiter
from app.core.security import get_password_hash
from app.db.session import Base, get_db
from app.models.user import User
from main import app

TEST_DB_URL = "sqlite://"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_PASSWORD = "password123"


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    limiter.reset()
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def bootstrap_user(db):
    user = User(
        username="admin",
        email="admin@acme.org",
        hashed_password=get_password_hash(ADMIN_PASSWORD),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def auth_headers(client, bootstrap_user):
    resp = client.post("/api/auth/login", json={"username": "admin", "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['data']['token']}"}


@pytest.fixture
def member(client, auth_headers):
    resp = client.post(
        "/api/members",
        json={"firstName": "Ada", "lastName": "Lovelace", "occupation": "employee"},
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture
def activity(client, auth_headers):
    resp = client.post(
        "/api/activities",
        json={
            "name": "Chess Club",
            "isPeriodic": True,
            "dayOfWeek": "thursday",
            "startTime": "18:00:00",
            "endTime": "20:00:00",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]

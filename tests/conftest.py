import os

# Settings are read at import time, so the required values go in first.
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_123")
os.environ.setdefault("ENVIRONMENT", "development")

import httpx
import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core import security
from app.db import collections, session
from app.main import app
from app.services.payments import PaymentGateway, get_gateway

EMPLOYEE_EMAIL = "emp@motionmax.com"
HR_EMAIL = "hr@motionmax.com"
ADMIN_EMAIL = "admin@motionmax.com"


@pytest.fixture
def db():
    database = mongomock.MongoClient()["motionMaxDB"]
    session.ensure_indexes(database)
    return database


@pytest.fixture
def stripe_requests():
    return []


@pytest.fixture
def gateway(stripe_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        stripe_requests.append(request)
        return httpx.Response(200, json={"id": "pi_123", "client_secret": "pi_123_secret_abc"})

    return PaymentGateway("sk_test_123", transport=httpx.MockTransport(handler))


@pytest.fixture
def client(db, gateway):
    app.dependency_overrides[session.get_db] = lambda: db
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def accounts(db):
    """One account per role; returns their ids keyed by role."""
    ids = {}
    for email, role in ((EMPLOYEE_EMAIL, "Employee"), (HR_EMAIL, "HR"), (ADMIN_EMAIL, "Admin")):
        result = db[collections.USERS].insert_one({
            "email": email,
            "name": role + " User",
            "role": role,
            "salary": 1000,
            "bank_account_no": "123456",
            "designation": "Driver",
            "isVerified": True,
            "isFired": False,
        })
        ids[role] = str(result.inserted_id)
    return ids


def auth_headers(email: str) -> dict:
    return {"Cookie": f"{security.TOKEN_COOKIE}={security.create_access_token({'email': email})}"}

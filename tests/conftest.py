import os
from typing import Dict

import mongomock
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("LOCAL_URI", "mongodb://<username>:<password>@localhost:27017")
os.environ.setdefault("DB_NAME", "niyejai_test")
os.environ.setdefault("TOKEN_SECRET", "test-token-secret")
os.environ.setdefault("STRIPE_SK", "sk_test_dummy")


@pytest.fixture()
def db():
    """
    In-memory MongoDB database with the same indexes as production.
    """
    from app.config.database import ensure_indexes

    database = mongomock.MongoClient()["niyejai_test"]
    ensure_indexes(database)
    return database


@pytest.fixture()
def app(db):
    from app.config.database import get_db
    from app.main import app as main_app

    main_app.dependency_overrides[get_db] = lambda: db
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    # No context manager: the lifespan (real MongoDB connection) is not started.
    return TestClient(app)


def _bearer(email: str, **claims) -> Dict[str, str]:
    from app.core.auth.service import AuthService

    token = AuthService.create_access_token({"email": email, **claims})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def bearer():
    """
    Build an Authorization header for the given identity.
    """
    return _bearer


@pytest.fixture()
def make_user(db):
    def _make(email: str, role: str = "User", **fields):
        doc = {
            "email": email,
            "name": fields.pop("name", email.split("@")[0]),
            "photo": None,
            "role": role,
            "createdOn": "2026-10-01",
            "ratingAvg": 0,
            "deliveryCount": 0,
        }
        doc.update(fields)
        doc["_id"] = db["users"].insert_one(doc).inserted_id
        return doc

    return _make


@pytest.fixture()
def admin_headers(make_user) -> Dict[str, str]:
    make_user("admin@niyejai.com", role="Admin")
    return _bearer("admin@niyejai.com")


@pytest.fixture()
def user_headers(make_user) -> Dict[str, str]:
    make_user("customer@niyejai.com", role="User")
    return _bearer("customer@niyejai.com")

"""
Test fixtures: in-memory sqlite database, FastAPI client with overridden
dependencies, provider-style JWTs and a fake identity provider.
"""

import os

# must be set before the app modules read them at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_SCHEMA"] = ""
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-bytes-0123456789"
os.environ["JWT_AUDIENCE"] = "authenticated"

import json
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator

import httpx
import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from create_tables import create_tables
from db import get_db
from dependencies import JWT_ALGORITHM, JWT_AUDIENCE, JWT_SECRET
from identity import IdentityClient, get_identity_client
from main import app
from models import AuthUser, Profile


# ==================== Database fixtures ====================

@pytest.fixture(scope="function")
def test_db_engine():
    """Fresh in-memory database per test, shared across threads via StaticPool."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_db_engine)


@pytest.fixture(scope="function")
def test_db_session(session_factory) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def make_user(test_db_session) -> Callable[..., uuid.UUID]:
    """
    Simulates a provider account: inserts the auth user row and, unless
    told otherwise, its profile.
    """
    def _make(with_profile: bool = True) -> uuid.UUID:
        uid = uuid.uuid4()
        test_db_session.add(AuthUser(id=uid))
        if with_profile:
            test_db_session.add(Profile(id=uid, display_name="Test User"))
        test_db_session.commit()
        return uid
    return _make


@pytest.fixture(scope="function")
def owner_id(make_user) -> uuid.UUID:
    return make_user()


@pytest.fixture(scope="function")
def other_user_id(make_user) -> uuid.UUID:
    return make_user()


# ==================== Auth fixtures ====================

def make_token(user_id, email: str = "me@example.com", expires_in: int = 3600) -> str:
    payload = {
        "sub": str(user_id),
        "email": email,
        "aud": JWT_AUDIENCE,
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


@pytest.fixture
def auth_headers() -> Callable[[uuid.UUID], dict]:
    def _headers(user_id) -> dict:
        return {"Authorization": f"Bearer {make_token(user_id)}"}
    return _headers


class FakeProvider:
    """
    Minimal GoTrue stand-in behind httpx.MockTransport. Sign-up also
    writes the auth user row, like the real provider does in its own schema.
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory
        self.users = {}  # email -> (id, password)
        self.requests = []
        self.reject_logout = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/signup"):
            body = _json(request)
            if body["email"] in self.users:
                return httpx.Response(422, json={"code": 422, "msg": "User already registered"})
            uid = uuid.uuid4()
            self.users[body["email"]] = (uid, body["password"])
            with self._session_factory() as db:
                db.add(AuthUser(id=uid))
                db.commit()
            return httpx.Response(200, json={"id": str(uid), "email": body["email"]})
        if path.endswith("/token"):
            body = _json(request)
            known = self.users.get(body["email"])
            if not known or known[1] != body["password"]:
                return httpx.Response(400, json={"error": "invalid_grant", "error_description": "Invalid login credentials"})
            uid = known[0]
            return httpx.Response(200, json={
                "access_token": make_token(uid, body["email"]),
                "refresh_token": "refresh-" + uid.hex,
                "expires_in": 3600,
                "user": {"id": str(uid), "email": body["email"]},
            })
        if path.endswith("/logout"):
            if self.reject_logout:
                return httpx.Response(401, json={"code": 401, "msg": "invalid JWT: token is expired"})
            return httpx.Response(204)
        return httpx.Response(404, json={"msg": "not found"})


def _json(request: httpx.Request) -> dict:
    return json.loads(request.content)


@pytest.fixture
def fake_provider(session_factory) -> FakeProvider:
    return FakeProvider(session_factory)


@pytest.fixture
def identity_client(fake_provider) -> IdentityClient:
    return IdentityClient(
        base_url="http://auth.test",
        api_key="anon-key",
        transport=httpx.MockTransport(fake_provider.handler),
    )


# ==================== API client ====================

@pytest.fixture
def client(session_factory, identity_client) -> Generator[TestClient, None, None]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_client] = lambda: identity_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

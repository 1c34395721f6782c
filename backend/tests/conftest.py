"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container
from shared.config import Settings
from shared.models import AuthenticatedUser

from tests.fakes import FakeSupabase


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

ALICE = AuthenticatedUser(id="user-alice", email="alice@example.com", email_verified=True)
BOB = AuthenticatedUser(id="user-bob", email="bob@example.com", email_verified=True)
CAROL = AuthenticatedUser(id="user-carol", email="carol@example.com", email_verified=True)
DAVE = AuthenticatedUser(id="user-dave", email="dave@example.com", email_verified=True)


def create_test_token(
    user_id: str = "test-user-123",
    email: Optional[str] = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token, or None to omit the claim
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    if email is not None:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(user: AuthenticatedUser) -> dict[str, str]:
    """Authorization headers for a seeded user."""
    return {"Authorization": f"Bearer {create_test_token(user.id, user.email)}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="http://localhost:54321",
        supabase_service_role_key="test-service-role-key",
        supabase_jwt_secret=TEST_JWT_SECRET,
    )


@pytest.fixture
def db() -> FakeSupabase:
    """Fake store seeded with the identity directory."""
    fake = FakeSupabase()
    fake.seed(
        "users",
        *({"id": u.id, "email": u.email} for u in (ALICE, BOB, CAROL, DAVE)),
    )
    return fake


@pytest.fixture
def container(db: FakeSupabase, settings: Settings) -> ServiceContainer:
    return ServiceContainer(db, settings)


@pytest.fixture
def app(container: ServiceContainer):
    """Application whose requests all share the fake-backed container."""
    application = create_app()
    application.dependency_overrides[get_container] = lambda: container
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}

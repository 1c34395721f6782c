import pytest
from pydantic import ValidationError

from modules.auth.models import UserProfile, JWTPayload


class TestJWTPayload:
    def test_parse_supabase_claims(self):
        payload = JWTPayload(
            sub="user-123",
            email="test@example.com",
            exp=2000000000,
            iat=1900000000,
            app_metadata={"provider": "email"},
        )
        assert payload.sub == "user-123"
        assert payload.aud == "authenticated"
        assert payload.role == "authenticated"
        assert payload.app_metadata == {"provider": "email"}
        assert payload.user_metadata == {}

    def test_email_is_optional(self):
        payload = JWTPayload(sub="user-123", exp=2000000000, iat=1900000000)
        assert payload.email is None

    def test_sub_is_required(self):
        with pytest.raises(ValidationError):
            JWTPayload(exp=2000000000, iat=1900000000)


class TestUserProfile:
    def test_create_profile(self):
        profile = UserProfile(id="user-123", email="test@example.com")
        assert profile.id == "user-123"
        assert profile.email == "test@example.com"

"""
Authentication service implementation.

Validates Supabase JWT tokens and resolves identities from the user
directory. This is the only place credentials are inspected.
"""

from datetime import datetime, timezone
from typing import Optional
import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import UserProfile, JWTPayload
from .repository import UserDirectoryRepository
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


class AuthService(IAuthService):
    """
    Implementation of the identity context.

    Uses Supabase JWT tokens for authentication and the Supabase
    ``users`` table as the identity directory.
    """

    def __init__(self, settings: Settings, directory: UserDirectoryRepository):
        self._settings = settings
        self._directory = directory

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        try:
            jwt_payload = JWTPayload(**payload)
            if not jwt_payload.email:
                raise InvalidTokenError("Token carries no email claim")

            return AuthenticatedUser(
                id=jwt_payload.sub,
                email=jwt_payload.email,
                email_verified=jwt_payload.email_confirmed_at is not None,
                last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            )
        except PydanticValidationError:
            raise InvalidTokenError("Token claims are malformed")

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self._directory.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        normalized = email.strip().lower()
        if not normalized:
            return None
        return self._directory.get_by_email(normalized)

    async def get_users_by_ids(self, user_ids: list[str]) -> dict[str, UserProfile]:
        profiles = self._directory.get_many(sorted(set(user_ids)))
        return {p.id: p for p in profiles}

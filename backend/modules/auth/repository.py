"""
User directory repository.

Read-only access to the ``users`` table, the public mirror of
``auth.users`` maintained by the identity provider.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserProfile


class UserDirectoryRepository(BaseRepository[UserProfile]):
    """Lookups against the identity directory. Never writes."""

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        result = self._execute(
            self._db.table("users").select("id, email").eq("id", user_id).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        result = self._execute(
            self._db.table("users").select("id, email").eq("email", email).limit(1)
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def get_many(self, user_ids: list[str]) -> list[UserProfile]:
        if not user_ids:
            return []
        result = self._execute(
            self._db.table("users").select("id, email").in_("id", user_ids)
        )
        return [self._map_to_profile(row) for row in result.data]

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(id=str(data["id"]), email=data["email"])

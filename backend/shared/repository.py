"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating store failures into the shared
exception taxonomy.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError, UnavailableError, UnexpectedError, ValidationError


T = TypeVar("T")

logger = logging.getLogger(__name__)

# Postgres SQLSTATEs
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Error translation via self._execute
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class TeamRepository(BaseRepository[Team]):
            def get_team(self, team_id: str) -> Optional[Team]:
                result = self._execute(
                    self._db.table("teams").select("*").eq("id", team_id)
                )
                if not result.data:
                    return None
                return self._map_to_team(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any) -> Any:
        """
        Execute a PostgREST query and translate failures.

        Raises:
            ConflictError: A unique constraint rejected the write.
            ValidationError: A value could not be parsed as its column type.
            UnavailableError: The store timed out or could not be reached.
            UnexpectedError: Any other PostgREST error.
        """
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise ConflictError(
                    e.message or "Unique constraint violated",
                    details={"constraint": e.details},
                ) from e
            if e.code == INVALID_TEXT_REPRESENTATION:
                raise ValidationError(
                    "Malformed identifier",
                    code="MALFORMED_IDENTIFIER",
                ) from e
            logger.error("PostgREST error %s: %s", e.code, e.message)
            raise UnexpectedError("Store request failed") from e
        except httpx.TimeoutException as e:
            raise UnavailableError("Store request timed out") from e
        except httpx.TransportError as e:
            raise UnavailableError("Store is unreachable") from e

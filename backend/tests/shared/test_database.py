"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.config import Settings
from shared.database import create_supabase_client


class TestCreateSupabaseClient:
    @patch("shared.database.create_client")
    def test_creates_client_with_service_role_and_timeout(self, mock_create):
        """Should create a client with the service role key and store timeout."""
        mock_create.return_value = MagicMock()
        settings = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="test-key",
            store_timeout_seconds=3.0,
        )

        client = create_supabase_client(settings)

        assert client is mock_create.return_value
        args, kwargs = mock_create.call_args
        assert args == ("https://test.supabase.co", "test-key")
        assert kwargs["options"].postgrest_client_timeout == 3.0

    @patch("shared.database.create_client")
    def test_each_call_builds_a_new_client(self, mock_create):
        """Nothing is cached between calls."""
        mock_create.side_effect = [MagicMock(), MagicMock()]
        settings = Settings(
            _env_file=None,
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="test-key",
        )

        first = create_supabase_client(settings)
        second = create_supabase_client(settings)

        assert first is not second
        assert mock_create.call_count == 2

    @pytest.mark.parametrize(
        "url,key",
        [("", "test-key"), ("https://test.supabase.co", ""), ("", "")],
    )
    def test_missing_configuration_raises(self, url, key):
        settings = Settings(_env_file=None, supabase_url=url, supabase_service_role_key=key)
        with pytest.raises(RuntimeError, match="Supabase configuration missing"):
            create_supabase_client(settings)

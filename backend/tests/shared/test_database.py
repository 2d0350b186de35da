"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.database import get_supabase_client, reset_client_cache


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_get_supabase_client_creates_client(self, mock_settings, mock_create):
        """Should create client with service role key."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client = get_supabase_client()

        mock_create.assert_called_once_with(
            "https://test.supabase.co",
            "test-key",
        )
        assert client is not None

    @patch("shared.database.create_client")
    def test_get_supabase_client_uses_given_settings(self, mock_create, settings):
        """Explicit settings should take precedence over the cached ones."""
        mock_create.return_value = MagicMock()

        get_supabase_client(settings)

        mock_create.assert_called_once_with(
            "https://test.supabase.co",
            "test-service-key",
        )

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_get_supabase_client_caches_client(self, mock_settings, mock_create):
        """Should cache the client and not recreate it."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client1 = get_supabase_client()
        client2 = get_supabase_client()

        # Should only be called once due to caching
        mock_create.assert_called_once()
        assert client1 is client2

    @patch("shared.database.get_settings")
    def test_get_supabase_client_raises_without_url(self, mock_settings):
        """Should raise if URL is missing."""
        mock_settings.return_value.supabase_url = ""
        mock_settings.return_value.supabase_service_role_key = "test-key"

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_client()

    @patch("shared.database.get_settings")
    def test_get_supabase_client_raises_without_key(self, mock_settings):
        """Should raise if service role key is missing."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = ""

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_client()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_reset_client_cache(self, mock_settings, mock_create):
        """Should create a new client after the cache is reset."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.side_effect = [MagicMock(), MagicMock()]

        client1 = get_supabase_client()
        reset_client_cache()
        client2 = get_supabase_client()

        assert client1 is not client2
        assert mock_create.call_count == 2

    @patch("shared.database.create_client")
    def test_get_supabase_client_per_project(self, mock_create, settings):
        """Settings for another project should not reuse the first client."""
        mock_create.side_effect = lambda url, key: MagicMock(url=url)
        other = settings.model_copy(update={"supabase_url": "https://other.supabase.co"})

        first = get_supabase_client(settings)
        second = get_supabase_client(other)

        assert first is not second
        assert second.url == "https://other.supabase.co"
        assert get_supabase_client(settings) is first
        assert mock_create.call_count == 2

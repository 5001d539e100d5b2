"""Tests for the API settings model."""

from __future__ import annotations

import base64

import pytest

from dataforseo_cli.config import APISettings
from dataforseo_cli.shared.errors import ConfigurationError, ErrorCode


class TestAuthHeader:
    """Test APISettings.auth_header."""

    def test_login_password(self):
        settings = APISettings(login="user", password="secret")
        assert settings.auth_header() == "Basic " + base64.b64encode(b"user:secret").decode()

    def test_base64_token_wins(self):
        settings = APISettings(login="user", password="secret", base64_token="TOKEN")
        assert settings.auth_header() == "Basic TOKEN"

    def test_missing_credentials(self):
        with pytest.raises(ConfigurationError) as exc_info:
            APISettings(login="user").auth_header()
        assert exc_info.value.code == ErrorCode.CREDENTIALS_MISSING
        assert "set-credentials" in exc_info.value.message


class TestMaskedLogin:
    """Test APISettings.masked_login."""

    def test_masks_login(self):
        assert APISettings(login="user@example.com", password="x").masked_login() == "use***"

    def test_from_base64_token(self):
        token = base64.b64encode(b"someone:pw").decode()
        assert APISettings(base64_token=token).masked_login() == "som***"

    def test_undecodable_token(self):
        assert APISettings(base64_token="not base64!").masked_login() == "(base64 token)"

    def test_secrets_hidden_from_repr(self):
        text = repr(APISettings(login="user", password="hunter2", base64_token="TOKEN"))
        assert "hunter2" not in text
        assert "TOKEN" not in text

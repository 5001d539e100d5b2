"""API configuration model (DataForSEO credentials and connection)."""

from __future__ import annotations

import base64
import binascii

from pydantic import BaseModel, Field

from dataforseo_cli.shared.constants import APIConfig, CLIHelp
from dataforseo_cli.shared.errors import ConfigurationError, ErrorCode, ErrorContext

MASK_VISIBLE_CHARS = 3


class APISettings(BaseModel):
    """DataForSEO API configuration.

    Credentials are either a login/password pair or a pre-encoded
    base64 ``login:password`` token. Secrets are hidden from ``repr``.
    """

    login: str = Field(default="", description="DataForSEO API login")
    password: str = Field(
        default="",
        repr=False,
        description="DataForSEO API password",
    )
    base64_token: str = Field(
        default="",
        repr=False,
        description="Base64-encoded 'login:password' token",
    )
    base_url: str = Field(default=APIConfig.BASE_URL, description="API base URL")
    timeout: int = Field(
        default=APIConfig.TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout in seconds",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.base64_token or (self.login and self.password))

    def auth_header(self) -> str:
        """Build the HTTP Basic ``Authorization`` header value.

        Raises:
            ConfigurationError: If no credentials are configured
        """
        if self.base64_token:
            return f"Basic {self.base64_token}"
        if self.login and self.password:
            raw = f"{self.login}:{self.password}".encode()
            return f"Basic {base64.b64encode(raw).decode('ascii')}"
        raise ConfigurationError(
            ErrorCode.CREDENTIALS_MISSING,
            CLIHelp.NO_CREDENTIALS_HINT,
            ErrorContext(operation="auth_header"),
        )

    def masked_login(self) -> str:
        """Return the login with everything past the first characters masked."""
        login = self.login
        if not login and self.base64_token:
            try:
                decoded = base64.b64decode(self.base64_token, validate=True).decode()
            except (binascii.Error, UnicodeDecodeError):
                return "(base64 token)"
            login = decoded.split(":", 1)[0]
        if not login:
            return ""
        return login[:MASK_VISIBLE_CHARS] + "***"

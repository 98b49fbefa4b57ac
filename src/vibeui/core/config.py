"""Configuration management for the VibeUI backend.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the VIBEUI_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (VIBEUI_* prefix, plus a few unprefixed aliases
   such as ``GEMINI_API_KEY`` and ``PORT`` for hosting platforms)
2. .env file in the project root
3. Default values defined in VibeUIConfig

Example .env file:
    VIBEUI_GEMINI_API_KEY=your-key
    VIBEUI_AUTH_USER=admin
    VIBEUI_AUTH_PASS=a-long-password
    VIBEUI_SESSION_SECRET=change-me-in-production
    VIBEUI_PRODUCTION=true

Deployment Variants
-------------------
``auth_enabled`` selects between the two supported deployments:

- ``True`` (default): a single operator logs in with ``auth_user`` /
  ``auth_pass`` and every route except ``/health`` and ``/login`` is gated.
- ``False``: no session middleware, no login routes, every route is public.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time::

    from vibeui.core.config import config

    print(config.server_port)
    print(config.auth_enabled)
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package-relative default for the single-page application assets.
_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class VibeUIConfig(BaseSettings):
    """Main configuration for the VibeUI backend.

    Attributes
    ----------
    Server Settings:
        server_host : str
            Bind address for uvicorn.
        server_port : int
            Listening port (1-65535).
        forwarded_allow_ips : str
            Comma-separated proxy addresses whose ``X-Forwarded-For`` header
            is trusted when resolving the client address (``*`` for all).
        max_body_bytes : int
            Largest request body accepted, by ``Content-Length``.
        static_dir : Path
            Directory holding ``index.html`` and the front-end assets.
        log_level : str
            Log level handed to uvicorn.

    Provider Settings:
        gemini_api_key : str | None
            Credential for the image provider.  Generation endpoints answer
            500 while it is unset.
        gemini_model : str
            Model identifier sent with every generation call.

    Auth Settings:
        auth_enabled : bool
            Select the authenticated deployment variant.
        auth_user, auth_pass : str
            The single operator credential pair.
        session_secret : str
            Key used to sign the session cookie.
        production : bool
            Mark the session cookie ``Secure``.

    Rate Limiting:
        rate_limit : str
            Limit applied per client to each generation endpoint, in
            ``limits`` notation (``"5/minute"``).
        rate_limit_storage_uri : str
            Counter storage.  ``memory://`` keeps windows in-process; point
            it at a shared store when running several workers.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VIBEUI_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=3000,
        description="Server port",
        ge=1,
        le=65535,
        validation_alias=AliasChoices("server_port", "VIBEUI_SERVER_PORT", "PORT"),
    )
    forwarded_allow_ips: str = Field(
        default="127.0.0.1",
        description="Proxies trusted to set X-Forwarded-For",
    )
    max_body_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted request body size in bytes",
        ge=1,
    )
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory containing the single-page application",
    )
    log_level: Literal["critical", "error", "warning", "info", "debug"] = Field(
        default="info",
        description="uvicorn log level",
    )

    # Provider settings
    gemini_api_key: str | None = Field(
        default=None,
        description="API key for the image generation provider",
        validation_alias=AliasChoices("gemini_api_key", "VIBEUI_GEMINI_API_KEY", "GEMINI_API_KEY"),
    )
    gemini_model: str = Field(
        default="gemini-3-pro-image-preview",
        description="Image generation model identifier",
    )

    # Auth settings
    auth_enabled: bool = Field(
        default=True,
        description="Require an operator login in front of every protected route",
    )
    auth_user: str = Field(
        default="admin",
        validation_alias=AliasChoices("auth_user", "VIBEUI_AUTH_USER", "AUTH_USER"),
    )
    auth_pass: str = Field(
        default="changeme",
        validation_alias=AliasChoices("auth_pass", "VIBEUI_AUTH_PASS", "AUTH_PASS"),
    )
    session_secret: str = Field(
        default="vibeui-dev-secret",
        description="Secret used to sign the session cookie",
        validation_alias=AliasChoices("session_secret", "VIBEUI_SESSION_SECRET", "SESSION_SECRET"),
    )
    production: bool = Field(
        default=False,
        description="Production mode (secure cookies)",
    )

    # Rate limiting
    rate_limit: str = Field(
        default="5/minute",
        description="Per-client limit on the generation endpoints",
    )
    rate_limit_storage_uri: str = Field(
        default="memory://",
        description="Storage backend for rate-limit counters",
    )

    @property
    def provider_configured(self) -> bool:
        """Whether a non-empty provider credential is available."""
        return bool(self.gemini_api_key)

    @property
    def trusted_proxies(self) -> list[str]:
        """``forwarded_allow_ips`` split into individual entries."""
        return [ip.strip() for ip in self.forwarded_allow_ips.split(",") if ip.strip()]


# Global configuration instance
# Loaded once from VIBEUI_* environment variables and the .env file.
config = VibeUIConfig()

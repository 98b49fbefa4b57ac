"""Error taxonomy for the VibeUI backend.

Every failure a request can run into is one of the exceptions below.  Each
carries the HTTP status it maps to and a client-facing message; the API layer
installs a single handler that renders them as ``{"error": message}``.

========================  ======  ==========================================
Exception                 Status  Raised when
========================  ======  ==========================================
``ValidationError``       400     A required request field is missing.
``ConfigurationError``    500     The provider credential is not set.
``ProviderError``         500     The provider call failed or returned no
                                  image.
``RateLimitError``        429     The client exhausted its window.
``AuthError``             200     Login credentials did not match (rendered
                                  inline on the login page).
``LoginRequired``         302     An anonymous client hit a protected route.
========================  ======  ==========================================
"""

from __future__ import annotations


class VibeUIError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        status_code: HTTP status returned to the client.
        message: Human-readable message placed in the ``error`` field.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(VibeUIError):
    """A required request field is missing or empty."""

    status_code = 400


class ConfigurationError(VibeUIError):
    """The server is missing configuration needed to serve the request."""

    status_code = 500


class ProviderError(VibeUIError):
    """The image provider failed or produced no image."""

    status_code = 500


class RateLimitError(VibeUIError):
    status_code = 429


class AuthError(VibeUIError):
    """Submitted credentials did not match the configured operator."""

    status_code = 200


class LoginRequired(VibeUIError):
    """An anonymous client requested a protected route."""

    status_code = 302

    def __init__(self, message: str = "Login required") -> None:
        super().__init__(message)

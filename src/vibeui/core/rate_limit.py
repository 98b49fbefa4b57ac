"""Per-client rate limiting for the generation endpoints.

Uses slowapi (a Starlette-compatible wrapper around the ``limits`` library)
with the fixed-window strategy.  Requests are keyed by client IP address;
when the app runs behind a trusted proxy, uvicorn's proxy-header handling
rewrites ``request.client`` from ``X-Forwarded-For`` before the key is read.

Both generation endpoints draw from one shared window per client, so five
moodboard calls exhaust the preview budget too.

The check runs as a FastAPI dependency rather than a route decorator so that
a throttled client is rejected before the request body is looked at::

    limiter = GenerationRateLimiter("5/minute")

    @app.post("/api/moodboard", dependencies=[Depends(limiter.check)])
    async def moodboard(...):
        ...

Windows live in the storage named by ``storage_uri``.  ``memory://`` keeps
them in-process and expires each key when its window ends; several worker
processes need a shared store (``redis://...``) or each tracks its own
window.
"""

from __future__ import annotations

from limits import RateLimitItem, parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from vibeui.core.errors import RateLimitError

RATE_LIMIT_MESSAGE = "Too many requests. Please wait a moment."

# All throttled routes share this scope, giving one window per client.
_SCOPE = "generation"


class GenerationRateLimiter:
    """Fixed-window request counter keyed by client address.

    Args:
        limit: Limit string in ``limits`` notation, e.g. ``"5/minute"``.
        storage_uri: Counter storage URI (``memory://`` by default).
    """

    def __init__(self, limit: str = "5/minute", storage_uri: str = "memory://") -> None:
        self.item: RateLimitItem = parse(limit)
        self.key_func = get_remote_address
        self._limiter = Limiter(
            key_func=self.key_func,
            strategy="fixed-window",
            storage_uri=storage_uri,
        )

    def key_for(self, request: Request) -> str:
        """Return the identity a request is counted against."""
        return self.key_func(request)

    def check(self, request: Request) -> None:
        """Count one request against the caller's window.

        Raises:
            RateLimitError: If the caller has already used up the window.
        """
        if not self._limiter.limiter.hit(self.item, _SCOPE, self.key_for(request)):
            raise RateLimitError(RATE_LIMIT_MESSAGE)

    def reset(self) -> None:
        """Drop every tracked window."""
        self._limiter.reset()

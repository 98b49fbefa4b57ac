"""Core services for the VibeUI backend.

- **VibeUIConfig** / **config**: Pydantic Settings configuration loaded from
  ``VIBEUI_*`` environment variables.
- **GenerationClient**: async wrapper around the image provider.
- **GenerationRateLimiter**: fixed-window per-client throttling.
- **errors**: exception taxonomy mapped onto HTTP responses.

Nothing in this package knows about FastAPI routes; the API layer in
:mod:`vibeui.api` composes these pieces per endpoint.
"""

from vibeui.core.config import VibeUIConfig, config
from vibeui.core.generation import GenerationClient, GenerationResult
from vibeui.core.rate_limit import GenerationRateLimiter

__all__ = [
    "GenerationClient",
    "GenerationRateLimiter",
    "GenerationResult",
    "VibeUIConfig",
    "config",
]

"""VibeUI backend — FastAPI Application.

This module is the single entry point for the web application.  It defines
:func:`create_app`, the module-level ``app`` instance built from the global
configuration, all routes, and the ``main()`` CLI function that launches the
uvicorn server.

Architecture
------------
Every request passes through the same short pipeline:

1. **Body-size guard** — bodies over ``max_body_bytes`` are refused with 413.
2. **Auth gate** (authenticated variant only) — anonymous clients are
   redirected to ``/login``.
3. **Rate limiter** (generation endpoints only) — five requests per minute
   per client, shared across both endpoints.
4. **Validation + prompt building** — see :mod:`vibeui.api.prompt_builder`.
5. **Generation** — :class:`~vibeui.core.generation.GenerationClient` calls
   the provider; the awaited call is the only suspension point.
6. **Response mapping** — success returns ``{image, mimeType}``; every
   :class:`~vibeui.core.errors.VibeUIError` becomes ``{error: message}``.

The two deployment variants share this module.  ``auth_enabled`` decides
whether the session middleware, the login routes and the gate dependency are
installed; nothing else differs.

Endpoints
---------
========  ======================  ==========================================
Method    Path                    Purpose
========  ======================  ==========================================
GET       ``/health``             Liveness probe (always public)
GET       ``/login``              Login form (auth variant)
POST      ``/login``              Credential check (auth variant)
GET       ``/logout``             End the session (auth variant)
POST      ``/api/moodboard``      Generate a mood-board image
POST      ``/api/preview``        Generate a UI preview image
GET       ``/{path}``             Static asset or SPA entry document
========  ======================  ==========================================

Usage
-----
CLI (installed entry point)::

    vibeui

Direct invocation::

    python -m vibeui.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse, Response
from starlette.middleware.sessions import SessionMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from vibeui import __version__
from vibeui.api.auth import LOGIN_PATH, SESSION_MAX_AGE, build_auth_router, require_login
from vibeui.api.body_limit import BodySizeLimitMiddleware
from vibeui.api.models import MoodboardRequest, PreviewRequest
from vibeui.api.prompt_builder import build_moodboard_prompt, build_preview_prompt
from vibeui.core.config import VibeUIConfig, config
from vibeui.core.errors import ConfigurationError, LoginRequired, ProviderError, VibeUIError
from vibeui.core.generation import GenerationClient
from vibeui.core.rate_limit import GenerationRateLimiter

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "GEMINI_API_KEY not configured"
INDEX_DOCUMENT = "index.html"


# ---------------------------------------------------------------------------
# Application lifecycle.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Reset process-scoped state on startup and report the variant.

    The rate-limit table starts empty and is never persisted; it is dropped
    again on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    settings: VibeUIConfig = app.state.settings
    app.state.rate_limiter.reset()
    logger.info(
        f"VibeUI {__version__} ready (auth {'enabled' if settings.auth_enabled else 'disabled'}, "
        f"provider {'configured' if settings.provider_configured else 'NOT configured'})"
    )
    if settings.auth_enabled and settings.production and settings.session_secret == "vibeui-dev-secret":
        logger.warning("Running in production with the default session secret")

    yield  # Application runs here.

    app.state.rate_limiter.reset()


# ---------------------------------------------------------------------------
# Request helpers.
# ---------------------------------------------------------------------------


def _get_generation_client(request: Request) -> GenerationClient:
    """Return the provider client, or fail if no credential is configured.

    Raises:
        ConfigurationError: If the provider key is absent.
    """
    client: GenerationClient | None = request.app.state.generation_client
    if client is None or not request.app.state.settings.provider_configured:
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    return client


async def _generate(request: Request, prompt: str, label: str) -> dict[str, str]:
    """Run one generation call and map the result onto the response body.

    Provider failures are logged here and re-raised for the shared error
    handler.
    """
    client = _get_generation_client(request)
    try:
        result = await client.generate(prompt)
    except ProviderError as exc:
        logger.error(f"{label} error: {exc.message}")
        raise
    return result.to_response()


def _resolve_static(static_dir: Path, path: str) -> Path:
    """Map a request path onto a file under *static_dir*.

    Existing files inside the directory are served as-is; anything else
    (unknown paths, directories, paths escaping the directory) falls back to
    the SPA entry document so client-side routing can handle it.
    """
    root = static_dir.resolve()
    if path:
        candidate = (root / path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return root / INDEX_DOCUMENT


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(
    settings: VibeUIConfig | None = None,
    *,
    generation_client: GenerationClient | None = None,
) -> FastAPI:
    """Build the FastAPI application for one deployment variant.

    Args:
        settings: Configuration to bind.  Defaults to the global ``config``.
        generation_client: Provider client to use.  When omitted one is
            created from ``settings.gemini_api_key``; with no key configured
            the generation endpoints answer 500.

    Returns:
        A fully wired :class:`FastAPI` instance.
    """
    settings = settings or config

    if generation_client is None and settings.provider_configured:
        generation_client = GenerationClient(settings.gemini_api_key, settings.gemini_model)

    app = FastAPI(
        title="VibeUI",
        description="Mood-board and UI-preview image generation for a design-system builder.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.generation_client = generation_client
    app.state.rate_limiter = GenerationRateLimiter(
        settings.rate_limit,
        storage_uri=settings.rate_limit_storage_uri,
    )

    # --- Dependencies -------------------------------------------------------
    # Listed in execution order: the gate, then the limiter.  Both run before
    # the request body is validated.
    async def enforce_rate_limit(request: Request) -> None:
        request.app.state.rate_limiter.check(request)

    protected: list = [Depends(require_login)] if settings.auth_enabled else []
    throttled: list = [*protected, Depends(enforce_rate_limit)]

    # --- Error mapping ------------------------------------------------------

    @app.exception_handler(VibeUIError)
    async def vibeui_error_handler(request: Request, exc: VibeUIError) -> Response:
        if isinstance(exc, LoginRequired):
            return RedirectResponse(LOGIN_PATH, status_code=302)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Schema errors (wrong types, incomplete colour palette) use the same
        # 400 body as the endpoints' own checks.
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(p) for p in first.get("loc", ())[1:])
            message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
        else:
            message = "Invalid request"
        return JSONResponse({"error": message}, status_code=400)

    # --- Middleware ---------------------------------------------------------
    # add_middleware wraps outermost-last: proxy headers are resolved first,
    # then the body-size guard, then the session cookie.

    if settings.auth_enabled:
        app.add_middleware(
            SessionMiddleware,
            secret_key=settings.session_secret,
            max_age=SESSION_MAX_AGE,
            same_site="lax",
            https_only=settings.production,
        )

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=settings.trusted_proxies)

    # --- Routes -------------------------------------------------------------

    @app.get("/health")
    async def health() -> dict:
        """Liveness probe, public in both variants."""
        return {"ok": True}

    if settings.auth_enabled:
        app.include_router(build_auth_router(settings))

    @app.post("/api/moodboard", dependencies=throttled)
    async def moodboard(request: Request, req: MoodboardRequest) -> dict:
        """Generate a mood-board image from vibes and optional app details.

        Returns:
            ``{"image": <base64>, "mimeType": <media type>}``.

        Raises:
            ValidationError: 400 if ``vibes`` is missing or empty.
            ConfigurationError: 500 if no provider key is configured.
            ProviderError: 500 if generation fails or yields no image.
        """
        prompt = build_moodboard_prompt(req.vibes, app_name=req.app_name, app_desc=req.app_desc)
        return await _generate(request, prompt, "Moodboard")

    @app.post("/api/preview", dependencies=throttled)
    async def preview(request: Request, req: PreviewRequest) -> dict:
        """Generate a UI preview image from the full design system.

        Returns:
            ``{"image": <base64>, "mimeType": <media type>}``.

        Raises:
            ValidationError: 400 if ``appName`` or ``colors`` is missing.
            ConfigurationError: 500 if no provider key is configured.
            ProviderError: 500 if generation fails or yields no image.
        """
        prompt = build_preview_prompt(
            req.app_name,
            req.colors,
            app_desc=req.app_desc,
            audience=req.audience,
            vibes=req.vibes,
            font_heading=req.font_heading,
            font_body=req.font_body,
            pages=req.pages,
            radius=req.radius,
        )
        return await _generate(request, prompt, "Preview")

    # Registered last so every named route above wins the match.
    @app.get("/{path:path}", dependencies=protected, response_model=None)
    async def spa(path: str) -> FileResponse | JSONResponse:
        """Serve a static asset, or the SPA entry document for any other path."""
        target = _resolve_static(settings.static_dir, path)
        if not target.is_file():
            return JSONResponse({"error": f"{INDEX_DOCUMENT} not found"}, status_code=404)
        return FileResponse(target)

    return app


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = create_app(config)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~vibeui.core.config.config` (which loads
    from ``VIBEUI_SERVER_HOST`` and ``VIBEUI_SERVER_PORT`` / ``PORT``).
    Forwarded headers are handled inside the app, so uvicorn's own
    proxy-header processing is switched off.

    This function is registered as the ``vibeui`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    uvicorn.run(
        "vibeui.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level,
        proxy_headers=False,
        reload=False,
    )


if __name__ == "__main__":
    main()

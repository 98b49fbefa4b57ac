"""Single-operator session gate.

Only used by the authenticated deployment variant (``auth_enabled=True``).
A client is either *anonymous* or *authenticated*; the state lives entirely
in the signed session cookie managed by Starlette's ``SessionMiddleware``,
so there is no server-side session table and a restart does not log anyone
out.

Session Lifecycle
-----------------
- ``POST /login`` with the configured username/password marks the session
  authenticated and stamps ``issued_at``.
- Every protected route depends on :func:`require_login`, which redirects
  anonymous clients to ``/login``.
- Sessions expire seven days after ``issued_at``.  ``SessionMiddleware``
  re-signs the cookie on every response, so the expiry is enforced here
  from the stamp rather than from the cookie's own max-age.
- ``GET /logout`` clears the session.

Credentials are compared with :func:`secrets.compare_digest` so the check
takes the same time wherever the strings first differ.
"""

from __future__ import annotations

import logging
import secrets
import time

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from vibeui.api.login_page import render_login_page
from vibeui.core.config import VibeUIConfig
from vibeui.core.errors import AuthError, LoginRequired

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = 7 * 24 * 60 * 60  # seconds
SESSION_AUTH_KEY = "authed"
SESSION_ISSUED_KEY = "issued_at"

LOGIN_PATH = "/login"
BAD_CREDENTIALS_MESSAGE = "Wrong username or password."


def is_authenticated(request: Request) -> bool:
    """Whether *request* carries a live authenticated session.

    An authenticated session older than :data:`SESSION_MAX_AGE` is cleared
    as a side effect, which makes the response expire the cookie.
    """
    session = request.session
    if not session.get(SESSION_AUTH_KEY):
        return False
    issued_at = session.get(SESSION_ISSUED_KEY, 0)
    if time.time() - issued_at >= SESSION_MAX_AGE:
        session.clear()
        return False
    return True


async def require_login(request: Request) -> None:
    """FastAPI dependency guarding protected routes.

    Raises:
        LoginRequired: If the client is anonymous; rendered as a redirect
            to ``/login``.
    """
    if not is_authenticated(request):
        raise LoginRequired()


def check_credentials(username: str, password: str, settings: VibeUIConfig) -> None:
    """Verify a username/password pair against the configured operator.

    Raises:
        AuthError: If either value does not match.
    """
    user_ok = secrets.compare_digest(username.encode("utf-8"), settings.auth_user.encode("utf-8"))
    pass_ok = secrets.compare_digest(password.encode("utf-8"), settings.auth_pass.encode("utf-8"))
    if not (user_ok and pass_ok):
        raise AuthError(BAD_CREDENTIALS_MESSAGE)


def start_session(request: Request) -> None:
    """Mark the client's session authenticated from now."""
    request.session.clear()
    request.session[SESSION_AUTH_KEY] = True
    request.session[SESSION_ISSUED_KEY] = time.time()


def end_session(request: Request) -> None:
    request.session.clear()


def build_auth_router(settings: VibeUIConfig) -> APIRouter:
    """Create the ``/login`` and ``/logout`` routes bound to *settings*."""
    router = APIRouter()

    @router.get(LOGIN_PATH, response_class=HTMLResponse, response_model=None)
    async def login_form(request: Request) -> HTMLResponse | RedirectResponse:
        """Serve the login page, or go home if already signed in."""
        if is_authenticated(request):
            return RedirectResponse("/", status_code=303)
        return HTMLResponse(render_login_page())

    @router.post(LOGIN_PATH, response_class=HTMLResponse, response_model=None)
    async def login(
        request: Request,
        username: str = Form(""),
        password: str = Form(""),
    ) -> HTMLResponse | RedirectResponse:
        """Check the submitted credentials.

        A failed attempt re-renders the form with an inline message and a
        200 status; a successful one redirects to the application root.
        """
        try:
            check_credentials(username, password, settings)
        except AuthError as exc:
            logger.warning(f"Failed login attempt for user {username!r}")
            return HTMLResponse(render_login_page(exc.message))

        start_session(request)
        logger.info("Operator logged in")
        return RedirectResponse("/", status_code=303)

    @router.get("/logout")
    async def logout(request: Request) -> RedirectResponse:
        end_session(request)
        return RedirectResponse(LOGIN_PATH, status_code=303)

    return router

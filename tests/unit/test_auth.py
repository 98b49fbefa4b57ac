"""Tests for vibeui.api.auth and vibeui.api.login_page."""

from __future__ import annotations

import asyncio
import inspect
import time
from types import SimpleNamespace

import pytest

from vibeui.api.auth import (
    BAD_CREDENTIALS_MESSAGE,
    SESSION_AUTH_KEY,
    SESSION_ISSUED_KEY,
    SESSION_MAX_AGE,
    check_credentials,
    end_session,
    is_authenticated,
    require_login,
    start_session,
)
from vibeui.api.login_page import render_login_page
from vibeui.core.errors import AuthError, LoginRequired


def fake_request(session: dict | None = None) -> SimpleNamespace:
    return SimpleNamespace(session={} if session is None else session)


class TestCheckCredentials:
    def test_matching_pair_passes(self, auth_config):
        check_credentials("operator", "s3cret", auth_config)

    @pytest.mark.parametrize(
        "username, password",
        [
            ("operator", "wrong"),
            ("someone", "s3cret"),
            ("", ""),
            ("operator ", "s3cret"),
            ("OPERATOR", "s3cret"),
        ],
    )
    def test_mismatch_raises(self, auth_config, username, password):
        with pytest.raises(AuthError) as excinfo:
            check_credentials(username, password, auth_config)
        assert excinfo.value.message == BAD_CREDENTIALS_MESSAGE

    def test_non_ascii_credentials(self, auth_config):
        cfg = auth_config.model_copy(update={"auth_pass": "pässwörd"})
        check_credentials("operator", "pässwörd", cfg)


class TestSessionState:
    def test_empty_session_is_anonymous(self):
        assert is_authenticated(fake_request()) is False

    def test_start_session_authenticates(self):
        request = fake_request()
        start_session(request)
        assert request.session[SESSION_AUTH_KEY] is True
        assert request.session[SESSION_ISSUED_KEY] <= time.time()
        assert is_authenticated(request) is True

    def test_start_session_discards_previous_state(self):
        request = fake_request({"stale": "value"})
        start_session(request)
        assert "stale" not in request.session

    def test_end_session_clears(self):
        request = fake_request()
        start_session(request)
        end_session(request)
        assert request.session == {}
        assert is_authenticated(request) is False

    def test_session_within_seven_days(self):
        request = fake_request(
            {SESSION_AUTH_KEY: True, SESSION_ISSUED_KEY: time.time() - SESSION_MAX_AGE + 60}
        )
        assert is_authenticated(request) is True

    def test_session_expires_after_seven_days(self):
        """Expiry is absolute: counted from issuance, not last use."""
        request = fake_request(
            {SESSION_AUTH_KEY: True, SESSION_ISSUED_KEY: time.time() - SESSION_MAX_AGE - 1}
        )
        assert is_authenticated(request) is False
        assert request.session == {}

    def test_session_without_stamp_is_expired(self):
        assert is_authenticated(fake_request({SESSION_AUTH_KEY: True})) is False

    def test_max_age_is_seven_days(self):
        assert SESSION_MAX_AGE == 604800


class TestRequireLogin:
    def test_anonymous_raises(self):
        with pytest.raises(LoginRequired):
            asyncio.run(require_login(fake_request()))

    def test_authenticated_passes(self):
        request = fake_request()
        start_session(request)
        asyncio.run(require_login(request))

    def test_runs_on_the_event_loop(self):
        assert inspect.iscoroutinefunction(require_login)


class TestLoginPage:
    def test_plain_page_has_form(self):
        page = render_login_page()
        assert '<form method="POST" action="/login">' in page
        assert 'name="username"' in page
        assert 'name="password"' in page
        assert 'class="error"' not in page

    def test_error_banner(self):
        page = render_login_page("Wrong username or password.")
        assert '<div class="error">Wrong username or password.</div>' in page

    def test_error_is_escaped(self):
        page = render_login_page("<script>alert(1)</script>")
        assert "<script>alert(1)</script>" not in page
        assert "&lt;script&gt;" in page

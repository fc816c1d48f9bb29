"""
Session Guard Tests

The admin flag only flips to true on an exact credential match.
"""

import pytest

from newsroom.kernel.session import SessionGuard
from newsroom.kernel.types import INVALID_CREDENTIALS


@pytest.fixture
def guard():
    return SessionGuard()


class TestLogin:
    def test_starts_logged_out(self, guard):
        assert not guard.is_authenticated()

    def test_default_credentials_log_in(self, guard):
        r = guard.login("admin@technova.com", "admin123")
        assert r.ok
        assert guard.is_authenticated()

    def test_wrong_credentials_are_rejected(self, guard):
        r = guard.login("x", "y")
        assert not r.ok
        assert r.error.kind == INVALID_CREDENTIALS
        assert not guard.is_authenticated()

    @pytest.mark.parametrize(
        "identifier,secret",
        [
            ("admin@technova.com", "admin1234"),
            ("Admin@technova.com", "admin123"),
            (" admin@technova.com", "admin123"),
            ("admin@technova.com", ""),
        ],
    )
    def test_near_misses_are_rejected(self, guard, identifier, secret):
        assert not guard.login(identifier, secret).ok
        assert not guard.is_authenticated()

    def test_failed_login_keeps_existing_session(self, guard):
        guard.login("admin@technova.com", "admin123")
        guard.login("x", "y")
        assert guard.is_authenticated()

    def test_configured_credentials_replace_defaults(self):
        guard = SessionGuard("editor@example.com", "s3cret")
        assert not guard.login("admin@technova.com", "admin123").ok
        assert guard.login("editor@example.com", "s3cret").ok


class TestLogout:
    def test_logout_clears_session(self, guard):
        guard.login("admin@technova.com", "admin123")
        guard.logout()
        assert not guard.is_authenticated()

    def test_logout_when_logged_out_is_harmless(self, guard):
        guard.logout()
        assert not guard.is_authenticated()

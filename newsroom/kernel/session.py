"""
Newsroom Kernel — Session Guard

A single "admin authenticated" flag and the credential check that sets it.
The credential is a placeholder compared in clear form; it is not a
security boundary.
"""

from __future__ import annotations

import hmac
import logging

from newsroom.kernel.types import INVALID_CREDENTIALS, StoreResult, ok, reject

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_EMAIL = "admin@technova.com"
DEFAULT_ADMIN_PASSWORD = "admin123"


class SessionGuard:
    """Owns the admin session. Starts logged out."""

    def __init__(
        self,
        identifier: str = DEFAULT_ADMIN_EMAIL,
        secret: str = DEFAULT_ADMIN_PASSWORD,
    ) -> None:
        self._identifier = identifier
        self._secret = secret
        self._authenticated = False

    def login(self, identifier: str, secret: str) -> StoreResult:
        """
        Exact match against the configured pair.
        A mismatch leaves the flag as it was.
        """
        matches = hmac.compare_digest(identifier.encode(), self._identifier.encode())
        matches &= hmac.compare_digest(secret.encode(), self._secret.encode())
        if not matches:
            logger.warning("session: rejected login for %r", identifier)
            return reject(INVALID_CREDENTIALS, "invalid email or password")

        self._authenticated = True
        logger.info("session: admin logged in")
        return ok()

    def logout(self) -> None:
        if self._authenticated:
            logger.info("session: admin logged out")
        self._authenticated = False

    def is_authenticated(self) -> bool:
        return self._authenticated

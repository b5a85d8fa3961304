"""Authentication service.

This module verifies credentials against the CredentialStore and opens a
session for the matched account.
"""

import logging

from feedback_galaxy.core.exceptions import UnauthorizedError, ValidationError
from feedback_galaxy.schemas.user import UserRecord
from feedback_galaxy.utils.credential_store import CredentialStore
from feedback_galaxy.utils.session_store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Logs users in and out."""

    def __init__(self, credential_store: CredentialStore, session_store: SessionStore):
        """Initialize AuthService.

        Args:
            credential_store: Source of truth for usernames and passwords.
            session_store: Where the resulting session is kept.
        """
        self.credential_store = credential_store
        self.session_store = session_store

    def authenticate(self, username: str, password: str) -> UserRecord:
        """Verify a username/password pair and start a session.

        Args:
            username: Account name.
            password: Cleartext password.

        Returns:
            The matched UserRecord.

        Raises:
            ValidationError: If username or password is empty.
            UnauthorizedError: If no account matches. The message does not
                reveal whether the username exists.
        """
        if not username:
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")

        user = self.credential_store.find_by_credentials(username, password)
        if user is None:
            logger.info("Failed login attempt for %s", username)
            raise UnauthorizedError("Invalid username or password")

        self.session_store.save(user.username, user.role)
        logger.info("User logged in: %s (%s)", user.username, user.role)
        return user

    def logout(self) -> None:
        self.session_store.clear()
        logger.info("User logged out")

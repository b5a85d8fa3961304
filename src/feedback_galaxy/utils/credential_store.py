"""Credential storage.

This module provides the durable user roster: a flat text file with one
``username:password`` line per account. The file is re-read on every
operation and fully rewritten on removal; there is no locking, so two
concurrent writers race and the last rewrite wins.
"""

import logging
from pathlib import Path
from typing import List, Optional

from feedback_galaxy import config
from feedback_galaxy.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from feedback_galaxy.schemas.user import UserRecord

logger = logging.getLogger(__name__)


class CredentialStore:
    """Manages user records persisted in the credential file."""

    def __init__(self, users_file: Optional[Path] = None):
        """Initialize CredentialStore.

        Args:
            users_file: Path of the credential file. Defaults to the file
                inside the configured data directory.
        """
        self.users_file = Path(users_file) if users_file else config.get_users_file()

    def list_all(self) -> List[UserRecord]:
        """List all users in file order.

        Returns:
            List of UserRecord objects; empty if the file does not exist.

        Raises:
            StorageError: If the file exists but cannot be read.
        """
        if not self.users_file.exists():
            return []

        try:
            content = self.users_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", self.users_file, e)
            raise StorageError("Failed to read user data") from e

        users = []
        for line in content.splitlines():
            # field content is kept verbatim; only whitespace-only lines are skipped
            if not line.strip():
                continue
            username, _, password = line.partition(config.RECORD_DELIMITER)
            users.append(UserRecord(username=username, password=password))
        logger.debug("Loaded %d users from %s", len(users), self.users_file)
        return users

    def get(self, username: str) -> Optional[UserRecord]:
        """Get a user by username (exact, case-sensitive match)."""
        for user in self.list_all():
            if user.username == username:
                return user
        return None

    def add(self, username: str, password: str) -> UserRecord:
        """Append a new user to the credential file.

        Args:
            username: Unique account name.
            password: Cleartext password.

        Returns:
            The created UserRecord.

        Raises:
            ValidationError: If a field is empty or contains the delimiter
                or a line break.
            ConflictError: If the username already exists.
            StorageError: If the file cannot be written.
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        if config.RECORD_DELIMITER in username or config.RECORD_DELIMITER in password:
            raise ValidationError(
                "Username and password cannot contain colon character"
            )

        if username.splitlines() != [username] or password.splitlines() != [password]:
            raise ValidationError(
                "Username and password cannot contain line breaks"
            )

        if self.get(username) is not None:
            raise ConflictError(f"User '{username}' already exists")

        user = UserRecord(username=username, password=password)
        try:
            self.users_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.users_file, "a", encoding="utf-8") as f:
                f.write(user.to_line() + "\n")
        except OSError as e:
            logger.error("Failed to append to %s: %s", self.users_file, e)
            raise StorageError("Failed to add user") from e

        logger.info("Added user: %s (%s)", user.username, user.role)
        return user

    def remove(self, username: str) -> UserRecord:
        """Remove a user and rewrite the credential file.

        Args:
            username: Account to remove.

        Returns:
            The removed UserRecord.

        Raises:
            ValidationError: If username is empty.
            ForbiddenError: If username is the admin account.
            NotFoundError: If no such user exists.
            StorageError: If the file cannot be read or written.
        """
        if not username:
            raise ValidationError("Username is required")

        if username == config.ADMIN_USERNAME:
            raise ForbiddenError("Cannot remove admin user")

        users = self.list_all()
        removed = next((u for u in users if u.username == username), None)
        if removed is None:
            raise NotFoundError(f"User '{username}' not found")

        remaining = [u for u in users if u.username != username]
        content = "".join(u.to_line() + "\n" for u in remaining)
        try:
            self.users_file.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to rewrite %s: %s", self.users_file, e)
            raise StorageError("Failed to remove user") from e

        logger.info("Removed user: %s", username)
        return removed

    def find_by_credentials(self, username: str, password: str) -> Optional[UserRecord]:
        """Find the user matching both username and password exactly.

        Returns:
            The matching UserRecord, or None.
        """
        for user in self.list_all():
            if user.username == username and user.password == password:
                return user
        return None

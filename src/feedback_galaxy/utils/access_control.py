"""Role-based guards over the current session."""

from typing import Optional

from feedback_galaxy import config
from feedback_galaxy.core.exceptions import ForbiddenError, UnauthorizedError
from feedback_galaxy.schemas.session import Session
from feedback_galaxy.utils.session_store import SessionStore


class AccessControl:
    """Answers who is logged in and whether they may do something.

    Call a ``require_*`` guard before any privileged work; the guards have
    no side effects of their own.
    """

    def __init__(self, session_store: SessionStore):
        self.session_store = session_store

    def current_user(self) -> Optional[Session]:
        """Return the active session, or None if nobody is logged in."""
        return self.session_store.load()

    def is_admin(self) -> bool:
        """Whether the admin is logged in."""
        session = self.current_user()
        return session is not None and session.role == config.ADMIN_ROLE

    def is_student(self) -> bool:
        """Whether a student is logged in."""
        session = self.current_user()
        return session is not None and session.role == config.STUDENT_ROLE

    def require_login(self) -> Session:
        """Return the current session.

        Raises:
            UnauthorizedError: If nobody is logged in.
        """
        session = self.current_user()
        if session is None:
            raise UnauthorizedError("Please login first")
        return session

    def require_admin(self) -> None:
        """Raise ForbiddenError unless the admin is logged in."""
        if not self.is_admin():
            raise ForbiddenError("Admin privileges required")

    def require_student(self) -> None:
        """Raise ForbiddenError unless a student is logged in."""
        if not self.is_student():
            raise ForbiddenError("Student privileges required")

"""Session persistence module.

This module keeps track of who is logged in. The session survives across
CLI invocations through a small JSON file; within one process the loaded
record is cached on the SessionStore instance.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from feedback_galaxy import config
from feedback_galaxy.schemas.session import Session, utc_now_iso

logger = logging.getLogger(__name__)


class SessionStore:
    """Single-slot store of the active Session."""

    def __init__(self, session_file: Optional[Path] = None):
        """Initialize SessionStore.

        Args:
            session_file: Path of the session record. Defaults to the file
                inside the configured data directory.
        """
        self.session_file = (
            Path(session_file) if session_file else config.get_session_file()
        )
        self._current: Optional[Session] = None

    def save(self, username: str, role: str) -> Session:
        """Start a session for ``username``.

        A failed write is logged and the session is kept in memory only,
        so the caller's login still succeeds for the current process.

        Returns:
            The new Session.
        """
        session = Session(username=username, role=role, login_time=utc_now_iso())
        self._current = session

        try:
            self.session_file.parent.mkdir(parents=True, exist_ok=True)
            self.session_file.write_text(
                session.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
            )
        except OSError as e:
            logger.warning(
                "Could not save session to %s, continuing with in-memory session: %s",
                self.session_file,
                e,
            )
        else:
            logger.debug("Saved session for %s", username)
        return session

    def load(self) -> Optional[Session]:
        """Return the active Session, or None if nobody is logged in.

        Never raises: a missing, unreadable or corrupt record counts as no
        session.
        """
        if self._current is not None:
            return self._current

        if not self.session_file.exists():
            return None

        try:
            raw = self.session_file.read_text(encoding="utf-8")
            session = Session.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, PydanticValidationError) as e:
            logger.warning("Ignoring unusable session file %s: %s", self.session_file, e)
            return None

        self._current = session
        return session

    def clear(self) -> None:
        """End the active session. Safe to call when nobody is logged in."""
        self._current = None
        try:
            self.session_file.unlink(missing_ok=True)
        except OSError as e:
            logger.debug("Could not delete session file %s: %s", self.session_file, e)

"""Dependency wiring for the command line.

This module builds the stores and services used by one CLI invocation.
Every command receives the same AppContext, so the session cache lives on a
single SessionStore for the life of the process.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from feedback_galaxy import config
from feedback_galaxy.utils.access_control import AccessControl
from feedback_galaxy.utils.auth_service import AuthService
from feedback_galaxy.utils.credential_store import CredentialStore
from feedback_galaxy.utils.feedback_manager import FeedbackManager
from feedback_galaxy.utils.session_store import SessionStore


@dataclass
class AppContext:
    """Stores and services shared by the commands of one process."""

    credential_store: CredentialStore
    session_store: SessionStore
    access: AccessControl
    auth: AuthService
    feedback: FeedbackManager


def build_context(data_dir: Optional[Path] = None) -> AppContext:
    """Create an AppContext rooted at ``data_dir``.

    Args:
        data_dir: Directory holding users, session and feedback files.
            Defaults to ``config.DATA_DIR``.

    Returns:
        A fully wired AppContext.
    """
    root = Path(data_dir) if data_dir else config.DATA_DIR
    credential_store = CredentialStore(config.get_users_file(root))
    session_store = SessionStore(config.get_session_file(root))
    access = AccessControl(session_store)
    return AppContext(
        credential_store=credential_store,
        session_store=session_store,
        access=access,
        auth=AuthService(credential_store, session_store),
        feedback=FeedbackManager(access, config.get_feedback_dir(root)),
    )

from pathlib import Path

import pytest

from feedback_galaxy.core.dependencies import AppContext, build_context
from feedback_galaxy.utils.access_control import AccessControl
from feedback_galaxy.utils.auth_service import AuthService
from feedback_galaxy.utils.credential_store import CredentialStore
from feedback_galaxy.utils.session_store import SessionStore


@pytest.fixture
def data_dir(tmp_path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def seeded_data_dir(data_dir) -> Path:
    data_dir.mkdir(parents=True)
    (data_dir / "users.txt").write_text("admin:admin123\nbob:pw1234\n", encoding="utf-8")
    return data_dir


@pytest.fixture
def credential_store(seeded_data_dir) -> CredentialStore:
    return CredentialStore(seeded_data_dir / "users.txt")


@pytest.fixture
def session_store(seeded_data_dir) -> SessionStore:
    return SessionStore(seeded_data_dir / "session.json")


@pytest.fixture
def access(session_store) -> AccessControl:
    return AccessControl(session_store)


@pytest.fixture
def auth(credential_store, session_store) -> AuthService:
    return AuthService(credential_store, session_store)


@pytest.fixture
def app(seeded_data_dir) -> AppContext:
    return build_context(seeded_data_dir)

"""Configuration module for Feedback Galaxy.

This module provides centralized configuration management, including data
file locations, account rules, input limits and logging defaults.
All configuration values can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Data directory holding the user roster, the session record and feedback
DATA_DIR: Path = Path(os.getenv("FEEDBACK_GALAXY_DATA_DIR", "data")).resolve()

# Credential record file: one "username:password" line per user
USERS_FILE_NAME = "users.txt"

# Single-slot session record (JSON)
SESSION_FILE_NAME = "session.json"

# Per-course feedback directories live below this one
FEEDBACK_DIR_NAME = "feedbacks"

# --- Account Configuration ---

# The role of an account is derived from its username, never stored
ADMIN_USERNAME: str = "admin"
ADMIN_ROLE: str = "admin"
STUDENT_ROLE: str = "student"

# Field separator of the credential record file (no escaping)
RECORD_DELIMITER: str = ":"

# Password used by `init-admin` when none is given on the command line
DEFAULT_ADMIN_PASSWORD: Optional[str] = os.getenv("FEEDBACK_GALAXY_ADMIN_PASSWORD")

# --- Input Validation Configuration ---

MAX_INPUT_LENGTH: int = int(os.getenv("MAX_INPUT_LENGTH", "500"))
MIN_PASSWORD_LENGTH: int = int(os.getenv("MIN_PASSWORD_LENGTH", "4"))

# Roster usernames: letters, digits and underscores only
USERNAME_PATTERN: str = r"^[a-zA-Z0-9_]+$"

# Course codes such as CS01 or MATH101
COURSE_CODE_PATTERN: str = r"^[A-Z]{2,4}\d{1,4}$"

# --- Logging Configuration ---

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_users_file(data_dir: Path = DATA_DIR) -> Path:
    """Return the credential record file inside ``data_dir``."""
    return Path(data_dir) / USERS_FILE_NAME


def get_session_file(data_dir: Path = DATA_DIR) -> Path:
    """Return the session record file inside ``data_dir``."""
    return Path(data_dir) / SESSION_FILE_NAME


def get_feedback_dir(data_dir: Path = DATA_DIR) -> Path:
    """Return the root directory of per-course feedback."""
    return Path(data_dir) / FEEDBACK_DIR_NAME


def get_course_dir(course_code: str, data_dir: Path = DATA_DIR) -> Path:
    """Return the feedback directory of a single course."""
    return get_feedback_dir(data_dir) / course_code

"""Input validation helpers shared by the command line and the managers."""

import re

from feedback_galaxy import config
from feedback_galaxy.core.exceptions import ValidationError


def validate_input(value: str, field_name: str, required: bool = True) -> str:
    """Validate and normalize a free-text input.

    Args:
        value: Raw input.
        field_name: Field name used in error messages, e.g. "Username".
        required: Whether an empty value is rejected.

    Returns:
        The stripped value.

    Raises:
        ValidationError: If the value is empty or too long.
    """
    value = value or ""
    if required and not value.strip():
        raise ValidationError(f"{field_name} is required and cannot be empty")
    if len(value) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"{field_name} cannot exceed {config.MAX_INPUT_LENGTH} characters"
        )
    return value.strip()


def validate_course_code(course_code: str) -> str:
    """Normalize a course code to upper case and check its format."""
    normalized = (course_code or "").strip().upper()
    if not re.match(config.COURSE_CODE_PATTERN, normalized):
        raise ValidationError("Course code must be in format like CS01, MATH101, etc.")
    return normalized


def validate_username_format(username: str) -> str:
    if not re.match(config.USERNAME_PATTERN, username or ""):
        raise ValidationError(
            "Username can only contain letters, numbers, and underscores"
        )
    return username


def validate_password_strength(password: str) -> str:
    if len(password or "") < config.MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {config.MIN_PASSWORD_LENGTH} characters long"
        )
    return password


def count_words(text: str) -> int:
    if not text:
        return 0
    return len(text.split())

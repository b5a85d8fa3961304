"""User schema definitions.

This module defines the UserRecord data model stored in the credential file.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from feedback_galaxy import config


def role_of(username: str) -> str:
    """Derive the role of an account from its username.

    Args:
        username: Account name.

    Returns:
        ``"admin"`` for the admin account, ``"student"`` for everyone else.
    """
    if username == config.ADMIN_USERNAME:
        return config.ADMIN_ROLE
    return config.STUDENT_ROLE


class UserRecord(BaseModel):
    """One line of the credential file."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(description="Unique account name.")
    password: str = Field(
        description="Cleartext password, as stored in the credential file.",
        repr=False,
    )

    @computed_field
    @property
    def role(self) -> str:
        """Role derived from the username."""
        return role_of(self.username)

    def to_line(self) -> str:
        """Render the record as a credential file line, without newline."""
        return f"{self.username}{config.RECORD_DELIMITER}{self.password}"

"""Session schema definitions.

This module defines the Session record persisted between CLI invocations.
"""

from datetime import datetime
from typing import Optional

import pytz
from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    return datetime.now(pytz.utc).isoformat()


class Session(BaseModel):
    """The single logged-in user of this installation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str = Field(
        description="The username of the logged-in account.",
        min_length=1,
    )
    role: str = Field(
        description="Role snapshotted from the account at login time.",
        min_length=1,
    )
    login_time: Optional[str] = Field(
        default=None,
        alias="loginTime",
        description="ISO-8601 time of the login.",
    )

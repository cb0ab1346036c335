"""User domain entity."""

from enum import Enum
from typing import Any

from pydantic import Field

from users_service.entities._base import Entity


class UserStatus(str, Enum):
    """Lifecycle status of a user record."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"


class User(Entity):
    """User record as held by the store.

    The external ``dni`` field is kept internally as ``document_number``.
    """

    document_number: str = Field(description="National ID number")
    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")
    email: str = Field(description="User's email address")
    phone_number: str = Field(description="User's phone number")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="User status")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.document_number == other.document_number
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
            and self.phone_number == other.phone_number
            and self.status == other.status
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.document_number,
            self.first_name,
            self.last_name,
            self.email,
            self.phone_number,
            self.status,
        ))

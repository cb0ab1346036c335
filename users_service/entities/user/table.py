"""User database table model."""

from sqlmodel import Field

from users_service.entities._base import EntityTable
from users_service.entities.user.entity import UserStatus


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Email, phone number and national ID are unique across all rows; the
    database enforces it.
    """

    __tablename__ = "users"

    document_number: str = Field(unique=True, index=True)
    first_name: str
    last_name: str
    email: str = Field(unique=True, index=True)
    phone_number: str = Field(unique=True, index=True)
    status: UserStatus = Field(default=UserStatus.ACTIVE)

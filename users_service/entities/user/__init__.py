"""User entity package."""

from .entity import User, UserStatus
from .repository import UserRepository
from .schemas import UserRequest, UserResponse
from .table import UserTable

__all__ = [
    "User",
    "UserRepository",
    "UserRequest",
    "UserResponse",
    "UserStatus",
    "UserTable",
]

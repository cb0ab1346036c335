"""Entities organized by business concept.

Each entity package colocates:
- entity.py: internal domain model
- table.py: database persistence model
- repository.py: data access layer
- schemas.py: external request/response representations
- mapper.py: conversions between the external and internal representations
"""

from .user import (
    User,
    UserRepository,
    UserRequest,
    UserResponse,
    UserStatus,
    UserTable,
)

__all__ = [
    "User",
    "UserRepository",
    "UserRequest",
    "UserResponse",
    "UserStatus",
    "UserTable",
]

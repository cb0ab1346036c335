"""Conversions between the external user representations and the stored entity."""

from users_service.entities.user.entity import User, UserStatus
from users_service.entities.user.schemas import UserRequest, UserResponse


def to_entity(request: UserRequest) -> User:
    """Build a new, not yet persisted user from a request body.

    Status is always ACTIVE. The identifier and both timestamps are left unset.
    """
    return User(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        phone_number=request.phone_number,
        document_number=request.dni,
        status=UserStatus.ACTIVE,
    )


def to_response(user: User) -> UserResponse:
    if user.id is None:
        raise ValueError("Cannot expose a user that has not been persisted")
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone_number=user.phone_number,
        dni=user.document_number,
        status=user.status,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )

"""User API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from users_service.api.http.deps import get_user_service
from users_service.api.http.errors import ErrorResponse
from users_service.core.services import UserManagementService
from users_service.entities.user import UserRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def create_user(
    payload: UserRequest,
    service: UserManagementService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user."""
    return service.create_user(payload)


@router.get("", response_model=list[UserResponse])
def list_users(
    service: UserManagementService = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users."""
    return list(service.list_users())


@router.get("/dni/{dni}", response_model=UserResponse, responses=_NOT_FOUND)
def get_user_by_dni(
    dni: str,
    service: UserManagementService = Depends(get_user_service),
) -> UserResponse:
    """Get a user by national ID."""
    return service.get_user_by_dni(dni)


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
def get_user(
    user_id: str,
    service: UserManagementService = Depends(get_user_service),
) -> UserResponse:
    """Get a user by ID."""
    return service.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_user(
    user_id: str,
    payload: UserRequest,
    service: UserManagementService = Depends(get_user_service),
) -> UserResponse:
    """Replace a user's data."""
    return service.update_user(user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_user(
    user_id: str,
    service: UserManagementService = Depends(get_user_service),
) -> Response:
    """Delete a user."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

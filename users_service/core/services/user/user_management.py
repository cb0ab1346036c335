from collections.abc import Iterator

from loguru import logger
from sqlmodel import Session

from users_service.core.exceptions import UserNotFoundError
from users_service.entities._base import utc_now
from users_service.entities.user import mapper
from users_service.entities.user.repository import UserRepository
from users_service.entities.user.schemas import UserRequest, UserResponse


class UserManagementService:
    """Create, read, update and delete user records.

    This is the only place that assigns lifecycle timestamps and checks that
    a record exists before mutating it. Store errors, including unique-key
    violations, propagate unchanged.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._user_repo = UserRepository(db_session)

    def create_user(self, request: UserRequest) -> UserResponse:
        user = mapper.to_entity(request)
        now = utc_now()
        user.created_at = now
        user.updated_at = now

        created = self._user_repo.save(user)
        self._db_session.commit()
        logger.info("Created user {}", created.id)
        return mapper.to_response(created)

    def get_user(self, user_id: str) -> UserResponse:
        user = self._user_repo.get(user_id)
        if user is None:
            logger.warning("User {} not found", user_id)
            raise UserNotFoundError("id", user_id)
        return mapper.to_response(user)

    def get_user_by_dni(self, dni: str) -> UserResponse:
        user = self._user_repo.get_by_document_number(dni)
        if user is None:
            logger.warning("User with DNI {} not found", dni)
            raise UserNotFoundError("dni", dni)
        logger.debug("Returning user {} for DNI {}", user.id, dni)
        return mapper.to_response(user)

    def list_users(self) -> Iterator[UserResponse]:
        """Lazily yield every user; each call issues a fresh query."""
        for user in self._user_repo.iter_all():
            yield mapper.to_response(user)

    def update_user(self, user_id: str, request: UserRequest) -> UserResponse:
        """Replace every client-owned field of an existing user.

        Identifier and creation timestamp are preserved; status is reset to
        ACTIVE and the update timestamp is refreshed.
        """
        existing = self._user_repo.get(user_id)
        if existing is None:
            logger.warning("Cannot update user {}: not found", user_id)
            raise UserNotFoundError("id", user_id)

        replacement = mapper.to_entity(request)
        replacement.id = existing.id
        replacement.created_at = existing.created_at
        replacement.updated_at = utc_now()

        updated = self._user_repo.save(replacement)
        self._db_session.commit()
        logger.info("Updated user {}", updated.id)
        return mapper.to_response(updated)

    def delete_user(self, user_id: str) -> None:
        existing = self._user_repo.get(user_id)
        if existing is None:
            logger.warning("Cannot delete user {}: not found", user_id)
            raise UserNotFoundError("id", user_id)

        self._user_repo.delete(user_id)
        self._db_session.commit()
        logger.info("Deleted user {}", user_id)

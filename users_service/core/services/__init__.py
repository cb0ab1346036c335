from .database.db_session import DbSessionService
from .user.user_management import UserManagementService

__all__ = ["DbSessionService", "UserManagementService"]

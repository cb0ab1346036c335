"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from users_service.api.http.app_data import ApplicationDependencies
from users_service.core.services import DbSessionService, UserManagementService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped session, rolled back if the request fails."""
    session = database_service.get_session()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_user_service(
    session: Session = Depends(get_db_session),
) -> UserManagementService:
    """Get the user operations bound to the request session."""
    return UserManagementService(session)

"""Data-access layer for users."""

from collections.abc import Iterator

from sqlmodel import Session, select

from users_service.entities.user.entity import User
from users_service.entities.user.table import UserTable


class UserRepository:
    """Reads and writes user rows.

    Lookups return ``None`` when nothing matches. Unique-key violations are
    raised by the database as ``IntegrityError`` when the write is flushed.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: UserTable) -> User:
        return User.model_validate(row, from_attributes=True)

    def _find_one(self, column, value: str) -> User | None:
        statement = select(UserTable).where(column == value)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def save(self, user: User) -> User:
        """Insert the user, or replace the stored row with the same id."""
        values = user.model_dump(exclude={"id"})
        row = self._session.get(UserTable, user.id) if user.id else None
        if row is None:
            row = UserTable(**values) if user.id is None else UserTable(id=user.id, **values)
        else:
            row.sqlmodel_update(values)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_email(self, email: str) -> User | None:
        return self._find_one(UserTable.email, email)

    def get_by_phone_number(self, phone_number: str) -> User | None:
        return self._find_one(UserTable.phone_number, phone_number)

    def get_by_document_number(self, document_number: str) -> User | None:
        return self._find_one(UserTable.document_number, document_number)

    def iter_all(self) -> Iterator[User]:
        """Yield every stored user in store order."""
        for row in self._session.exec(select(UserTable)):
            yield self._to_entity(row)

    def delete(self, user_id: str) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

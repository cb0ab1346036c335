import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, field_validator
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity with a store-assigned identifier and lifecycle timestamps.

    All three system-managed fields stay unset until the record is persisted
    or the operations layer assigns them.
    """

    id: str | None = PydanticField(
        default=None, description="Unique identifier for the entity"
    )
    created_at: datetime | None = PydanticField(default=None)
    updated_at: datetime | None = PydanticField(default=None)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite hands timestamps back without tzinfo
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class EntityTable(SQLModel, table=False):
    """Base table with a UUID primary key assigned on insert."""

    id: str = Field(
        primary_key=True,
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime | None = Field(
        default=None, sa_type=sa.DateTime(timezone=True)
    )
    updated_at: datetime | None = Field(
        default=None, sa_type=sa.DateTime(timezone=True)
    )

"""External request/response representations of a user."""

from datetime import datetime
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from users_service.entities.user.entity import UserStatus

_REQUIRED_MESSAGES = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "email": "Email is required",
    "phone_number": "Phone number is required",
    "dni": "DNI is required",
}


def _valid_email(value: str) -> str:
    """Reject malformed addresses while keeping the address exactly as given."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Email should be valid: {e}") from e
    return value


EmailAddress = Annotated[str, AfterValidator(_valid_email)]


class UserRequest(BaseModel):
    """Body accepted by the create and update endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(None, alias="firstName", validate_default=True, examples=["John"])
    last_name: str = Field(None, alias="lastName", validate_default=True, examples=["Doe"])
    email: EmailAddress = Field(None, validate_default=True, examples=["john.doe@example.com"])
    phone_number: str = Field(
        None, alias="phoneNumber", validate_default=True, examples=["+1234567890"]
    )
    dni: str = Field(None, validate_default=True, examples=["12345678"])

    @field_validator("first_name", "last_name", "email", "phone_number", "dni", mode="before")
    @classmethod
    def _not_blank(cls, value: Any, info) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return value


class UserResponse(BaseModel):
    """Body returned for a single user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    phone_number: str = Field(alias="phoneNumber")
    dni: str
    status: UserStatus
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

"""Tests for the user entity, its request/response schemas and the mapper."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from users_service.entities.user import User, UserRequest, UserResponse, UserStatus
from users_service.entities.user import mapper


class TestUserRequest:
    """Test validation of incoming request bodies."""

    def test_accepts_camel_case_body(self, user_payload):
        request = UserRequest.model_validate(user_payload)

        assert request.first_name == "John"
        assert request.last_name == "Doe"
        assert request.email == "john.doe@example.com"
        assert request.phone_number == "+1234567890"
        assert request.dni == "12345678"

    def test_accepts_field_names(self):
        request = UserRequest(
            first_name="Jane",
            last_name="Smith",
            email="jane@example.com",
            phone_number="+1000000000",
            dni="87654321",
        )
        assert request.first_name == "Jane"

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("firstName", "First name is required"),
            ("lastName", "Last name is required"),
            ("email", "Email is required"),
            ("phoneNumber", "Phone number is required"),
            ("dni", "DNI is required"),
        ],
    )
    def test_blank_fields_are_rejected(self, user_payload, field, message):
        """Should reject whitespace-only values with the field's message."""
        user_payload[field] = "   "

        with pytest.raises(ValidationError) as exc_info:
            UserRequest.model_validate(user_payload)

        assert message in str(exc_info.value)

    def test_missing_field_is_rejected(self, user_payload):
        del user_payload["dni"]

        with pytest.raises(ValidationError) as exc_info:
            UserRequest.model_validate(user_payload)

        assert "DNI is required" in str(exc_info.value)

    def test_malformed_email_is_rejected(self, user_payload):
        user_payload["email"] = "not-an-email"

        with pytest.raises(ValidationError) as exc_info:
            UserRequest.model_validate(user_payload)

        assert exc_info.value.errors()[0]["loc"] == ("email",)
        assert "Email should be valid" in str(exc_info.value)

    def test_email_is_kept_as_given(self, user_payload):
        user_payload["email"] = "John.Doe@EXAMPLE.COM"

        request = UserRequest.model_validate(user_payload)

        assert request.email == "John.Doe@EXAMPLE.COM"


class TestUserEntity:
    """Test the User domain entity."""

    def test_defaults(self):
        user = User(
            document_number="1",
            first_name="A",
            last_name="B",
            email="a@example.com",
            phone_number="+1",
        )
        assert user.status is UserStatus.ACTIVE
        assert user.id is None
        assert user.created_at is None
        assert user.updated_at is None

    def test_naive_timestamps_are_read_as_utc(self):
        user = User(
            document_number="1",
            first_name="A",
            last_name="B",
            email="a@example.com",
            phone_number="+1",
            created_at=datetime(2024, 3, 19, 10, 30),
        )
        assert user.created_at == datetime(2024, 3, 19, 10, 30, tzinfo=UTC)

    def test_equality_ignores_timestamps(self):
        """Should compare users by their business attributes, ignoring timestamps."""
        fields = {
            "id": "1",
            "document_number": "1",
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@example.com",
            "phone_number": "+1",
        }
        user1 = User(**fields, created_at=datetime(2024, 1, 1, tzinfo=UTC))
        user2 = User(**fields, created_at=datetime(2025, 1, 1, tzinfo=UTC))
        user3 = User(**{**fields, "id": "2"})

        assert user1 == user2
        assert hash(user1) == hash(user2)
        assert user1 != user3


class TestUserMapper:
    """Test conversions between the external and stored representations."""

    def test_to_entity_maps_dni_to_document_number(self, user_request):
        user = mapper.to_entity(user_request)

        assert user.document_number == "12345678"
        assert user.first_name == "John"
        assert user.last_name == "Doe"
        assert user.email == "john.doe@example.com"
        assert user.phone_number == "+1234567890"

    def test_to_entity_forces_active_and_leaves_system_fields_unset(self, user_request):
        user = mapper.to_entity(user_request)

        assert user.status is UserStatus.ACTIVE
        assert user.id is None
        assert user.created_at is None
        assert user.updated_at is None

    def test_to_response_exposes_document_number_as_dni(self):
        created = datetime(2024, 3, 19, 10, 30, tzinfo=UTC)
        user = User(
            id="abc",
            document_number="12345678",
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone_number="+1234567890",
            status=UserStatus.BLOCKED,
            created_at=created,
            updated_at=created,
        )

        response = mapper.to_response(user)

        assert response == UserResponse(
            id="abc",
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone_number="+1234567890",
            dni="12345678",
            status=UserStatus.BLOCKED,
            created_at=created,
            updated_at=created,
        )

    def test_to_response_serializes_with_camel_case_keys(self):
        user = User(
            id="abc",
            document_number="12345678",
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            phone_number="+1234567890",
        )

        body = mapper.to_response(user).model_dump(by_alias=True, mode="json")

        assert set(body) == {
            "id",
            "firstName",
            "lastName",
            "email",
            "phoneNumber",
            "dni",
            "status",
            "createdAt",
            "updatedAt",
        }
        assert body["status"] == "ACTIVE"

    def test_to_response_requires_identifier(self, user_request):
        with pytest.raises(ValueError, match="has not been persisted"):
            mapper.to_response(mapper.to_entity(user_request))

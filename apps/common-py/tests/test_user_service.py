"""Tests for the user models and service."""

import pytest

from common.config import Settings
from common.models import User, UserSummary
from common.services import InvalidUserPayloadError, SampleUserService


@pytest.mark.unit
def test_get_user_returns_sample_record(user_service: SampleUserService) -> None:
    """Test the sample user is Id 1, John."""
    user = user_service.get_user()

    assert user == UserSummary(id=1, name="John")
    assert user.model_dump_json(by_alias=True) == '{"Id":1,"Name":"John"}'


@pytest.mark.unit
def test_parse_user_reads_pascal_case_fields(user_service: SampleUserService) -> None:
    """Test the wire field names map onto the model."""
    user = user_service.parse_user(b'{"Name": "Alice", "Email": "a@x.com"}')

    assert user.name == "Alice"
    assert user.email == "a@x.com"


@pytest.mark.unit
def test_parse_user_ignores_unknown_fields(user_service: SampleUserService) -> None:
    """Test extra fields in the body are dropped."""
    user = user_service.parse_user('{"Name": "Alice", "Role": "admin"}')

    assert user.model_dump(by_alias=True) == {"Name": "Alice", "Email": None}


@pytest.mark.unit
def test_parse_user_matches_field_names_case_sensitively(user_service: SampleUserService) -> None:
    """Test lowercase or snake_case keys are not read as the wire fields."""
    user = user_service.parse_user(b'{"name": "Alice", "email": "a@x.com"}')

    assert user.name is None
    assert user.email is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"null",
        b'"Alice"',
        b'{"Name": 42}',
    ],
)
def test_parse_user_rejects_invalid_payloads(user_service: SampleUserService, body: bytes) -> None:
    """Test bodies that are not a user object raise InvalidUserPayloadError."""
    with pytest.raises(InvalidUserPayloadError):
        user_service.parse_user(body)


@pytest.mark.unit
def test_invalid_payload_error_is_value_error() -> None:
    """Test callers catching ValueError also catch payload errors."""
    assert issubclass(InvalidUserPayloadError, ValueError)


@pytest.mark.unit
def test_create_user_message(user_service: SampleUserService) -> None:
    """Test the confirmation message carries the user's name."""
    assert user_service.create_user(User(Name="Alice", Email="a@x.com")) == "Created user: Alice"


@pytest.mark.unit
def test_create_user_message_without_name(user_service: SampleUserService) -> None:
    """Test a missing name renders as an empty string."""
    assert user_service.create_user(User()) == "Created user: "


@pytest.mark.unit
def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings pick up environment variables case-insensitively."""
    monkeypatch.setenv("APP_NAME", "users-test")
    monkeypatch.setenv("api_port", "9000")

    settings = Settings()

    assert settings.app_name == "users-test"
    assert settings.api_port == 9000

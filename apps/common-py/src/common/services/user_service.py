"""User service backing the GetUser and CreateUser triggers."""

import logging
from abc import ABC, abstractmethod

from pydantic import ValidationError

from common.models.user import User, UserSummary

logger = logging.getLogger(__name__)


class InvalidUserPayloadError(ValueError):
    """Raised when a request body does not deserialize into a User."""


class UserService(ABC):
    """Abstract interface for user service."""

    @abstractmethod
    def get_user(self) -> UserSummary:
        """Get the user record."""
        pass

    @abstractmethod
    def parse_user(self, body: bytes | str) -> User:
        """Parse a JSON request body into a User.

        Args:
            body: Raw request body

        Returns:
            Parsed User

        Raises:
            InvalidUserPayloadError: If the body is empty, malformed, or not a User object
        """
        pass

    @abstractmethod
    def create_user(self, user: User) -> str:
        """Create a user and return the confirmation message."""
        pass


class SampleUserService(UserService):
    """Stateless implementation of UserService.

    Nothing is stored: GetUser always returns the same record and CreateUser
    only echoes the posted name back.
    """

    def __init__(self, user_id: int = 1, user_name: str = "John") -> None:
        self._user = UserSummary(id=user_id, name=user_name)

    def get_user(self) -> UserSummary:
        """Get the user record."""
        return self._user

    def parse_user(self, body: bytes | str) -> User:
        """Parse a JSON request body into a User."""
        try:
            return User.model_validate_json(body)
        except ValidationError as e:
            logger.warning("Rejected user payload: %s", e.errors(include_url=False))
            raise InvalidUserPayloadError("Invalid JSON in request body") from e

    def create_user(self, user: User) -> str:
        """Create a user and return the confirmation message.

        A missing name renders as an empty string.
        """
        return f"Created user: {user.name or ''}"

"""Common services package."""

from common.services.user_service import InvalidUserPayloadError, SampleUserService, UserService

__all__ = [
    "InvalidUserPayloadError",
    "SampleUserService",
    "UserService",
]

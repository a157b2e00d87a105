"""Common models package."""

from common.models.user import User, UserSummary

__all__ = [
    "User",
    "UserSummary",
]

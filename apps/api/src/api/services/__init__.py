"""Service initialization and dependency injection."""

import logging

from common.services.user_service import SampleUserService, UserService

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserService] = {}


def get_user_service() -> UserService:
    """Get the user service instance.

    Returns:
        SampleUserService instance, shared across requests
    """
    if "user_service" not in _services_cache:
        _services_cache["user_service"] = SampleUserService()
        logger.info("Initialized SampleUserService")

    return _services_cache["user_service"]

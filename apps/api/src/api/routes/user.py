"""User API routes, mirroring the GetUser and CreateUser triggers."""

import logging

from api.services import get_user_service
from common.models.user import UserSummary
from common.services.user_service import InvalidUserPayloadError, UserService
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("/GetUser", response_model=UserSummary)
async def get_user(service: UserService = Depends(get_user_service)) -> UserSummary:
    logger.info("HTTP trigger function processed a request.")
    return service.get_user()


@router.post("/CreateUser", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: Request, service: UserService = Depends(get_user_service)) -> str:
    """Echo the name of the posted user.

    The body is read raw so an empty or malformed payload gets the same 400
    as the function app instead of FastAPI's 422.
    """
    body = await request.body()
    try:
        user = service.parse_user(body)
    except InvalidUserPayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return service.create_user(user)

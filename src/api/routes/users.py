"""User registry routes.

Endpoints:
- GET /users: List every registered user in creation order
- GET /users/{user_id}: Get a single user
- POST /users: Register a new user
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from api.dependencies import get_user_repo
from api.errors import require_json_body
from api.models import DecimalInt, UserRequest, UserResponse
from api.security import get_current_principal
from domain.model.errors import NotFoundError
from domain.model.user import NewUser, User
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

# IDs are bound as signed 64-bit integers
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


def _to_response(user: User) -> UserResponse:
    """Convert domain User to API UserResponse."""
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=user.created_at,
    )


@router.get("", response_model=list[UserResponse])
async def get_users(repo: UserRepository = Depends(get_user_repo)):
    """Get all users."""
    return [_to_response(user) for user in user_service.list_users(repo)]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_by_id(
    user_id: Annotated[DecimalInt, Path(ge=INT64_MIN, le=INT64_MAX, description="User ID")],
    repo: UserRepository = Depends(get_user_repo),
):
    """Get a user by ID.

    Raises:
        HTTPException: 404 if no user has this ID
    """
    try:
        user = user_service.get_user(repo, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return _to_response(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_body)],
)
async def create_user(
    request: UserRequest,
    repo: UserRepository = Depends(get_user_repo),
    principal: str = Depends(get_current_principal),
):
    """Create a new user."""
    user = user_service.register_user(repo, NewUser(
        username=request.username,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
    ))
    logger.info("User registered via API", extra={"userId": user.id, "principal": principal})
    return _to_response(user)

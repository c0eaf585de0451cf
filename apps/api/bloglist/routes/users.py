"""User routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from bloglist.routes.dependencies import get_user_service
from bloglist.schemas.error import ErrorResponse
from bloglist.schemas.user import CreateUserRequest, User
from bloglist.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register_user(
    payload: CreateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.register(username=payload.username, password=payload.password, name=payload.name)


@router.get("", response_model=list[User])
async def list_users(service: Annotated[UserService, Depends(get_user_service)]) -> list[User]:
    return service.list_users()


@router.get(
    "/{userId}",
    response_model=User,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_user(
    user_id: Annotated[str, Path(alias="userId")],
    service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    return service.get_user(user_id=user_id)

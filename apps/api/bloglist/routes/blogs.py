"""Blog routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from bloglist.routes.dependencies import get_authenticated_user, get_blog_service
from bloglist.schemas.auth import AuthenticatedUser
from bloglist.schemas.blog import Blog, BlogPayload, BlogStats, CommentRequest
from bloglist.schemas.error import ErrorResponse
from bloglist.services.blogs import BlogService

router = APIRouter(prefix="/blogs", tags=["Blogs"])

_ID_ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
_OWNER_ERRORS = {**_ID_ERRORS, 401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}


@router.get("", response_model=list[Blog])
async def list_blogs(service: Annotated[BlogService, Depends(get_blog_service)]) -> list[Blog]:
    return service.list_blogs()


@router.get("/stats", response_model=BlogStats)
async def get_blog_stats(service: Annotated[BlogService, Depends(get_blog_service)]) -> BlogStats:
    return service.get_stats()


@router.get("/{blogId}", response_model=Blog, responses=_ID_ERRORS)
async def get_blog(
    blog_id: Annotated[str, Path(alias="blogId")],
    service: Annotated[BlogService, Depends(get_blog_service)],
) -> Blog:
    return service.get_blog(blog_id=blog_id)


@router.post(
    "",
    response_model=Blog,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def create_blog(
    payload: BlogPayload,
    identity: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BlogService, Depends(get_blog_service)],
) -> Blog:
    return service.create_blog(identity=identity, payload=payload)


@router.put("/{blogId}", response_model=Blog, responses=_OWNER_ERRORS)
async def replace_blog(
    blog_id: Annotated[str, Path(alias="blogId")],
    payload: BlogPayload,
    identity: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BlogService, Depends(get_blog_service)],
) -> Blog:
    return service.replace_blog(identity=identity, blog_id=blog_id, payload=payload)


@router.put("/{blogId}/comments", response_model=Blog, responses=_ID_ERRORS)
async def add_comment(
    blog_id: Annotated[str, Path(alias="blogId")],
    payload: CommentRequest,
    service: Annotated[BlogService, Depends(get_blog_service)],
) -> Blog:
    return service.add_comment(blog_id=blog_id, comment=payload.comment)


@router.delete(
    "/{blogId}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_OWNER_ERRORS, 204: {"description": "Blog deleted"}},
)
async def delete_blog(
    blog_id: Annotated[str, Path(alias="blogId")],
    identity: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BlogService, Depends(get_blog_service)],
) -> Response:
    service.delete_blog(identity=identity, blog_id=blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Posts Routes — HTTP surface for the post service.

Invariants:
    - Routes never contain business logic (delegate to PostService)
    - POST body passes validated_post_create before the handler runs;
      violations go straight to the error handlers and never reach the service
    - PUT body is NOT length-validated: blank/missing fields mean "no change"
    - DELETE answers 200 with an empty body
    - Path ids outside the 64-bit id range are rejected with 400 before the service
    - GET /posts with a `title` query parameter searches; without it, lists all
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from blog_api.api.dependencies import get_post_service, validated_post_create
from blog_api.core.domain_types import POST_ID_MAX, POST_ID_MIN, PostId
from blog_api.schemas.post import ErrorEnvelope, PostCreate, PostResponse, PostUpdate
from blog_api.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}}

PathPostId = Annotated[int, Path(ge=POST_ID_MIN, le=POST_ID_MAX)]


@router.get("", response_model=list[PostResponse])
async def list_posts(
    title: str | None = Query(None, description="Case-insensitive title substring"),
    service: PostService = Depends(get_post_service),
):
    """List all posts, or those whose title contains `title`."""
    if title is not None:
        return await service.search_by_title(title)
    return await service.find_all_posts()


@router.get("/{post_id}", response_model=PostResponse, responses=_NOT_FOUND)
async def get_post(
    post_id: PathPostId, service: PostService = Depends(get_post_service),
):
    return await service.find_post_by_id(PostId(post_id))


@router.post("", response_model=PostResponse, responses=_BAD_REQUEST)
async def create_post(
    body: PostCreate = Depends(validated_post_create),
    service: PostService = Depends(get_post_service),
):
    return await service.create_post(body)


@router.put("/{post_id}", response_model=PostResponse, responses=_NOT_FOUND)
async def update_post(
    post_id: PathPostId,
    body: PostUpdate,
    service: PostService = Depends(get_post_service),
):
    """Partial update: only non-blank fields are applied."""
    return await service.update_post(PostId(post_id), body)


@router.delete(
    "/{post_id}", status_code=status.HTTP_200_OK,
    response_class=Response, responses=_NOT_FOUND,
)
async def delete_post(
    post_id: PathPostId, service: PostService = Depends(get_post_service),
):
    await service.delete_post(PostId(post_id))
    return Response(status_code=status.HTTP_200_OK)

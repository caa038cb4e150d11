"""Post Service — orchestrates repository and mapper for every post use case.

Invariants:
    - All "not found" decisions go through _find_post_or_raise (get, update, delete)
    - create_post re-checks the creation rules; routes check them first, so
      invalid input never reaches the repository either way
    - update_post applies a field only when it is non-None and non-blank
    - Services never touch HTTP: errors are raised as core.errors types
"""

import logging

from blog_api.core.domain_types import PostId
from blog_api.core.errors import PostNotFoundError
from blog_api.core.repository_protocols import PostLike, PostRepository
from blog_api.core.validate_post import check_post_create, normalize_update_field
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate
from blog_api.services.post_mapper import PostMapper

logger = logging.getLogger(__name__)


class PostService:
    """Create, read, search, update and delete blog posts."""

    def __init__(self, repository: PostRepository, mapper: PostMapper):
        self.repository = repository
        self.mapper = mapper

    async def create_post(self, body: PostCreate) -> PostResponse:
        check_post_create(body.title, body.content)
        post = await self.repository.save(self.mapper.to_entity(body))
        logger.info("Post created", extra={"post_id": post.id})
        return self.mapper.to_response(post)

    async def find_post_by_id(self, post_id: PostId) -> PostResponse:
        return self.mapper.to_response(await self._find_post_or_raise(post_id))

    async def find_all_posts(self) -> list[PostResponse]:
        posts = await self.repository.find_all()
        return [self.mapper.to_response(p) for p in posts]

    async def search_by_title(self, title: str) -> list[PostResponse]:
        """Case-insensitive title substring search. No match is an empty list."""
        posts = await self.repository.search_by_title(title)
        return [self.mapper.to_response(p) for p in posts]

    async def update_post(self, post_id: PostId, body: PostUpdate) -> PostResponse:
        """Partial update: blank or missing fields keep their stored value."""
        post = await self._find_post_or_raise(post_id)

        title = normalize_update_field(body.title)
        content = normalize_update_field(body.content)
        if title is not None:
            post.title = title
        if content is not None:
            post.content = content

        post = await self.repository.save(post)
        logger.info("Post updated", extra={"post_id": post.id})
        return self.mapper.to_response(post)

    async def delete_post(self, post_id: PostId) -> None:
        post = await self._find_post_or_raise(post_id)
        await self.repository.delete(post)
        logger.info("Post deleted", extra={"post_id": post_id})

    async def _find_post_or_raise(self, post_id: PostId) -> PostLike:
        post = await self.repository.find_by_id(post_id)
        if post is None:
            logger.warning("Post not found", extra={"post_id": post_id})
            raise PostNotFoundError(post_id)
        return post

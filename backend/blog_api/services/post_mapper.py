"""Post Mapper — converts between API schemas and Post records.

Invariants:
    - PURE: no IO, no validation, no mutation of its inputs
    - to_entity never sets id or timestamps (the repository assigns them)
    - to_response copies all five fields verbatim
"""

from blog_api.core.repository_protocols import PostLike
from blog_api.models.post import Post
from blog_api.schemas.post import PostCreate, PostResponse


class PostMapper:
    """Schema <-> record conversion for posts."""

    def to_entity(self, body: PostCreate) -> Post:
        return Post(title=body.title, content=body.content)

    def to_response(self, post: PostLike) -> PostResponse:
        return PostResponse(
            id=post.id,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

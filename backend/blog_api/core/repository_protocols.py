"""Boundary Protocols — contracts between core/services and persistence.

Invariants:
    - Services NEVER import the concrete repository: only these Protocols
    - find_by_id returns None for a missing id; raising is the service's job
    - Every method is async because implementations do IO

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from blog_api.core.domain_types import PostId


class PostLike(Protocol):
    """Structural contract for post records handed between store, mapper and service."""
    id: int | None
    title: str
    content: str
    created_at: datetime | None
    updated_at: datetime | None


class PostRepository(Protocol):
    """Contract for post persistence: implemented by infrastructure."""
    async def save(self, post: PostLike) -> PostLike: ...
    async def find_by_id(self, post_id: PostId) -> PostLike | None: ...
    async def find_all(self) -> Sequence[PostLike]: ...
    async def search_by_title(self, title: str) -> Sequence[PostLike]: ...
    async def delete(self, post: PostLike) -> None: ...

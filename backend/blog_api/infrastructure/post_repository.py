"""Post Repository — SQLAlchemy implementation of the PostRepository protocol.

Invariants:
    - Each call opens its own session and commits before returning (row-level atomicity)
    - save() on a new record assigns the id and sets created_at == updated_at
    - save() on an existing record never touches created_at and moves
      updated_at strictly forward, even when the clock has not advanced
    - search_by_title is a case-insensitive substring match; LIKE wildcards
      in the query are matched literally
    - find_all and search_by_title return rows in insertion (id) order
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from blog_api.core.domain_types import PostId
from blog_api.infrastructure.database import DatabaseSessionManager
from blog_api.models.post import Post

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _next_updated_at(previous: datetime | None) -> datetime:
    now = _utcnow()
    if previous is None:
        return now
    return max(now, _as_utc(previous) + _TICK)


class SqlAlchemyPostRepository:
    """Post persistence backed by an async SQLAlchemy session manager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def save(self, post: Post) -> Post:
        """Insert a new post or update an existing one."""
        if post.id is None:
            now = _utcnow()
            post.created_at = now
            post.updated_at = now
        else:
            post.updated_at = _next_updated_at(post.updated_at)

        async with self._db.session() as session:
            post = await session.merge(post)
            await session.commit()
        logger.debug("Post saved", extra={"post_id": post.id})
        return post

    async def find_by_id(self, post_id: PostId) -> Post | None:
        async with self._db.session() as session:
            return await session.get(Post, post_id)

    async def find_all(self) -> Sequence[Post]:
        async with self._db.session() as session:
            result = await session.execute(select(Post).order_by(Post.id))
            return result.scalars().all()

    async def search_by_title(self, title: str) -> Sequence[Post]:
        """Posts whose title contains `title`, ignoring case."""
        query = (
            select(Post)
            .where(func.lower(Post.title).contains(title.lower(), autoescape=True))
            .order_by(Post.id)
        )
        async with self._db.session() as session:
            result = await session.execute(query)
            return result.scalars().all()

    async def delete(self, post: Post) -> None:
        async with self._db.session() as session:
            persistent = await session.get(Post, post.id)
            if persistent is not None:
                await session.delete(persistent)
                await session.commit()
        logger.debug("Post deleted", extra={"post_id": post.id})

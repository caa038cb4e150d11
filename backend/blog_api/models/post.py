"""Post ORM — persists blog entries.

Invariants:
    - id is an autoincrement 64-bit primary key, assigned on first insert
    - title is unbounded Text: updates are not length-checked and must always fit
    - created_at is written once; updated_at moves on every save
    - Both timestamps are set by the repository (infrastructure/post_repository.py),
      so a fresh record reports created_at == updated_at

Design Decisions:
    - SQLite only autoincrements INTEGER PRIMARY KEY, hence the variant
    - content is a regular updatable column: the update operation may overwrite it
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


class Post(Base):
    """Blog post record."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r}>"

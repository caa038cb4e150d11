"""Post Schemas — Pydantic models for the /posts API boundary.

Invariants:
    - PostCreate carries raw values; length rules live in core/validate_post.py
      and run at the route boundary before the service is called
    - PostUpdate fields are explicitly optional: None or blank means "leave unchanged"
    - PostResponse serializes camelCase timestamps (createdAt, updatedAt), always UTC-aware
    - ErrorEnvelope documents the shape produced by core/errors.build_error_envelope

Design Decisions:
    - No Field(min_length=...) on PostCreate: violations must come back as a
      field -> message map with the service's own wording, not Pydantic's
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    """Post creation body: both fields required (checked by validate_post)."""
    title: str | None = None
    content: str | None = None


class PostUpdate(BaseModel):
    """Partial post update: absent, null, or blank fields are left unchanged."""
    title: str | None = None
    content: str | None = None


class PostResponse(BaseModel):
    """Post response: public-facing post data."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite drops tzinfo on the way back
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ErrorEnvelope(BaseModel):
    """Uniform error response body."""
    timestamp: datetime
    status: int
    error: str
    message: str | dict[str, str]
    path: str

"""Service Wiring — explicit construction of repository -> mapper -> service.

Invariants:
    - build_post_service is the only place the object graph is assembled
    - The graph is built once at startup (main.lifespan) and stored on app.state
    - Routes obtain the service via get_post_service, never by constructing it
    - validated_post_create runs the creation rules before any route body executes
"""

from fastapi import Request

from blog_api.core.validate_post import check_post_create
from blog_api.infrastructure.database import DatabaseSessionManager
from blog_api.infrastructure.post_repository import SqlAlchemyPostRepository
from blog_api.schemas.post import PostCreate
from blog_api.services.post_mapper import PostMapper
from blog_api.services.post_service import PostService


def build_post_service(db: DatabaseSessionManager) -> PostService:
    """Assemble the post service over the given session manager."""
    return PostService(
        repository=SqlAlchemyPostRepository(db),
        mapper=PostMapper(),
    )


def get_post_service(request: Request) -> PostService:
    """FastAPI dependency returning the service built at startup."""
    service = getattr(request.app.state, "post_service", None)
    if service is None:
        raise RuntimeError("Post service not initialized")
    return service


def validated_post_create(body: PostCreate) -> PostCreate:
    """FastAPI dependency: creation body that already passed the field rules."""
    check_post_create(body.title, body.content)
    return body

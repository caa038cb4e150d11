"""Posts Routes — end-to-end HTTP behaviour over in-memory SQLite.

Invariants:
    - POST validates title (5-50) and content (10-5000); violations -> 400 envelope
    - Missing ids on GET/PUT/DELETE -> 404 POST_NOT_FOUND naming the id
    - PUT is partial and unvalidated; updatedAt moves forward
    - GET /posts?title= is a case-insensitive substring search
    - DELETE -> 200 with empty body; later GET -> 404
    - Path ids outside the signed 64-bit range -> 400 VALIDATION_ERROR
"""

from datetime import datetime

from httpx import ASGITransport, AsyncClient

from blog_api.core.domain_types import POST_ID_MAX, PostId
from blog_api.core.errors import DatabaseError
from blog_api.main import app

VALID_CONTENT = "Some valid content here"


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# --- create ---------------------------------------------------------------------

async def test_create_returns_new_post(client):
    res = await client.post(
        "/posts", json={"title": "Hello World", "content": VALID_CONTENT},
    )
    assert res.status_code == 200
    body = res.json()
    assert isinstance(body["id"], int)
    assert body["title"] == "Hello World"
    assert body["content"] == VALID_CONTENT
    assert body["createdAt"] == body["updatedAt"]


async def test_create_assigns_fresh_ids(create_post):
    first = await create_post()
    second = await create_post()
    assert first["id"] != second["id"]


async def test_create_with_short_title_is_rejected(client):
    res = await client.post("/posts", json={"title": "abcd", "content": VALID_CONTENT})
    assert res.status_code == 400
    body = res.json()
    assert body["status"] == 400
    assert body["error"] == "VALIDATION_ERROR"
    assert body["path"] == "/posts"
    assert set(body["message"]) == {"title"}
    assert "timestamp" in body


async def test_create_with_short_content_is_rejected(client):
    res = await client.post("/posts", json={"title": "Valid title", "content": "123456789"})
    assert res.status_code == 400
    assert set(res.json()["message"]) == {"content"}


async def test_create_with_both_fields_invalid_reports_both(client):
    res = await client.post("/posts", json={"title": "abcd", "content": "short"})
    assert res.status_code == 400
    assert set(res.json()["message"]) == {"title", "content"}


async def test_create_with_missing_title_reports_required(client):
    res = await client.post("/posts", json={"content": VALID_CONTENT})
    assert res.status_code == 400
    assert res.json()["message"] == {"title": "title is required"}


async def test_rejected_create_stores_nothing(client):
    await client.post("/posts", json={"title": "abcd", "content": "short"})
    res = await client.get("/posts")
    assert res.json() == []


async def test_create_with_wrong_json_type_is_rejected(client):
    res = await client.post("/posts", json={"title": 12345, "content": VALID_CONTENT})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert "title" in body["message"]


async def test_create_with_malformed_json_is_rejected(client):
    res = await client.post(
        "/posts", content="{not json", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "VALIDATION_ERROR"


# --- read -----------------------------------------------------------------------

async def test_get_returns_post(client, create_post):
    created = await create_post()
    res = await client.get(f"/posts/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_get_missing_post_returns_404(client):
    res = await client.get("/posts/99999")
    assert res.status_code == 404
    body = res.json()
    assert body["status"] == 404
    assert body["error"] == "POST_NOT_FOUND"
    assert "99999" in body["message"]
    assert body["path"] == "/posts/99999"


async def test_non_integer_id_is_rejected(client):
    res = await client.get("/posts/abc")
    assert res.status_code == 400
    assert "post_id" in res.json()["message"]


async def test_id_beyond_64_bits_is_rejected(client):
    too_big = POST_ID_MAX + 1
    for res in (
        await client.get(f"/posts/{too_big}"),
        await client.put(f"/posts/{too_big}", json={"title": "Whatever title"}),
        await client.delete(f"/posts/{too_big}"),
    ):
        assert res.status_code == 400
        body = res.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert "post_id" in body["message"]


async def test_largest_64_bit_id_is_not_found(client):
    res = await client.get(f"/posts/{POST_ID_MAX}")
    assert res.status_code == 404
    assert res.json()["error"] == "POST_NOT_FOUND"


async def test_list_returns_all_posts_in_creation_order(client, create_post):
    await create_post(title="First post")
    await create_post(title="Second post")
    res = await client.get("/posts")
    assert res.status_code == 200
    assert [p["title"] for p in res.json()] == ["First post", "Second post"]


async def test_list_is_empty_without_posts(client):
    res = await client.get("/posts")
    assert res.status_code == 200
    assert res.json() == []


# --- search ---------------------------------------------------------------------

async def test_search_is_case_insensitive(client, create_post):
    await create_post(title="Hello World")
    await create_post(title="Another entry")
    res = await client.get("/posts", params={"title": "hello"})
    assert res.status_code == 200
    assert [p["title"] for p in res.json()] == ["Hello World"]


async def test_search_without_match_returns_empty_list(client, create_post):
    await create_post(title="Hello World")
    res = await client.get("/posts", params={"title": "zzz"})
    assert res.status_code == 200
    assert res.json() == []


async def test_empty_search_returns_everything(client, create_post):
    await create_post(title="First post")
    await create_post(title="Second post")
    res = await client.get("/posts", params={"title": ""})
    assert len(res.json()) == 2


# --- update ---------------------------------------------------------------------

async def test_update_title_only_keeps_content_and_advances_updated_at(
    client, create_post,
):
    created = await create_post()
    res = await client.put(f"/posts/{created['id']}", json={"title": "A new title"})
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "A new title"
    assert body["content"] == created["content"]
    assert body["createdAt"] == created["createdAt"]
    assert _ts(body["updatedAt"]) > _ts(created["updatedAt"])


async def test_update_ignores_blank_fields(client, create_post):
    created = await create_post()
    res = await client.put(
        f"/posts/{created['id']}", json={"title": "   ", "content": ""},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == created["title"]
    assert body["content"] == created["content"]


async def test_update_can_change_content(client, create_post):
    created = await create_post()
    res = await client.put(
        f"/posts/{created['id']}", json={"content": "Entirely rewritten body"},
    )
    assert res.json()["content"] == "Entirely rewritten body"
    fetched = await client.get(f"/posts/{created['id']}")
    assert fetched.json()["content"] == "Entirely rewritten body"


async def test_update_is_not_length_validated(client, create_post):
    created = await create_post()
    res = await client.put(f"/posts/{created['id']}", json={"title": "abc"})
    assert res.status_code == 200
    assert res.json()["title"] == "abc"


async def test_update_accepts_title_longer_than_255_chars(client, create_post):
    created = await create_post()
    long_title = "t" * 300
    res = await client.put(f"/posts/{created['id']}", json={"title": long_title})
    assert res.status_code == 200
    fetched = await client.get(f"/posts/{created['id']}")
    assert fetched.json()["title"] == long_title


async def test_update_missing_post_returns_404(client):
    res = await client.put("/posts/99999", json={"title": "Whatever title"})
    assert res.status_code == 404
    assert res.json()["error"] == "POST_NOT_FOUND"


# --- delete ---------------------------------------------------------------------

async def test_delete_returns_200_with_empty_body(client, create_post):
    created = await create_post()
    res = await client.delete(f"/posts/{created['id']}")
    assert res.status_code == 200
    assert res.content == b""


async def test_deleted_post_is_not_found(client, create_post):
    created = await create_post()
    await client.delete(f"/posts/{created['id']}")
    res = await client.get(f"/posts/{created['id']}")
    assert res.status_code == 404
    assert res.json()["error"] == "POST_NOT_FOUND"


async def test_delete_missing_post_returns_404(client):
    res = await client.delete("/posts/99999")
    assert res.status_code == 404


# --- other failures -------------------------------------------------------------

class _FailingService:
    def __init__(self, exc):
        self.exc = exc

    async def find_post_by_id(self, post_id: PostId):
        raise self.exc


async def test_database_error_maps_to_503(client):
    app.state.post_service = _FailingService(
        DatabaseError("Connection or operational error", "execute"),
    )
    res = await client.get("/posts/1")
    assert res.status_code == 503
    body = res.json()
    assert body["error"] == "DATABASE_ERROR"
    assert body["path"] == "/posts/1"


async def test_unexpected_error_maps_to_500_without_details(client):
    app.state.post_service = _FailingService(RuntimeError("secret internals"))
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/posts/1")
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "INTERNAL_ERROR"
    assert "secret internals" not in res.text

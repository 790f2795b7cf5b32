"""Tests for the blog post endpoints.

Covers listing with filters, facets, detail/not-found, rendered HTML and
related posts.
"""

from httpx import ASGITransport, AsyncClient


async def _get(path: str, **kwargs):
    from samshodan_api.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.get(path, **kwargs)


async def test_list_blog_posts(patch_repository):
    """Listing returns published posts newest first plus categories."""
    response = await _get("/api/blog")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["total"] == 6
    assert data["posts"][0]["slug"] == "future-of-ai"
    assert data["categories"] == ["AI", "Cloud", "Design", "Development"]
    assert "secret-draft" not in {p["slug"] for p in data["posts"]}


async def test_list_uses_camel_case_fields(patch_repository):
    response = await _get("/api/blog")

    post = response.json()["posts"][0]
    assert post["readTime"] == "5 min read"
    assert "featuredImage" in post
    assert "read_time" not in post


async def test_list_with_filters(patch_repository):
    response = await _get(
        "/api/blog", params={"search": "scalable", "category": "Development"}
    )

    data = response.json()
    assert data["total"] == 1
    assert [p["slug"] for p in data["posts"]] == ["scalable-apps"]


async def test_list_category_wins_over_tag(patch_repository):
    response = await _get("/api/blog", params={"category": "Design", "tag": "AI"})

    assert [p["slug"] for p in response.json()["posts"]] == ["ux-trends"]


async def test_list_with_pagination(patch_repository):
    response = await _get("/api/blog", params={"limit": 2, "offset": 1})

    data = response.json()
    assert data["total"] == 6
    assert [p["slug"] for p in data["posts"]] == [
        "scalable-apps",
        "kubernetes-best-practices",
    ]


async def test_list_rejects_bad_limit(patch_repository):
    response = await _get("/api/blog", params={"limit": 0})
    assert response.status_code == 422


async def test_list_failure_returns_error_payload(mocker):
    mocker.patch(
        "samshodan_api.routers.blog.get_repository",
        side_effect=RuntimeError("boom"),
    )

    response = await _get("/api/blog")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch blog data", "success": False}


async def test_categories_and_tags(patch_repository):
    categories = await _get("/api/blog/categories")
    tags = await _get("/api/blog/tags")

    assert categories.json() == ["AI", "Cloud", "Design", "Development"]
    assert "Secret Tag" not in tags.json()
    assert tags.json() == sorted(tags.json())


async def test_recent_posts(patch_repository):
    response = await _get("/api/blog/recent", params={"limit": 2})

    assert [p["slug"] for p in response.json()] == ["future-of-ai", "scalable-apps"]


async def test_get_blog_post_by_slug(patch_repository):
    response = await _get("/api/blog/ux-trends")

    assert response.status_code == 200
    data = response.json()
    assert data["slug"] == "ux-trends"
    assert data["title"] == "Top UX Design Trends"


async def test_get_blog_post_not_found(patch_repository):
    response = await _get("/api/blog/nonexistent")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"].lower()


async def test_unpublished_post_not_found(patch_repository):
    response = await _get("/api/blog/secret-draft")
    assert response.status_code == 404


async def test_get_blog_post_invalid_slug(patch_repository):
    response = await _get("/api/blog/-bad-slug-")
    assert response.status_code == 422


async def test_get_blog_post_html(patch_repository, mocker):
    from samshodan_api.services.post_repository import PostRepository
    from conftest import make_post

    repo = PostRepository(
        [make_post("xss", content="# Hello\n\n<script>alert(1)</script>\n\n**hi**")]
    )
    mocker.patch("samshodan_api.routers.blog.get_repository", return_value=repo)

    response = await _get("/api/blog/xss/html")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h1>Hello</h1>" in response.text
    assert "<strong>hi</strong>" in response.text
    assert "<script" not in response.text


async def test_get_blog_post_html_not_found(patch_repository):
    response = await _get("/api/blog/missing/html")
    assert response.status_code == 404


async def test_related_posts(patch_repository):
    response = await _get("/api/blog/microservices-guide/related")

    assert response.status_code == 200
    slugs = [p["slug"] for p in response.json()]
    assert slugs == ["scalable-apps", "kubernetes-best-practices"]


async def test_related_posts_limit(patch_repository):
    response = await _get(
        "/api/blog/microservices-guide/related", params={"limit": 1}
    )

    assert [p["slug"] for p in response.json()] == ["scalable-apps"]


async def test_related_posts_not_found(patch_repository):
    response = await _get("/api/blog/missing/related")
    assert response.status_code == 404

"""Shared fixtures for samshodan-blog-api tests."""

from typing import Any

import pytest

from samshodan_api.models.blog import BlogPost
from samshodan_api.services.post_repository import PostRepository


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from samshodan_api.config import get_settings

    get_settings.cache_clear()

    # 2. Loaded post repository
    from samshodan_api.services.post_repository import get_repository

    get_repository.cache_clear()

    # 3. HTTP client singleton
    import samshodan_api.services.http_client as http_mod

    http_mod._client = None


def make_post(slug: str, **overrides: Any) -> BlogPost:
    """Build a published post with sensible defaults."""
    fields: dict[str, Any] = {
        "id": slug,
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "excerpt": f"Excerpt for {slug}",
        "content": f"# {slug}\n\nBody.",
        "author": "Samshodan Team",
        "date": "2024-01-01",
        "category": "Development",
        "tags": [],
        "read_time": "5 min read",
        "published": True,
    }
    fields.update(overrides)
    return BlogPost(**fields)


@pytest.fixture
def sample_posts() -> list[BlogPost]:
    return [
        make_post(
            "microservices-guide",
            title="Microservices Architecture Guide",
            date="2024-01-22",
            category="Development",
            tags=["Microservices", "Scalability", "DevOps"],
        ),
        make_post(
            "kubernetes-best-practices",
            title="Kubernetes Best Practices: Production-Ready Container Orchestration",
            excerpt="Master Kubernetes in production.",
            date="2024-02-12",
            category="Cloud",
            tags=["Kubernetes", "DevOps", "Microservices"],
        ),
        make_post(
            "future-of-ai",
            title="The Future of AI in Enterprise Applications",
            date="2024-03-15",
            category="AI",
            tags=["AI", "Enterprise"],
        ),
        make_post(
            "ux-trends",
            title="Top UX Design Trends",
            date="2024-01-15",
            category="Design",
            tags=["UX Design"],
        ),
        make_post(
            "scalable-apps",
            title="Building Scalable Applications",
            date="2024-03-05",
            category="Development",
            tags=["Scalability", "Architecture"],
        ),
        make_post(
            "secret-draft",
            title="Unreleased Kubernetes Roadmap",
            date="2024-04-01",
            category="Drafts",
            tags=["Secret Tag", "Microservices"],
            published=False,
        ),
        make_post(
            "undated-notes",
            title="Notes Without A Date",
            date="",
            category="Cloud",
            tags=["Notes"],
        ),
    ]


@pytest.fixture
def repository(sample_posts) -> PostRepository:
    return PostRepository(sample_posts)


@pytest.fixture
def patch_repository(mocker, repository):
    """Serve the sample repository from every module that loads posts."""
    for mod_path in [
        "samshodan_api.routers.blog",
        "samshodan_api.main",
    ]:
        mocker.patch(f"{mod_path}.get_repository", return_value=repository)
    return repository

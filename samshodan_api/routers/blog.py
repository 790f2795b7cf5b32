"""Blog post endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Path, Query
from fastapi.responses import HTMLResponse, JSONResponse

from samshodan_api.config import get_settings
from samshodan_api.models.blog import BlogIndex, BlogPost
from samshodan_api.services.markdown_renderer import render_markdown
from samshodan_api.services.post_repository import ALL_CATEGORIES, get_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


def _find_post(slug: str) -> BlogPost:
    post = get_repository().get_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.get("", response_model=BlogIndex)
async def list_blog_posts(
    search: str = Query(default="", max_length=200),
    category: str = Query(default=ALL_CATEGORIES, max_length=100),
    tag: str = Query(default="", max_length=100),
    limit: int | None = Query(default=None, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
):
    """Get published posts (newest first) and the category list.

    Filters follow the listing page: a category other than "All" wins over a
    tag, and the search term narrows the result.
    """
    try:
        repository = get_repository()
        posts = repository.filter(search=search, category=category, tag=tag)
        page = posts[offset : offset + limit] if limit is not None else posts[offset:]
        return BlogIndex(
            posts=page,
            categories=repository.get_categories(),
            total=len(posts),
        )
    except Exception:
        logger.exception("Error fetching blog data")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch blog data", "success": False},
        )


@router.get("/categories", response_model=list[str])
async def list_categories():
    """Distinct categories of published posts."""
    return get_repository().get_categories()


@router.get("/tags", response_model=list[str])
async def list_tags():
    """Distinct tags of published posts."""
    return get_repository().get_tags()


@router.get("/recent", response_model=list[BlogPost])
async def list_recent_posts(limit: int = Query(default=3, ge=0, le=50)):
    """The most recent published posts."""
    return get_repository().get_recent(limit)


@router.get("/{slug}", response_model=BlogPost)
async def get_blog_post(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
):
    """Get a single published post by slug."""
    return _find_post(slug)


@router.get("/{slug}/html")
async def get_blog_post_html(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
):
    """Serve the post body rendered to sanitized HTML."""
    post = _find_post(slug)
    return HTMLResponse(content=render_markdown(post.content))


@router.get("/{slug}/related", response_model=list[BlogPost])
async def get_related_posts(
    slug: str = Path(..., pattern=SLUG_PATTERN, max_length=200),
    limit: int | None = Query(default=None, ge=1, le=20),
):
    """Posts sharing the category or a tag with the given post."""
    post = _find_post(slug)
    if limit is None:
        limit = get_settings().related_limit
    return get_repository().get_related(post, limit)

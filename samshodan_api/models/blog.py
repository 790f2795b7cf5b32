"""Blog post data models."""

from pydantic import BaseModel, ConfigDict, Field


class BlogPost(BaseModel):
    """A normalized blog post.

    Every field is populated by ``normalize_post``; nothing downstream needs to
    apply its own defaults.  ``date`` is ``YYYY-MM-DD`` or ``""`` when the
    source date could not be parsed.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    slug: str
    title: str = ""
    excerpt: str = ""
    content: str = ""
    author: str = ""
    date: str = ""
    category: str = ""
    tags: list[str] = []
    read_time: str = Field(default="", alias="readTime")
    published: bool = True
    featured_image: str | None = Field(default=None, alias="featuredImage")


class BlogIndex(BaseModel):
    """Blog listing payload, shaped like the site's original ``/api/blog`` route."""

    posts: list[BlogPost]
    categories: list[str]
    total: int
    success: bool = True

"""Post repository — read-side queries over a loaded post snapshot.

The repository only ever holds published posts, sorted newest first.  Posts
with an unknown (empty) date sort after every dated post; ties keep load order.
"""

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache

from samshodan_api.config import get_settings
from samshodan_api.models.blog import BlogPost
from samshodan_api.services.post_store import build_store

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


def _date_key(post: BlogPost) -> tuple[bool, str]:
    return (post.date != "", post.date)


def sort_by_date(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Newest first, undated posts last, stable among equal dates."""
    return sorted(posts, key=_date_key, reverse=True)


def matches_search(post: BlogPost, term: str) -> bool:
    """Case-insensitive substring match on title, excerpt, category and tags."""
    needle = term.lower()
    return (
        needle in post.title.lower()
        or needle in post.excerpt.lower()
        or needle in post.category.lower()
        or any(needle in tag.lower() for tag in post.tags)
    )


class PostRepository:
    """Immutable, published-only view over a list of posts."""

    def __init__(self, posts: Iterable[BlogPost]) -> None:
        self._posts: tuple[BlogPost, ...] = tuple(
            sort_by_date(post for post in posts if post.published)
        )

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[BlogPost]:
        return iter(self._posts)

    def get_all(self) -> list[BlogPost]:
        return list(self._posts)

    def get_by_slug(self, slug: str) -> BlogPost | None:
        """Return the post with *slug*, or None when there is no such post."""
        for post in self._posts:
            if post.slug == slug:
                return post
        return None

    def get_by_category(self, category: str) -> list[BlogPost]:
        return [post for post in self._posts if post.category == category]

    def get_by_tag(self, tag: str) -> list[BlogPost]:
        return [post for post in self._posts if tag in post.tags]

    def get_categories(self) -> list[str]:
        """Distinct non-empty categories, sorted."""
        return sorted({post.category for post in self._posts if post.category})

    def get_tags(self) -> list[str]:
        return sorted({tag for post in self._posts for tag in post.tags})

    def get_recent(self, limit: int = 3) -> list[BlogPost]:
        if limit <= 0:
            return []
        return list(self._posts[:limit])

    def get_related(self, post: BlogPost, limit: int = 3) -> list[BlogPost]:
        """Other posts sharing the category or at least one tag, newest first.

        Returns fewer than *limit* posts when not enough qualify.
        """
        if limit <= 0:
            return []
        tags = set(post.tags)
        related: list[BlogPost] = []
        for candidate in self._posts:
            if candidate.id == post.id or candidate.slug == post.slug:
                continue
            same_category = bool(post.category) and candidate.category == post.category
            if same_category or tags.intersection(candidate.tags):
                related.append(candidate)
                if len(related) == limit:
                    break
        return related

    def filter(
        self,
        search: str = "",
        category: str = ALL_CATEGORIES,
        tag: str = "",
    ) -> list[BlogPost]:
        """Apply the listing filters.

        A category (other than "All") takes precedence over a tag; if both are
        given the tag is ignored.  The search term then narrows the result.
        """
        if category and category != ALL_CATEGORIES:
            posts = self.get_by_category(category)
        elif tag:
            posts = self.get_by_tag(tag)
        else:
            posts = self.get_all()

        term = search.strip()
        if term:
            posts = [post for post in posts if matches_search(post, term)]
        return posts


@lru_cache
def get_repository() -> PostRepository:
    """Load posts once per process using the configured sources."""
    repository = PostRepository(build_store(get_settings()).load_all())
    logger.info("Blog repository ready with %d published posts", len(repository))
    return repository

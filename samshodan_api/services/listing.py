"""Blog listing controller.

Holds the search / category / tag / "load more" state of a listing page and
answers what should be visible.  Every transition is synchronous and works on
the repository snapshot; the shareable query parameters are recomputed from
the state so a URL built from ``params`` reproduces the same view.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace

from pydantic import ValidationError

from samshodan_api.models.blog import BlogPost
from samshodan_api.services.http_client import fetch_json
from samshodan_api.services.post_repository import ALL_CATEGORIES, PostRepository
from samshodan_api.services.view_state import (
    ViewState,
    params_to_state,
    state_to_params,
)

logger = logging.getLogger(__name__)

POSTS_PER_PAGE = 6
NO_RESULTS_MESSAGE = "No articles found matching your criteria"


class BlogListing:
    """Filter, search and pagination state for one listing view.

    ``repository`` may be None when posts could not be loaded at all; the
    listing then behaves as an empty result rather than failing.
    """

    def __init__(
        self,
        repository: PostRepository | None,
        page_size: int = POSTS_PER_PAGE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.repository = repository
        self.page_size = page_size
        self.state = ViewState()
        self.display_count = page_size
        self.loading = False

    # -- state accessors -------------------------------------------------

    @property
    def search(self) -> str:
        return self.state.search

    @property
    def category(self) -> str:
        return self.state.category

    @property
    def tag(self) -> str:
        return self.state.tag

    @property
    def params(self) -> dict[str, str]:
        """Query parameters for the current view."""
        return state_to_params(self.state)

    @property
    def categories(self) -> list[str]:
        """Category choices, with the "All" entry first."""
        if self.repository is None:
            return [ALL_CATEGORIES]
        return [ALL_CATEGORIES, *self.repository.get_categories()]

    # -- derived views ---------------------------------------------------

    @property
    def filtered_posts(self) -> list[BlogPost]:
        if self.repository is None:
            return []
        return self.repository.filter(
            search=self.state.search,
            category=self.state.category,
            tag=self.state.tag,
        )

    @property
    def visible_posts(self) -> list[BlogPost]:
        return self.filtered_posts[: self.display_count]

    @property
    def total_filtered_count(self) -> int:
        return len(self.filtered_posts)

    @property
    def has_more(self) -> bool:
        return self.total_filtered_count > self.display_count

    @property
    def remaining(self) -> int:
        return max(self.total_filtered_count - self.display_count, 0)

    @property
    def is_empty(self) -> bool:
        return self.total_filtered_count == 0

    @property
    def summary(self) -> str:
        total = self.total_filtered_count
        if total == 0:
            return NO_RESULTS_MESSAGE
        shown = min(self.display_count, total)
        return f"Showing {shown} of {total} article{'' if total == 1 else 's'}"

    # -- transitions -----------------------------------------------------

    def _apply(self, state: ViewState) -> None:
        self.state = state
        self.display_count = self.page_size

    def set_search(self, term: str) -> None:
        self._apply(replace(self.state, search=term))

    def set_category(self, category: str) -> None:
        """Filter by category; clears any tag filter."""
        self._apply(replace(self.state, category=category or ALL_CATEGORIES, tag=""))

    def set_tag(self, tag: str) -> None:
        """Filter by tag; resets the category to "All"."""
        self._apply(replace(self.state, category=ALL_CATEGORIES, tag=tag))

    def clear_tag(self) -> None:
        self._apply(replace(self.state, tag=""))

    def clear_filters(self) -> None:
        self._apply(ViewState())

    def load_more(self) -> None:
        """Show another page, never past the end of the filtered set."""
        total = self.total_filtered_count
        if self.display_count >= total:
            return
        self.display_count = min(self.display_count + self.page_size, total)

    def restore(self, params: Mapping[str, str | None]) -> None:
        """Rebuild the view from query parameters.

        A URL carrying both a category and a tag keeps the category, the same
        outcome the repository would give.
        """
        state = params_to_state(params)
        if state.category != ALL_CATEGORIES and state.tag:
            state = replace(state, tag="")
        self._apply(state)


def _repository_from_payload(data: dict) -> PostRepository | None:
    if not data.get("success"):
        return None
    try:
        posts = [BlogPost.model_validate(item) for item in data.get("posts") or []]
    except ValidationError:
        logger.warning("Blog listing payload had invalid posts", exc_info=True)
        return None
    return PostRepository(posts)


async def load_listing(
    url: str,
    fallback: Callable[[], PostRepository],
    page_size: int = POSTS_PER_PAGE,
) -> BlogListing:
    """Build a listing from the remote blog endpoint, or the local posts.

    One attempt at *url*; any failure uses *fallback*.  If the fallback also
    fails the listing is empty.
    """
    listing = BlogListing(None, page_size)
    listing.loading = True

    repository = None
    data = await fetch_json(url, context="blog listing")
    if data is not None:
        repository = _repository_from_payload(data)
    if repository is None:
        logger.info("Using local blog posts for listing")
        try:
            repository = fallback()
        except Exception:
            logger.exception("Could not load local blog posts")
            repository = None

    listing.repository = repository
    listing.loading = False
    return listing

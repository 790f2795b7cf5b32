"""Shareable listing state — the query parameters behind a filtered blog URL."""

from collections.abc import Mapping
from dataclasses import dataclass

from samshodan_api.services.post_repository import ALL_CATEGORIES

SEARCH_PARAM = "search"
CATEGORY_PARAM = "category"
TAG_PARAM = "tag"


@dataclass(frozen=True)
class ViewState:
    search: str = ""
    category: str = ALL_CATEGORIES
    tag: str = ""

    @property
    def is_filtered(self) -> bool:
        return bool(self.search or self.tag or self.category != ALL_CATEGORIES)


def state_to_params(state: ViewState) -> dict[str, str]:
    """Encode *state* as query parameters, omitting axes with no filter."""
    params: dict[str, str] = {}
    if state.search:
        params[SEARCH_PARAM] = state.search
    if state.category and state.category != ALL_CATEGORIES:
        params[CATEGORY_PARAM] = state.category
    if state.tag:
        params[TAG_PARAM] = state.tag
    return params


def params_to_state(params: Mapping[str, str | None]) -> ViewState:
    """Decode query parameters; absent or blank keys mean no filter.

    Both a category and a tag may arrive from a hand-written URL.  They are
    kept as given and the repository's category-first rule decides.
    """

    def _get(key: str) -> str:
        value = params.get(key)
        return value.strip() if value else ""

    return ViewState(
        search=_get(SEARCH_PARAM),
        category=_get(CATEGORY_PARAM) or ALL_CATEGORIES,
        tag=_get(TAG_PARAM),
    )

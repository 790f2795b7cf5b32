"""Post store — loads blog posts from Markdown files or the compiled fallback.

Every record, file-backed or compiled, goes through ``normalize_post`` so the
rest of the app sees fully populated ``BlogPost`` objects.  ``PostStore``
never raises: a missing or unreadable content directory falls back to the
compiled dataset, and a single malformed file is skipped.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Protocol

import frontmatter
import yaml

from samshodan_api.config import Settings
from samshodan_api.models.blog import BlogPost
from samshodan_api.services.errors import MalformedRecord, SourceUnavailable
from samshodan_api.services.fallback_posts import FALLBACK_POSTS

logger = logging.getLogger(__name__)

# Tried in order after ISO 8601 parsing fails
_DATE_FORMATS = ("%Y/%m/%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%m/%d/%Y")

_FALSE_STRINGS = {"false", "no", "off", "0"}


@dataclass(frozen=True)
class PostDefaults:
    """Values substituted for missing front-matter fields."""

    author: str = "Samshodan Team"
    read_time: str = "5 min read"


def normalize_date(value: Any) -> str:
    """Return *value* as ``YYYY-MM-DD``, or ``""`` if it cannot be parsed.

    Timezone-aware datetimes are converted to UTC first, matching how the
    site has always rendered front-matter timestamps.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        return ""

    text = value.strip()
    try:
        return normalize_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    return ""


def _as_bool(value: Any) -> bool:
    """Published unless explicitly switched off."""
    if value is False:
        return False
    if isinstance(value, str) and value.strip().lower() in _FALSE_STRINGS:
        return False
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return False
    return True


def _as_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, Iterable):
        return [str(tag) for tag in value if tag is not None]
    return [str(value)]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _pick(metadata: Mapping[str, Any], *keys: str) -> Any:
    """First non-empty value among *keys* (front matter mixes camel and snake case)."""
    for key in keys:
        value = metadata.get(key)
        if value is not None and value != "":
            return value
    return None


def normalize_post(
    metadata: Mapping[str, Any],
    content: str,
    *,
    slug: str | None = None,
    defaults: PostDefaults = PostDefaults(),
) -> BlogPost:
    """Build a fully populated ``BlogPost`` from raw metadata and a Markdown body.

    When *slug* is given (file-backed posts) it is used for both ``id`` and
    ``slug``; otherwise both come from the metadata.
    """
    if slug is not None:
        post_id = post_slug = slug
    else:
        post_slug = _as_text(_pick(metadata, "slug", "id"))
        post_id = _as_text(_pick(metadata, "id", "slug"))

    return BlogPost(
        id=post_id,
        slug=post_slug,
        title=_as_text(metadata.get("title")),
        excerpt=_as_text(metadata.get("excerpt")),
        content=content or "",
        author=_as_text(metadata.get("author")) or defaults.author,
        date=normalize_date(metadata.get("date")),
        category=_as_text(metadata.get("category")),
        tags=_as_tags(metadata.get("tags")),
        read_time=_as_text(_pick(metadata, "readTime", "read_time"))
        or defaults.read_time,
        published=_as_bool(metadata.get("published", True)),
        featured_image=_as_text(_pick(metadata, "featuredImage", "featured_image"))
        or None,
    )


class PostSource(Protocol):
    """Anything that can produce normalized posts; may raise ``SourceUnavailable``."""

    name: str

    def load(self) -> list[BlogPost]: ...


class FilePostSource:
    """Markdown files with front matter; the file stem is the slug."""

    name = "files"

    def __init__(
        self, directory: str | Path, defaults: PostDefaults = PostDefaults()
    ) -> None:
        self.directory = Path(directory)
        self.defaults = defaults

    def parse_file(self, path: Path) -> BlogPost:
        """Parse a single post file, raising ``MalformedRecord`` on bad input."""
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecord(path.name, "not valid UTF-8") from exc
        try:
            post = frontmatter.loads(text)
        except yaml.YAMLError as exc:
            raise MalformedRecord(path.name, f"invalid front matter: {exc}") from exc
        return normalize_post(
            post.metadata, post.content, slug=path.stem, defaults=self.defaults
        )

    def load(self) -> list[BlogPost]:
        if not self.directory.is_dir():
            raise SourceUnavailable(
                f"content directory {self.directory} does not exist"
            )
        try:
            paths = sorted(self.directory.glob("*.md"))
        except OSError as exc:
            raise SourceUnavailable(f"cannot list {self.directory}: {exc}") from exc

        posts: list[BlogPost] = []
        for path in paths:
            try:
                posts.append(self.parse_file(path))
            except MalformedRecord as exc:
                logger.warning("Skipping malformed blog post %s", exc)
            except OSError as exc:
                raise SourceUnavailable(f"cannot read {path}: {exc}") from exc
        return posts


class StaticPostSource:
    """Compiled-in post records."""

    name = "fallback"

    def __init__(
        self,
        records: Iterable[Mapping[str, Any]] = FALLBACK_POSTS,
        defaults: PostDefaults = PostDefaults(),
    ) -> None:
        self.records = list(records)
        self.defaults = defaults

    def load(self) -> list[BlogPost]:
        return [
            normalize_post(
                record, _as_text(record.get("content")), defaults=self.defaults
            )
            for record in self.records
        ]


def _dedupe_slugs(posts: list[BlogPost], source: str) -> list[BlogPost]:
    """Keep the first post for each slug."""
    seen: set[str] = set()
    unique: list[BlogPost] = []
    for post in posts:
        if post.slug in seen:
            logger.warning(
                "Duplicate slug %r in %s source, keeping the first", post.slug, source
            )
            continue
        seen.add(post.slug)
        unique.append(post)
    return unique


class PostStore:
    """Loads posts from a primary source, falling back to a secondary one."""

    def __init__(self, primary: PostSource | None, fallback: PostSource) -> None:
        self.primary = primary
        self.fallback = fallback

    def _load_fallback(self) -> list[BlogPost]:
        try:
            return _dedupe_slugs(self.fallback.load(), self.fallback.name)
        except Exception:
            logger.exception("Fallback blog source failed, serving no posts")
            return []

    def load_all(self) -> list[BlogPost]:
        """Return every loaded post (published or not), never raising."""
        if self.primary is None:
            return self._load_fallback()

        try:
            posts = self.primary.load()
        except SourceUnavailable as exc:
            logger.warning(
                "Blog source unavailable (%s), falling back to static posts", exc
            )
            return self._load_fallback()
        except Exception:
            logger.exception("Error reading blog posts, falling back to static posts")
            return self._load_fallback()

        if not posts:
            logger.warning(
                "No blog posts found in %s source, falling back to static posts",
                self.primary.name,
            )
            return self._load_fallback()

        logger.info(
            "Loaded %d blog posts from %s source", len(posts), self.primary.name
        )
        return _dedupe_slugs(posts, self.primary.name)


def build_store(settings: Settings) -> PostStore:
    """Wire the configured sources into a ``PostStore``."""
    defaults = PostDefaults(
        author=settings.default_author, read_time=settings.default_read_time
    )
    primary = None
    if settings.use_file_source:
        primary = FilePostSource(settings.content_dir, defaults)
    return PostStore(primary, StaticPostSource(FALLBACK_POSTS, defaults))

"""Markdown rendering service.

Converts a post body to HTML with python-markdown, then runs the result
through a bleach allow-list so it can be inserted into a page as-is.
"""

import html
import logging
import re
from functools import partial

import markdown
from bleach.linkifier import LinkifyFilter
from bleach.sanitizer import Cleaner

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset(
    {
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "p",
        "a",
        "ul",
        "ol",
        "li",
        "strong",
        "em",
        "code",
        "pre",
        "blockquote",
        "br",
    }
)
ALLOWED_ATTRIBUTES = ["href", "class", "target", "rel"]
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# GFM-style: fenced code blocks, lists without blank-line quirks, hard line breaks
MARKDOWN_EXTENSIONS = ["fenced_code", "sane_lists", "nl2br"]

# Dropped with their contents; bleach would otherwise keep the inner text
_DROP_BLOCKS_RE = re.compile(
    r"<(script|style|iframe|object|template)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)


def _external_links(attrs: dict, new: bool = False) -> dict:
    """Open absolute links in a new tab without leaking the opener."""
    href = attrs.get((None, "href"), "")
    if href.startswith(("http://", "https://")):
        attrs[(None, "target")] = "_blank"
        attrs[(None, "rel")] = "noopener noreferrer"
    return attrs


_cleaner = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=True,
    strip_comments=True,
    filters=[
        partial(
            LinkifyFilter,
            callbacks=[_external_links],
            skip_tags=["pre", "code"],
        )
    ],
)


def sanitize_html(raw_html: str) -> str:
    """Reduce *raw_html* to the allowed tags, attributes and URL protocols."""
    return _cleaner.clean(_DROP_BLOCKS_RE.sub("", raw_html))


def render_markdown(text: str | None) -> str:
    """Render Markdown to sanitized HTML.

    Never raises.  If the Markdown parser fails the text is shown escaped
    inside a paragraph; malformed constructs such as an unclosed code fence
    otherwise render as ordinary text.
    """
    if not text:
        return ""
    try:
        raw_html = markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
    except Exception:
        logger.exception("Markdown rendering failed, falling back to escaped text")
        raw_html = f"<p>{html.escape(text)}</p>"
    return sanitize_html(raw_html)

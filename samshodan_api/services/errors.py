"""Blog content errors.

These are raised by post sources and caught by the post store; none of them
reach the HTTP layer.
"""


class BlogContentError(Exception):
    """Base class for blog content loading failures."""


class SourceUnavailable(BlogContentError):
    """The content directory is missing or cannot be read."""


class MalformedRecord(BlogContentError):
    """A single post file could not be parsed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason

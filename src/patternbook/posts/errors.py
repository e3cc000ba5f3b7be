"""Errors raised while reading and parsing blog posts."""

from __future__ import annotations

# ============================================================================
#                           General post errors
# ============================================================================


class PostError(Exception):
    """Base class for post-related errors."""


class PostNotFoundError(PostError, LookupError):
    """Raised when a post with the requested slug does not exist."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Post '{slug}' not found.")
        self.slug = slug


class UnreadablePostError(PostError):
    """Raised when a post file exists but cannot be read as UTF-8 text."""

    def __init__(self, slug: str, reason: str) -> None:
        self.detail = f"file cannot be read ({reason})"
        super().__init__(f"Post '{slug}': {self.detail}.")
        self.slug = slug
        self.reason = reason


class InvalidSlugError(PostError, ValueError):
    """Raised when a slug contains anything but lowercase letters, digits and hyphens."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            f"Invalid slug {slug!r}: use lowercase letters, digits and hyphens only."
        )
        self.slug = slug


# ============================================================================
#                           Front matter errors
# ============================================================================


class FrontMatterError(PostError):
    """Base class for problems with a post's front matter block."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source
        self.detail = message


class MissingFrontMatterError(FrontMatterError):
    """Raised when the text has no (or an unterminated) front matter block."""

    def __init__(self, source: str | None = None, *, unterminated: bool = False) -> None:
        message = (
            "front matter block is not closed with '---'"
            if unterminated
            else "post does not start with a '---' front matter block"
        )
        super().__init__(message, source)
        self.unterminated = unterminated


class InvalidFrontMatterError(FrontMatterError):
    """Raised when the front matter is not a YAML mapping."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        super().__init__(f"invalid front matter ({reason})", source)
        self.reason = reason


class MissingFieldError(FrontMatterError):
    """Raised when a required front matter field is absent."""

    def __init__(self, field: str, source: str | None = None) -> None:
        super().__init__(f"missing required field '{field}'", source)
        self.field = field


class InvalidFieldError(FrontMatterError):
    """Raised when a front matter field has the wrong type or format."""

    def __init__(self, field: str, reason: str, source: str | None = None) -> None:
        super().__init__(f"field '{field}' {reason}", source)
        self.field = field
        self.reason = reason

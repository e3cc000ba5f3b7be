"""Blog post content model.

Posts are Markdown files whose first lines are a YAML front matter block
(`author`, `title`, `date`, optionally `series` and `tags`). This package
parses them, groups them into series and reads them from a directory or
from memory. Rendering to HTML is left to the site generator.
"""

from .errors import (
    FrontMatterError,
    InvalidFieldError,
    InvalidFrontMatterError,
    InvalidSlugError,
    MissingFieldError,
    MissingFrontMatterError,
    PostError,
    PostNotFoundError,
    UnreadablePostError,
)
from .filesystem import FileSystemPostRepository
from .front_matter import FrontMatter, parse_front_matter, render_front_matter
from .memory import InMemoryPostRepository
from .post import CodeBlock, Heading, Post, validate_slug
from .repository import PostRepository
from .series import Series, build_series
from .validation import PostProblem, Severity, validate_posts

__all__ = [
    "CodeBlock",
    "FileSystemPostRepository",
    "FrontMatter",
    "FrontMatterError",
    "Heading",
    "InMemoryPostRepository",
    "InvalidFieldError",
    "InvalidFrontMatterError",
    "InvalidSlugError",
    "MissingFieldError",
    "MissingFrontMatterError",
    "Post",
    "PostError",
    "PostNotFoundError",
    "PostProblem",
    "PostRepository",
    "Series",
    "Severity",
    "UnreadablePostError",
    "build_series",
    "parse_front_matter",
    "render_front_matter",
    "validate_posts",
    "validate_slug",
]

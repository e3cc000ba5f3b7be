"""Checks run over every post in a repository (`patternbook posts check`)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import FrontMatterError, PostError, UnreadablePostError
from .post import Post
from .repository import PostRepository

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class PostProblem:
    slug: str
    severity: Severity
    message: str


def check_post(post: Post) -> list[PostProblem]:
    """Content warnings for a post that parsed successfully."""
    problems = []
    if not post.body.strip():
        problems.append(PostProblem(post.slug, Severity.WARNING, "body is empty"))
    if not post.code_blocks():
        problems.append(
            PostProblem(post.slug, Severity.WARNING, "post has no code examples")
        )
    return problems


def validate_posts(repository: PostRepository) -> list[PostProblem]:
    """Parse every post and collect problems instead of stopping at the first.

    Returns:
        Problems ordered by slug; parse failures are errors, content issues warnings.
    """
    problems: list[PostProblem] = []
    for slug in repository.slugs():
        try:
            post = repository.get(slug)
        except PostError as e:
            logger.debug("Post %s failed to parse: %s", slug, e)
            if isinstance(e, (FrontMatterError, UnreadablePostError)):
                message = e.detail
            else:
                message = str(e)
            problems.append(PostProblem(slug, Severity.ERROR, message))
            continue
        problems.extend(check_post(post))
    return problems

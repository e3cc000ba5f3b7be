"""In-memory post repository, used by tests and examples."""

from __future__ import annotations

from .errors import PostNotFoundError
from .post import Post, validate_slug
from .repository import PostRepository


class InMemoryPostRepository(PostRepository):
    def __init__(self, posts: list[Post] | None = None) -> None:
        self._posts: dict[str, Post] = {}
        for post in posts or []:
            self.add(post)

    def add(self, post: Post) -> None:
        self._posts[post.slug] = post

    def get(self, slug: str) -> Post:
        validate_slug(slug)
        try:
            return self._posts[slug]
        except KeyError as e:
            raise PostNotFoundError(slug) from e

    def slugs(self) -> list[str]:
        return sorted(self._posts)

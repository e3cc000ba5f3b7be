"""Post repository interface."""

from __future__ import annotations

import abc

from .post import Post


class PostRepository(abc.ABC):
    """Abstract base class for reading blog posts."""

    # --- Core Operations ---

    @abc.abstractmethod
    def get(self, slug: str) -> Post:
        """Load a single post.

        Args:
            slug: The post's slug.

        Returns:
            The parsed post.

        Raises:
            InvalidSlugError: If `slug` is not a valid slug.
            PostNotFoundError: If no post has that slug.
            FrontMatterError: If the post exists but cannot be parsed.
        """

    @abc.abstractmethod
    def slugs(self) -> list[str]:
        """Slugs of every available post, sorted, without parsing them."""

    # --- Convenience Methods ---

    def list(self) -> list[Post]:
        """Every post, ordered by date then slug.

        Raises:
            FrontMatterError: On the first post that cannot be parsed.
        """
        return sorted((self.get(slug) for slug in self.slugs()), key=_post_order)

    def exists(self, slug: str) -> bool:
        return slug in self.slugs()


def _post_order(post: Post) -> tuple:
    return (post.date, post.slug)

"""Grouping posts into ordered series ("this is the Nth post in a series")."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import PostNotFoundError
from .post import Post


@dataclass(frozen=True)
class Series:
    """Posts sharing a `series` name, ordered by date then slug."""

    name: str
    posts: tuple[Post, ...]

    def __len__(self) -> int:
        return len(self.posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts)

    def position(self, slug: str) -> int:
        """1-based position of `slug` within the series.

        Raises:
            PostNotFoundError: If the post is not part of this series.
        """
        for index, post in enumerate(self.posts, start=1):
            if post.slug == slug:
                return index
        raise PostNotFoundError(slug)

    def neighbours(self, slug: str) -> tuple[Post | None, Post | None]:
        """The posts immediately before and after `slug`."""
        index = self.position(slug) - 1
        previous = self.posts[index - 1] if index > 0 else None
        following = self.posts[index + 1] if index + 1 < len(self.posts) else None
        return previous, following


def build_series(posts: Iterable[Post]) -> dict[str, Series]:
    """Group posts by series name; posts without a series are left out."""
    grouped: defaultdict[str, list[Post]] = defaultdict(list)
    for post in posts:
        if post.series is not None:
            grouped[post.series].append(post)
    return {
        name: Series(name, tuple(sorted(members, key=lambda p: (p.date, p.slug))))
        for name, members in sorted(grouped.items())
    }

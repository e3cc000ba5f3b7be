"""Filesystem-backed post repository: one `<slug>.md` file per post."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import PostNotFoundError, UnreadablePostError
from .post import SLUG_RE, Post, validate_slug
from .repository import PostRepository

logger = logging.getLogger(__name__)

SUFFIX = ".md"


class FileSystemPostRepository(PostRepository):
    """Reads posts from a directory of Markdown files.

    Files whose names are not valid slugs are ignored (and logged), so stray
    files such as `README.md` never break a listing.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def get(self, slug: str) -> Post:
        # validating first keeps "../x" and friends out of the path join
        path = self._root / f"{validate_slug(slug)}{SUFFIX}"
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise PostNotFoundError(slug) from None
        except UnicodeDecodeError as e:
            raise UnreadablePostError(
                slug, f"not valid UTF-8: byte 0x{e.object[e.start]:02x} at offset {e.start}"
            ) from e
        except OSError as e:
            raise UnreadablePostError(slug, e.strerror or str(e)) from e
        return Post.from_text(slug, text, path=path)

    def slugs(self) -> list[str]:
        slugs = []
        for path in sorted(self._root.glob(f"*{SUFFIX}")):
            if not path.is_file():
                continue
            if not SLUG_RE.match(path.stem):
                logger.debug("Skipping %s: file name is not a valid slug", path.name)
                continue
            slugs.append(path.stem)
        return slugs

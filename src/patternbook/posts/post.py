"""The `Post` model: front matter plus a Markdown body."""

from __future__ import annotations

import datetime as dt
import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidSlugError
from .front_matter import FrontMatter, parse_front_matter, render_front_matter

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
FENCE_RE = re.compile(r"^(?P<fence>`{3,}|~{3,})\s*(?P<info>[^\s`]*)[^\n]*$")
HEADING_RE = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<text>.+?)\s*#*\s*$")
WORDS_PER_MINUTE = 200


def validate_slug(slug: str) -> str:
    """Return `slug` unchanged if valid.

    Raises:
        InvalidSlugError: If it is anything but lowercase words joined by hyphens.
    """
    if not SLUG_RE.match(slug):
        raise InvalidSlugError(slug)
    return slug


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """A fenced code block. `language` is empty when the fence has no info string."""

    language: str
    source: str


@dataclass(frozen=True, slots=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Post:
    """A blog post.

    Attributes:
        slug: URL-safe identifier, the file name without `.md`.
        front_matter: Parsed metadata block.
        body: Markdown following the front matter.
        path: File the post was read from, if any.
    """

    slug: str
    front_matter: FrontMatter
    body: str
    path: Path | None = None

    def __post_init__(self) -> None:
        validate_slug(self.slug)

    # --- Construction Paths ---

    @classmethod
    def from_text(cls, slug: str, text: str, path: Path | None = None) -> Post:
        """Parse a post from its full text.

        Raises:
            InvalidSlugError: If `slug` is not a valid slug.
            FrontMatterError: If the front matter is missing or invalid.
        """
        validate_slug(slug)
        front_matter, body = parse_front_matter(text, source=slug)
        return cls(slug=slug, front_matter=front_matter, body=body, path=path)

    def to_text(self) -> str:
        return render_front_matter(self.front_matter) + "\n" + self.body

    # --- Front matter shortcuts ---

    @property
    def title(self) -> str:
        return self.front_matter.title

    @property
    def author(self) -> str:
        return self.front_matter.author

    @property
    def date(self) -> dt.date:
        return self.front_matter.date

    @property
    def series(self) -> str | None:
        return self.front_matter.series

    # --- Body inspection ---

    def code_blocks(self) -> list[CodeBlock]:
        """Every fenced code block, in order.

        An unclosed fence runs to the end of the body, as in CommonMark.
        """
        return [s for s in self._segments() if isinstance(s, CodeBlock)]

    def headings(self) -> list[Heading]:
        """Markdown ATX headings outside code blocks."""
        headings = []
        for line in self._prose_lines():
            if match := HEADING_RE.match(line):
                headings.append(Heading(len(match["hashes"]), match["text"]))
        return headings

    def summary(self) -> str:
        """First prose paragraph, joined onto one line."""
        paragraph: list[str] = []
        for line in self._prose_lines():
            stripped = line.strip()
            if not stripped or HEADING_RE.match(stripped):
                if paragraph:
                    break
                continue
            paragraph.append(stripped)
        return " ".join(paragraph)

    def word_count(self) -> int:
        return len(self.body.split())

    def reading_minutes(self) -> int:
        return max(1, math.ceil(self.word_count() / WORDS_PER_MINUTE))

    # --- Internal Helpers ---

    def _prose_lines(self) -> Iterator[str]:
        # Code blocks become blank lines so they end any open paragraph.
        for segment in self._segments():
            yield "" if isinstance(segment, CodeBlock) else segment

    def _segments(self) -> Iterator[str | CodeBlock]:
        fence: str | None = None
        language = ""
        buffer: list[str] = []
        for line in self.body.splitlines():
            stripped = line.strip()
            if fence is None:
                if match := FENCE_RE.match(stripped):
                    fence = match["fence"]
                    language = match["info"].lower()
                    buffer = []
                else:
                    yield line
                continue
            if stripped.startswith(fence) and not stripped.strip(fence[0]):
                yield CodeBlock(language, "\n".join(buffer))
                fence = None
            else:
                buffer.append(line)
        if fence is not None:
            yield CodeBlock(language, "\n".join(buffer))

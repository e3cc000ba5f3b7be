"""Front matter parsing and rendering.

A post starts with a YAML block between two `---` lines:

    ---
    author: Ada Lovelace
    title: The Composite Pattern
    date: 2019-03-04
    series: Design Patterns
    tags: [structural]
    ---

`author`, `title` and `date` are required. `series` and `tags` are optional;
any other keys are preserved in `FrontMatter.extra`.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

from .errors import (
    InvalidFieldError,
    InvalidFrontMatterError,
    MissingFieldError,
    MissingFrontMatterError,
)

DELIMITER = "---"
REQUIRED_FIELDS = ("author", "title", "date")
KNOWN_FIELDS = (*REQUIRED_FIELDS, "series", "tags")


@dataclass(frozen=True)
class FrontMatter:
    """Metadata preceding a post's Markdown body."""

    author: str
    title: str
    date: dt.date
    series: str | None = None
    tags: tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping in canonical key order, omitting empty optionals."""
        data: dict[str, Any] = {
            "author": self.author,
            "title": self.title,
            "date": self.date,
        }
        if self.series is not None:
            data["series"] = self.series
        if self.tags:
            data["tags"] = list(self.tags)
        data.update(self.extra)
        return data


def split_front_matter(text: str, source: str | None = None) -> tuple[str, str]:
    """Split a post into its raw front matter and its body.

    Raises:
        MissingFrontMatterError: If there is no opening or closing delimiter.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        raise MissingFrontMatterError(source)

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == DELIMITER:
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return raw, body.lstrip("\r\n")

    raise MissingFrontMatterError(source, unterminated=True)


def parse_front_matter(
    text: str, source: str | None = None
) -> tuple[FrontMatter, str]:
    """Parse a post's text into front matter and body.

    Args:
        text: Full post text, starting with the front matter block.
        source: Optional name (slug or path) used in error messages.

    Returns:
        The parsed `FrontMatter` and the Markdown body that follows it.

    Raises:
        MissingFrontMatterError: If the front matter block is absent or unterminated.
        InvalidFrontMatterError: If the block is not valid YAML or not a mapping.
        MissingFieldError: If a required field is absent.
        InvalidFieldError: If a field has the wrong type or format.
    """
    raw, body = split_front_matter(text, source)

    try:
        data = yaml.safe_load(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise InvalidFrontMatterError("not valid YAML", source) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidFrontMatterError(
            f"expected a mapping, got {type(data).__name__}", source
        )

    for name in REQUIRED_FIELDS:
        if data.get(name) is None:
            raise MissingFieldError(name, source)

    front_matter = FrontMatter(
        author=_text_field(data, "author", source),
        title=_text_field(data, "title", source),
        date=_date_field(data["date"], source),
        series=_optional_text_field(data, "series", source),
        tags=_tags_field(data.get("tags"), source),
        extra={k: v for k, v in data.items() if k not in KNOWN_FIELDS},
    )
    return front_matter, body


def render_front_matter(front_matter: FrontMatter) -> str:
    """Serialise front matter back to a delimited YAML block (with trailing newline).

    Non-ASCII characters are written as YAML escapes; line separators such as
    U+0085 and U+2028 parse back unchanged.
    """
    dumped = yaml.safe_dump(
        front_matter.to_dict(),
        sort_keys=False,
        allow_unicode=False,
        default_flow_style=False,
    )
    return f"{DELIMITER}\n{dumped}{DELIMITER}\n"


# --- Field coercion ---


def _text_field(data: Mapping[str, Any], name: str, source: str | None) -> str:
    value = data[name]
    if not isinstance(value, str):
        raise InvalidFieldError(name, "must be a string", source)
    if not value.strip():
        raise InvalidFieldError(name, "must not be empty", source)
    return value


def _optional_text_field(
    data: Mapping[str, Any], name: str, source: str | None
) -> str | None:
    if data.get(name) is None:
        return None
    return _text_field(data, name, source)


def _date_field(value: Any, source: str | None) -> dt.date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    raise InvalidFieldError("date", "must be an ISO date (YYYY-MM-DD)", source)


def _tags_field(value: Any, source: str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(t, str) for t in value):
        raise InvalidFieldError("tags", "must be a list of strings", source)
    return tuple(value)

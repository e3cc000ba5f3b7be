"""Prototype pattern: documents cloned from templates.

New objects are produced by copying a configured prototype rather than by
calling a constructor with a long argument list.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


@dataclass
class Section:
    """A heading with its paragraphs."""

    heading: str
    paragraphs: list[str] = field(default_factory=list)


@dataclass
class Document:
    """A document that can be cloned as a prototype.

    `clone` deep-copies, so sections and tags of the copy can be edited
    without touching the original.
    """

    title: str
    author: str
    tags: list[str] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    def clone(self, **changes: object) -> Document:
        """Deep-copy this document, then apply attribute `changes`.

        Mutating the clone's lists or sections never affects the original.
        """
        duplicate = copy.deepcopy(self)
        for name, value in changes.items():
            setattr(duplicate, name, value)
        return duplicate


class PrototypeRegistry:
    """Named prototypes to clone from."""

    def __init__(self) -> None:
        self._prototypes: dict[str, Document] = {}

    def register(self, name: str, prototype: Document) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        del self._prototypes[name]

    def create(self, name: str, **changes: object) -> Document:
        """Clone the prototype registered under `name`.

        Raises:
            KeyError: If no prototype is registered under that name.
        """
        try:
            prototype = self._prototypes[name]
        except KeyError:
            raise KeyError(f"No prototype registered as '{name}'") from None
        return prototype.clone(**changes)


def demo() -> list[str]:
    """Create two posts from one template and show they are independent."""
    template = Document(
        title="Untitled",
        author="Editorial team",
        tags=["design-patterns"],
        sections=[Section("Intro"), Section("Example"), Section("Wrap-up")],
    )
    registry = PrototypeRegistry()
    registry.register("pattern-post", template)

    first = registry.create("pattern-post", title="Composite")
    first.tags.append("structural")
    second = registry.create("pattern-post", title="Observer")

    return [
        f"{doc.title}: tags={doc.tags}, sections={len(doc.sections)}"
        for doc in (template, first, second)
    ]

"""Catalog of the design patterns covered by the blog.

Links each pattern's name to its example module and to the post that
explains it, in the order the series introduces them.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType

logger = logging.getLogger(__name__)

PATTERNS_PACKAGE = "patternbook.patterns"


class CatalogError(Exception):
    """Base class for catalog errors."""


class UnknownPatternError(CatalogError, LookupError):
    """Raised when a pattern name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown pattern '{name}'. Run 'patternbook patterns list'.")
        self.name = name


@dataclass(frozen=True)
class PatternEntry:
    name: str
    title: str
    category: str
    module: str

    @property
    def post_slug(self) -> str:
        return f"{self.name}-pattern"

    def load(self) -> ModuleType:
        return importlib.import_module(f"{PATTERNS_PACKAGE}.{self.module}")


def _entry(name: str, title: str, category: str) -> PatternEntry:
    return PatternEntry(name, title, category, module=name.replace("-", "_"))


PATTERNS: tuple[PatternEntry, ...] = (
    _entry("composite", "Composite", "structural"),
    _entry("command", "Command", "behavioural"),
    _entry("bridge", "Bridge", "structural"),
    _entry("decorator", "Decorator", "structural"),
    _entry("memento", "Memento", "behavioural"),
    _entry("null-object", "Null Object", "behavioural"),
    _entry("factory", "Factory", "creational"),
    _entry("facade", "Facade", "structural"),
    _entry("template-method", "Template Method", "behavioural"),
    _entry("prototype", "Prototype", "creational"),
    _entry("adapter", "Adapter", "structural"),
    _entry("observer", "Observer", "behavioural"),
    _entry("builder", "Builder", "creational"),
    _entry("specification", "Specification", "behavioural"),
    _entry("visitor", "Visitor", "behavioural"),
    _entry("singleton", "Singleton", "creational"),
    _entry("chain-of-responsibility", "Chain of Responsibility", "behavioural"),
    _entry("proxy", "Proxy", "structural"),
    _entry("strategy", "Strategy", "behavioural"),
)

FRAMEWORK_POSTS: tuple[str, ...] = ("service-container", "framework-facades")


def normalize_name(name: str) -> str:
    """`"Chain_of Responsibility"` -> `"chain-of-responsibility"`."""
    return "-".join(name.strip().lower().replace("_", " ").split())


def get_pattern(name: str) -> PatternEntry:
    """Look up a pattern by name (case, spaces and underscores are ignored).

    Raises:
        UnknownPatternError: If no pattern matches.
    """
    wanted = normalize_name(name)
    for entry in PATTERNS:
        if entry.name == wanted:
            return entry
    raise UnknownPatternError(name)


def run_demo(name: str) -> list[str]:
    """Run a pattern's example and return the lines it produces."""
    entry = get_pattern(name)
    logger.debug("Running demo for %s (%s)", entry.title, entry.module)
    return entry.load().demo()

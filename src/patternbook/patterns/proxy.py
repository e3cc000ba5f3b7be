"""Proxy pattern: a virtual proxy that defers an expensive load.

`LazyReportProxy` has the same interface as the real report but only builds
it the first time it is actually needed, then reuses it.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Report(abc.ABC):
    """Subject interface shared by the real report and its proxy."""

    @abc.abstractmethod
    def render(self) -> str: ...


class DatabaseReport(Report):
    """The real subject. Building it is the expensive part."""

    loads = 0

    def __init__(self, name: str, fetch: Callable[[str], list[str]]) -> None:
        logger.debug("Loading report %s", name)
        type(self).loads += 1
        self.name = name
        self.rows = fetch(name)

    def render(self) -> str:
        return f"{self.name}: " + "; ".join(self.rows)


class LazyReportProxy(Report):
    """Stands in for a `DatabaseReport` and builds it on first `render`.

    `loaded` tells whether the expensive fetch has happened yet.
    """

    def __init__(self, name: str, fetch: Callable[[str], list[str]]) -> None:
        self.name = name
        self._fetch = fetch
        self._real: DatabaseReport | None = None

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def render(self) -> str:
        if self._real is None:
            self._real = DatabaseReport(self.name, self._fetch)
        return self._real.render()


def demo() -> list[str]:
    def fetch(name: str) -> list[str]:
        return [f"{name}-row-{i}" for i in range(1, 3)]

    DatabaseReport.loads = 0
    reports = [LazyReportProxy(name, fetch) for name in ("sales", "returns", "stock")]
    lines = [f"after creating proxies: {DatabaseReport.loads} loads"]
    lines.append(reports[0].render())
    lines.append(reports[0].render())
    lines.append(f"after rendering one twice: {DatabaseReport.loads} loads")
    return lines

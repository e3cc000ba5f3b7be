"""Static-proxy facades over the service container.

A facade is a class whose attribute lookups are forwarded to an object living
in the container. `Cache.get("key")` resolves the container entry named by
`Cache.get_facade_accessor()` and calls `get("key")` on it, so call sites read
like static calls while the real object stays swappable.

Example:
    ```py
    class Cache(Facade):
        @classmethod
        def get_facade_accessor(cls) -> str:
            return "cache"

    container = Container()
    container.singleton("cache", InMemoryCache)
    Facade.set_container(container)
    Cache.put("greeting", "hello")
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any, ClassVar

from .container import Container
from .errors import FacadeNotBootedError

logger = logging.getLogger(__name__)


class FacadeMeta(type):
    """Forwards unknown class attributes to the facade's resolved root."""

    def __getattr__(cls, name: str) -> Any:
        # Only called when normal lookup fails; private names stay local.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            cls.get_facade_accessor()  # type: ignore[attr-defined]
        except NotImplementedError as e:
            raise AttributeError(
                f"type object {cls.__name__!r} has no attribute {name!r} ({e})"
            ) from e
        return getattr(cls.get_facade_root(), name)  # type: ignore[attr-defined]


class Facade(metaclass=FacadeMeta):
    """Base class for facades; subclasses implement `get_facade_accessor`."""

    _container: ClassVar[Container | None] = None
    _resolved_instances: ClassVar[dict[Hashable, Any]] = {}

    @classmethod
    def get_facade_accessor(cls) -> Hashable:
        """Container key of the object this facade stands for."""
        raise NotImplementedError(f"{cls.__name__} does not define an accessor.")

    # --- Container wiring ---

    @classmethod
    def set_container(cls, container: Container | None) -> None:
        """Set the container shared by every facade and drop cached roots."""
        Facade._container = container
        Facade._resolved_instances.clear()

    @classmethod
    def get_container(cls) -> Container | None:
        return Facade._container

    # --- Root resolution ---

    @classmethod
    def get_facade_root(cls) -> Any:
        """Resolve (and cache) the object behind this facade.

        Raises:
            FacadeNotBootedError: If no container has been set and the root
                has not been swapped in.
        """
        accessor = cls.get_facade_accessor()
        if accessor in Facade._resolved_instances:
            return Facade._resolved_instances[accessor]
        if Facade._container is None:
            raise FacadeNotBootedError(cls.__name__)

        root = Facade._container.make(accessor)
        Facade._resolved_instances[accessor] = root
        logger.debug("Facade %s resolved %r", cls.__name__, accessor)
        return root

    @classmethod
    def swap(cls, obj: Any) -> Any:
        """Replace the object behind this facade (e.g. with a test fake)."""
        accessor = cls.get_facade_accessor()
        Facade._resolved_instances[accessor] = obj
        if Facade._container is not None:
            Facade._container.instance(accessor, obj)
        return obj

    @classmethod
    def clear_resolved_instance(cls, accessor: Hashable) -> None:
        Facade._resolved_instances.pop(accessor, None)

    @classmethod
    def clear_resolved_instances(cls) -> None:
        Facade._resolved_instances.clear()

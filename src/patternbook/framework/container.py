"""A small service container (dependency injection).

Keys are either classes or plain strings. A binding tells the container how
to build a key: from a class (auto-wired from its constructor annotations) or
from a factory that receives the container. Unbound concrete classes are
auto-wired on demand, which is what makes `make(SomeService)` work without
any registration at all.
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections import defaultdict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from .errors import BindingResolutionError, CircularDependencyError, describe

logger = logging.getLogger(__name__)

# Types the container will never try to construct from annotations.
PRIMITIVES: frozenset[type] = frozenset(
    {str, int, float, bool, bytes, complex, list, dict, set, tuple, frozenset, object}
)

_MISSING = inspect.Parameter.empty


@dataclass(frozen=True)
class Binding:
    """How to build a key and whether the result is shared."""

    concrete: Any
    shared: bool


class Container:
    """Service container with transient and shared bindings.

    Example:
        ```py
        container = Container()
        container.singleton(Cache, lambda c: Cache(ttl=60))
        service = container.make(ReportService)  # Cache injected automatically
        ```
    """

    def __init__(self) -> None:
        self._bindings: dict[Hashable, Binding] = {}
        self._instances: dict[Hashable, Any] = {}
        self._aliases: dict[Hashable, Hashable] = {}
        self._resolving_callbacks: defaultdict[Hashable, list[Callable[..., None]]] = (
            defaultdict(list)
        )
        self._building: list[Hashable] = []

    # --- Registration ---

    def bind(self, abstract: Hashable, concrete: Any = None, *, shared: bool = False) -> None:
        """Register how to build `abstract`.

        Args:
            abstract: The key callers resolve (a class or a string).
            concrete: A class, a factory `callable(container)`, another key, or
                `None` to bind `abstract` to itself.
            shared: When True the first built object is reused.
        """
        self._instances.pop(abstract, None)
        self._aliases.pop(abstract, None)
        self._bindings[abstract] = Binding(
            concrete=abstract if concrete is None else concrete, shared=shared
        )
        logger.debug(
            "Bound %s (%s)", describe(abstract), "shared" if shared else "transient"
        )

    def singleton(self, abstract: Hashable, concrete: Any = None) -> None:
        """Register a shared binding: built once, then reused."""
        self.bind(abstract, concrete, shared=True)

    def instance(self, abstract: Hashable, obj: Any) -> Any:
        """Register an already-built object as the shared value of `abstract`."""
        self._aliases.pop(abstract, None)
        self._instances[abstract] = obj
        logger.debug("Registered instance for %s", describe(abstract))
        return obj

    def alias(self, alias: Hashable, abstract: Hashable) -> None:
        """Make `alias` resolve exactly like `abstract`."""
        if alias == abstract:
            raise ValueError(f"{describe(alias)} cannot be aliased to itself.")
        self._aliases[alias] = abstract

    def resolving(self, abstract: Hashable, callback: Callable[..., None]) -> None:
        """Run `callback(obj, container)` every time `abstract` is resolved."""
        self._resolving_callbacks[self._canonical(abstract)].append(callback)

    def has(self, abstract: Hashable) -> bool:
        key = self._canonical(abstract)
        return key in self._bindings or key in self._instances

    def forget(self, abstract: Hashable) -> None:
        """Drop any binding, instance or alias registered for `abstract`."""
        self._bindings.pop(abstract, None)
        self._instances.pop(abstract, None)
        self._aliases.pop(abstract, None)

    def flush(self) -> None:
        """Remove every binding, instance, alias and callback."""
        self._bindings.clear()
        self._instances.clear()
        self._aliases.clear()
        self._resolving_callbacks.clear()

    # --- Resolution ---

    def make(self, abstract: Hashable, **overrides: Any) -> Any:
        """Resolve `abstract` to an object.

        Args:
            abstract: The key to resolve.
            **overrides: Constructor arguments that take precedence over
                auto-wiring. Passing overrides always builds a fresh object.

        Returns:
            The resolved object.

        Raises:
            CircularDependencyError: If resolution loops back onto a key that
                is still being built.
            BindingResolutionError: If the key cannot be built.
        """
        key = self._canonical(abstract)

        if key in self._instances and not overrides:
            obj = self._instances[key]
        else:
            obj = self._build_key(key, overrides)

        for callback in self._resolving_callbacks.get(key, ()):
            callback(obj, self)
        return obj

    def call(self, fn: Callable[..., Any], **overrides: Any) -> Any:
        """Call `fn`, injecting each parameter it declares."""
        return fn(**self._resolve_parameters(fn, overrides, owner=fn))

    def __getitem__(self, abstract: Hashable) -> Any:
        return self.make(abstract)

    def __contains__(self, abstract: Hashable) -> bool:
        return self.has(abstract)

    # --- Internal Helpers ---

    def _canonical(self, abstract: Hashable) -> Hashable:
        seen = set()
        while abstract in self._aliases:
            if abstract in seen:
                raise BindingResolutionError(abstract, "alias loop")
            seen.add(abstract)
            abstract = self._aliases[abstract]
        return abstract

    def _build_key(self, key: Hashable, overrides: dict[str, Any]) -> Any:
        if key in self._building:
            raise CircularDependencyError([*self._building, key])

        binding = self._bindings.get(key)
        concrete = binding.concrete if binding else key
        shared = bool(binding and binding.shared) and not overrides

        self._building.append(key)
        try:
            obj = self._build(key, concrete, overrides)
        finally:
            self._building.pop()

        if shared:
            self._instances[key] = obj
        logger.debug("Resolved %s", describe(key))
        return obj

    def _build(self, key: Hashable, concrete: Any, overrides: dict[str, Any]) -> Any:
        if inspect.isclass(concrete):
            return self._autowire(key, concrete, overrides)
        if callable(concrete):
            return concrete(self)
        if concrete != key:
            # Binding to another key, e.g. bind("cache", FileCache)
            return self.make(concrete, **overrides)
        raise BindingResolutionError(key, "no binding registered")

    def _autowire(self, key: Hashable, cls: type, overrides: dict[str, Any]) -> Any:
        if cls in PRIMITIVES:
            raise BindingResolutionError(key, f"cannot auto-wire builtin {cls.__name__}")
        if inspect.isabstract(cls):
            raise BindingResolutionError(
                key, f"{cls.__qualname__} is abstract and has no binding"
            )
        if cls.__init__ is object.__init__:
            return cls()
        return cls(**self._resolve_parameters(cls.__init__, overrides, owner=cls))

    def _resolve_parameters(
        self, fn: Callable[..., Any], overrides: dict[str, Any], owner: Any
    ) -> dict[str, Any]:
        signature = inspect.signature(fn)
        hints = _type_hints(fn)
        kwargs: dict[str, Any] = {}

        for name, param in signature.parameters.items():
            if name == "self" or param.kind in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD,
            ):
                continue
            if name in overrides:
                kwargs[name] = overrides[name]
                continue

            annotation = hints.get(name, param.annotation)
            if self._is_resolvable(annotation):
                try:
                    kwargs[name] = self.make(annotation)
                    continue
                except CircularDependencyError:
                    raise
                except BindingResolutionError:
                    if param.default is _MISSING:
                        raise
            if param.default is not _MISSING:
                kwargs[name] = param.default
                continue
            raise BindingResolutionError(
                owner, f"cannot resolve parameter '{name}' of {describe(owner)}"
            )
        return kwargs

    def _is_resolvable(self, annotation: Any) -> bool:
        if annotation is _MISSING:
            return False
        if inspect.isclass(annotation):
            return annotation not in PRIMITIVES or self.has(annotation)
        return isinstance(annotation, str) and self.has(annotation)


def _type_hints(fn: Callable[..., Any]) -> dict[str, Any]:
    """Evaluated annotations of `fn`, or an empty dict if they cannot be evaluated."""
    try:
        return typing.get_type_hints(fn)
    except (NameError, TypeError):
        return {}

"""Errors raised by the service container and facades."""

from collections.abc import Hashable, Sequence


def describe(key: Hashable) -> str:
    """Readable name for a container key (a class or a string)."""
    return getattr(key, "__qualname__", None) or repr(key)


# ============================================================================
#                           Container errors
# ============================================================================


class ContainerError(Exception):
    """Base class for service container errors."""


class BindingResolutionError(ContainerError):
    """Raised when the container cannot build the requested key."""

    def __init__(self, abstract: Hashable, reason: str) -> None:
        super().__init__(f"Unable to resolve {describe(abstract)}: {reason}")
        self.abstract = abstract
        self.reason = reason


class CircularDependencyError(BindingResolutionError):
    """Raised when resolving a key requires that same key further down."""

    def __init__(self, chain: Sequence[Hashable]) -> None:
        path = " -> ".join(describe(key) for key in chain)
        super().__init__(chain[-1], f"circular dependency ({path})")
        self.chain = list(chain)


# ============================================================================
#                            Facade errors
# ============================================================================


class FacadeError(Exception):
    """Base class for facade errors."""


class FacadeNotBootedError(FacadeError):
    """Raised when a facade is used before a container has been set."""

    def __init__(self, facade: str) -> None:
        super().__init__(
            f"Facade {facade} has no container; call Facade.set_container() first."
        )
        self.facade = facade

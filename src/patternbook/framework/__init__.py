"""Framework features covered by the tutorial posts.

- `Container`: a service container that binds keys to classes or factories and
  auto-wires constructor dependencies from type annotations.
- `Facade`: static proxies whose class-level attribute access is forwarded to an
  object resolved from the container.
"""

from .container import Container
from .errors import (
    BindingResolutionError,
    CircularDependencyError,
    ContainerError,
    FacadeError,
    FacadeNotBootedError,
)
from .facade import Facade

__all__ = [
    "BindingResolutionError",
    "CircularDependencyError",
    "Container",
    "ContainerError",
    "Facade",
    "FacadeError",
    "FacadeNotBootedError",
]

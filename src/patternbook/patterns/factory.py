"""Factory pattern: creating shapes from a name.

Callers ask the factory for a "circle" and get a `Circle`; they never name the
concrete class. New kinds can be registered without touching callers.
"""

from __future__ import annotations

import abc
import math
from typing import Any

from .errors import PatternError


class UnknownShapeError(PatternError):
    """Raised when the factory is asked for a kind it does not know."""

    def __init__(self, kind: str, known: list[str]) -> None:
        super().__init__(
            f"Unknown shape '{kind}'. Known shapes: {', '.join(sorted(known))}."
        )
        self.kind = kind
        self.known = known


class Shape(abc.ABC):
    """Product interface returned by `ShapeFactory.create`."""

    @abc.abstractmethod
    def area(self) -> float: ...

    def describe(self) -> str:
        return f"{type(self).__name__} with area {self.area():.2f}"


class Circle(Shape):
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius**2


class Rectangle(Shape):
    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Square(Rectangle):
    """A rectangle with equal sides, created from a single `side`."""

    def __init__(self, side: float) -> None:
        super().__init__(side, side)


class ShapeFactory:
    """Creates shapes by (case-insensitive) kind."""

    def __init__(self) -> None:
        self._registry: dict[str, type[Shape]] = {
            "circle": Circle,
            "rectangle": Rectangle,
            "square": Square,
        }

    def register(self, kind: str, shape_cls: type[Shape]) -> None:
        self._registry[kind.lower()] = shape_cls

    def create(self, kind: str, **dimensions: Any) -> Shape:
        """Build a shape of the given kind.

        Raises:
            UnknownShapeError: If `kind` has not been registered.
        """
        try:
            shape_cls = self._registry[kind.lower()]
        except KeyError:
            raise UnknownShapeError(kind, list(self._registry)) from None
        return shape_cls(**dimensions)


def demo() -> list[str]:
    """Create one of each built-in shape."""
    factory = ShapeFactory()
    shapes = [
        factory.create("circle", radius=1),
        factory.create("Rectangle", width=2, height=3),
        factory.create("SQUARE", side=4),
    ]
    return [shape.describe() for shape in shapes]

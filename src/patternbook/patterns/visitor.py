"""Visitor pattern: operations over shapes without changing the shapes.

Each shape implements only `accept`; new operations are new visitor classes.
Dispatch goes to `visit_<kind>` on the visitor.
"""

from __future__ import annotations

import abc
import json
import math
from typing import Any


class Shape(abc.ABC):
    """Element side of the visitor: shapes only know how to `accept`."""

    kind: str

    def accept(self, visitor: ShapeVisitor) -> Any:
        return visitor.visit(self)


class Circle(Shape):
    kind = "circle"

    def __init__(self, radius: float) -> None:
        self.radius = radius


class Rectangle(Shape):
    kind = "rectangle"

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height


class ShapeVisitor:
    """Base visitor: routes a shape to the matching `visit_<kind>` method."""

    def visit(self, shape: Shape) -> Any:
        method = getattr(self, f"visit_{shape.kind}", None)
        if method is None:
            raise NotImplementedError(
                f"{type(self).__name__} cannot visit a {shape.kind}"
            )
        return method(shape)


class AreaVisitor(ShapeVisitor):
    """Computes areas, rounded to two decimals for circles."""

    def visit_circle(self, circle: Circle) -> float:
        return round(math.pi * circle.radius**2, 2)

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        return rectangle.width * rectangle.height


class JsonExportVisitor(ShapeVisitor):
    """Serialises each shape to a one-line JSON object."""

    def visit_circle(self, circle: Circle) -> str:
        return json.dumps({"type": "circle", "radius": circle.radius})

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return json.dumps(
            {"type": "rectangle", "width": rectangle.width, "height": rectangle.height}
        )


def demo() -> list[str]:
    shapes: list[Shape] = [Circle(1.5), Rectangle(2, 4)]
    area, export = AreaVisitor(), JsonExportVisitor()
    lines = [shape.accept(export) for shape in shapes]
    lines.append(f"total area: {sum(shape.accept(area) for shape in shapes)}")
    return lines

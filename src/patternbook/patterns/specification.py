"""Specification pattern: composable product eligibility rules.

Each business rule is a small object answering one question. Rules combine
with `&`, `|` and `~` into new rules without new classes.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """Candidate the product specifications are evaluated against."""

    name: str
    price: Decimal
    category: str
    stock: int


class Specification(abc.ABC):
    """A business rule that can be combined with ``&``, ``|`` and ``~``."""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: Product) -> bool: ...

    def __and__(self, other: Specification) -> Specification:
        return AndSpecification(self, other)

    def __or__(self, other: Specification) -> Specification:
        return OrSpecification(self, other)

    def __invert__(self) -> Specification:
        return NotSpecification(self)

    def filter(self, candidates: list[Product]) -> list[Product]:
        return [c for c in candidates if self.is_satisfied_by(c)]


class AndSpecification(Specification):
    def __init__(self, left: Specification, right: Specification) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: Product) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(
            candidate
        )


class OrSpecification(Specification):
    def __init__(self, left: Specification, right: Specification) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: Product) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(
            candidate
        )


class NotSpecification(Specification):
    def __init__(self, wrapped: Specification) -> None:
        self.wrapped = wrapped

    def is_satisfied_by(self, candidate: Product) -> bool:
        return not self.wrapped.is_satisfied_by(candidate)


# --- Concrete rules ---


class InStock(Specification):
    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.stock > 0


class PriceBelow(Specification):
    """Satisfied when the price is strictly below `limit`."""

    def __init__(self, limit: Decimal) -> None:
        self.limit = limit

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.price < self.limit


class InCategory(Specification):
    def __init__(self, category: str) -> None:
        self.category = category

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.category == self.category


def demo() -> list[str]:
    """Find affordable, available books or anything on clearance."""
    products = [
        Product("Design Patterns", Decimal("45.00"), "books", 3),
        Product("Refactoring", Decimal("38.00"), "books", 0),
        Product("Mug", Decimal("8.50"), "merch", 12),
        Product("Poster", Decimal("4.00"), "clearance", 1),
    ]
    rule = (InStock() & InCategory("books") & PriceBelow(Decimal("50"))) | InCategory(
        "clearance"
    )
    return [p.name for p in rule.filter(products)]

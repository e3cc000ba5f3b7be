"""Decorator pattern: coffee with stackable condiments.

Each condiment wraps a beverage and is itself a beverage, so extras compose
at runtime instead of through a subclass for every combination.
"""

from __future__ import annotations

import abc
from decimal import Decimal


class Beverage(abc.ABC):
    """Component: anything with a price and a description."""

    @abc.abstractmethod
    def cost(self) -> Decimal:
        """Price of the drink."""

    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable name."""


class Espresso(Beverage):
    """A concrete drink that condiments can wrap."""

    def cost(self) -> Decimal:
        return Decimal("2.00")

    def description(self) -> str:
        return "Espresso"


class Filter(Beverage):
    def cost(self) -> Decimal:
        return Decimal("1.50")

    def description(self) -> str:
        return "Filter coffee"


class CondimentDecorator(Beverage):
    """Wraps another beverage and adds to its cost and description."""

    PRICE = Decimal("0")
    NAME = ""

    def __init__(self, beverage: Beverage) -> None:
        self.beverage = beverage

    def cost(self) -> Decimal:
        return self.beverage.cost() + self.PRICE

    def description(self) -> str:
        return f"{self.beverage.description()}, {self.NAME}"


class Milk(CondimentDecorator):
    PRICE = Decimal("0.40")
    NAME = "milk"


class Sugar(CondimentDecorator):
    PRICE = Decimal("0.10")
    NAME = "sugar"


class WhippedCream(CondimentDecorator):
    PRICE = Decimal("0.75")
    NAME = "whipped cream"


def demo() -> list[str]:
    """Order a plain espresso and a loaded filter coffee."""
    orders: list[Beverage] = [
        Espresso(),
        WhippedCream(Milk(Milk(Sugar(Filter())))),
    ]
    return [f"{drink.description()}: {drink.cost()}" for drink in orders]

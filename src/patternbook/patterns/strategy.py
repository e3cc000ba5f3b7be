"""Strategy pattern: interchangeable shipping cost calculations."""

from __future__ import annotations

import abc
from decimal import Decimal


class ShippingStrategy(abc.ABC):
    """Interchangeable rule for pricing delivery."""

    @abc.abstractmethod
    def cost(self, subtotal: Decimal, weight_kg: Decimal) -> Decimal: ...


class FlatRate(ShippingStrategy):
    def __init__(self, rate: Decimal = Decimal("4.95")) -> None:
        self.rate = rate

    def cost(self, subtotal: Decimal, weight_kg: Decimal) -> Decimal:
        return self.rate


class PerKilogram(ShippingStrategy):
    """Charges by weight, rounded to the cent."""

    def __init__(self, per_kg: Decimal = Decimal("1.20")) -> None:
        self.per_kg = per_kg

    def cost(self, subtotal: Decimal, weight_kg: Decimal) -> Decimal:
        return (self.per_kg * weight_kg).quantize(Decimal("0.01"))


class FreeOverThreshold(ShippingStrategy):
    """Free above the threshold; otherwise defer to a fallback strategy."""

    def __init__(self, threshold: Decimal, fallback: ShippingStrategy) -> None:
        self.threshold = threshold
        self.fallback = fallback

    def cost(self, subtotal: Decimal, weight_kg: Decimal) -> Decimal:
        if subtotal >= self.threshold:
            return Decimal("0.00")
        return self.fallback.cost(subtotal, weight_kg)


class ShippingCalculator:
    """Context: holds a strategy that can be swapped at runtime."""

    def __init__(self, strategy: ShippingStrategy) -> None:
        self.strategy = strategy

    def total(self, subtotal: Decimal, weight_kg: Decimal) -> Decimal:
        return subtotal + self.strategy.cost(subtotal, weight_kg)


def demo() -> list[str]:
    subtotal, weight = Decimal("60.00"), Decimal("2.5")
    calculator = ShippingCalculator(FlatRate())
    lines = []
    for strategy in (
        FlatRate(),
        PerKilogram(),
        FreeOverThreshold(Decimal("50"), FlatRate()),
    ):
        calculator.strategy = strategy
        lines.append(f"{type(strategy).__name__}: {calculator.total(subtotal, weight)}")
    return lines

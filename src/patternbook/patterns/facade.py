"""Facade pattern: one checkout call over several subsystems.

Inventory, payments and shipping each have their own API. `CheckoutFacade`
gives clients a single `place_order` and keeps the coordination in one place.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from decimal import Decimal

from .errors import PatternError

logger = logging.getLogger(__name__)


class OutOfStockError(PatternError):
    """Raised when an order asks for more units than are in stock."""

    def __init__(self, sku: str, requested: int, available: int) -> None:
        super().__init__(
            f"Cannot order {requested} x {sku}: only {available} in stock."
        )
        self.sku = sku
        self.requested = requested
        self.available = available


class InvalidQuantityError(PatternError, ValueError):
    """Raised when an order asks for fewer than one unit."""

    def __init__(self, qty: int) -> None:
        super().__init__(f"Quantity must be at least 1, got {qty}.")
        self.qty = qty


# --- Subsystems ---


class Inventory:
    """Stock subsystem: unit prices and counts keyed by SKU."""

    def __init__(self, stock: dict[str, tuple[Decimal, int]]) -> None:
        self._stock = dict(stock)

    def price_of(self, sku: str) -> Decimal:
        return self._stock[sku][0]

    def available(self, sku: str) -> int:
        return self._stock.get(sku, (Decimal("0"), 0))[1]

    def take(self, sku: str, qty: int) -> None:
        price, count = self._stock[sku]
        self._stock[sku] = (price, count - qty)


class PaymentGateway:
    """Payment subsystem; records every charge it takes."""

    def __init__(self) -> None:
        self.charges: list[tuple[str, Decimal]] = []

    def charge(self, card: str, amount: Decimal) -> str:
        self.charges.append((card, amount))
        return f"ch_{len(self.charges):04d}"


class Shipping:
    """Shipping subsystem; hands out sequential tracking numbers."""

    def __init__(self) -> None:
        self._tracking = itertools.count(1)

    def schedule(self, sku: str, qty: int) -> str:
        return f"TRK-{next(self._tracking):05d}"


@dataclass(frozen=True)
class OrderConfirmation:
    """What `CheckoutFacade.place_order` hands back to the caller."""

    sku: str
    qty: int
    total: Decimal
    charge_id: str
    tracking_number: str


# --- Facade ---


class CheckoutFacade:
    """Single entry point over inventory, payments and shipping.

    The subsystems stay public; the facade only fixes the order in which they
    are called.
    """

    def __init__(
        self, inventory: Inventory, payments: PaymentGateway, shipping: Shipping
    ) -> None:
        self.inventory = inventory
        self.payments = payments
        self.shipping = shipping

    def place_order(self, sku: str, qty: int, card: str) -> OrderConfirmation:
        """Reserve stock, take payment and book shipping.

        Raises:
            InvalidQuantityError: If `qty` is below 1. Nothing is touched.
            OutOfStockError: If there is not enough stock. No payment is taken.
        """
        if qty < 1:
            raise InvalidQuantityError(qty)
        available = self.inventory.available(sku)
        if qty > available:
            raise OutOfStockError(sku, qty, available)

        total = self.inventory.price_of(sku) * qty
        charge_id = self.payments.charge(card, total)
        self.inventory.take(sku, qty)
        tracking = self.shipping.schedule(sku, qty)
        logger.debug("Order %s x %s placed (%s, %s)", qty, sku, charge_id, tracking)
        return OrderConfirmation(sku, qty, total, charge_id, tracking)


def demo() -> list[str]:
    """Place one order that succeeds and one that runs out of stock."""
    checkout = CheckoutFacade(
        Inventory({"MUG-01": (Decimal("8.50"), 3)}), PaymentGateway(), Shipping()
    )
    order = checkout.place_order("MUG-01", 2, "4242")
    lines = [f"charged {order.total} ({order.charge_id}), shipping {order.tracking_number}"]
    try:
        checkout.place_order("MUG-01", 5, "4242")
    except OutOfStockError as exc:
        lines.append(str(exc))
    return lines

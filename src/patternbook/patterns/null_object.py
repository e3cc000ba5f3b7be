"""Null Object pattern: customer lookup that never returns None.

Instead of `if customer is None` at every call site, the repository hands
back a `NullCustomer` that answers every question with a harmless default.
"""

from __future__ import annotations

import abc
from decimal import Decimal


class Customer(abc.ABC):
    """Interface shared by real customers and the guest stand-in."""

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @property
    @abc.abstractmethod
    def discount(self) -> Decimal: ...

    @property
    def is_null(self) -> bool:
        return False

    def price_for(self, amount: Decimal) -> Decimal:
        return (amount * (1 - self.discount)).quantize(Decimal("0.01"))


class RealCustomer(Customer):
    """A stored customer with a name and a loyalty discount."""

    def __init__(self, customer_id: int, name: str, discount: Decimal) -> None:
        self.customer_id = customer_id
        self._name = name
        self._discount = discount

    @property
    def name(self) -> str:
        return self._name

    @property
    def discount(self) -> Decimal:
        return self._discount


class NullCustomer(Customer):
    """Stands in for a customer that does not exist."""

    @property
    def name(self) -> str:
        return "Guest"

    @property
    def discount(self) -> Decimal:
        return Decimal("0")

    @property
    def is_null(self) -> bool:
        return True


class CustomerRepository:
    """Looks customers up by id.

    `find` never returns None: unknown ids yield a `NullCustomer`, so callers
    do not need to branch on a missing customer.
    """

    def __init__(self, customers: list[RealCustomer] | None = None) -> None:
        self._customers = {c.customer_id: c for c in customers or []}

    def add(self, customer: RealCustomer) -> None:
        self._customers[customer.customer_id] = customer

    def find(self, customer_id: int) -> Customer:
        return self._customers.get(customer_id, NullCustomer())


def demo() -> list[str]:
    """Price an order for a known customer and for an unknown id."""
    repo = CustomerRepository([RealCustomer(1, "Ada", Decimal("0.10"))])
    lines = []
    for customer_id in (1, 42):
        customer = repo.find(customer_id)
        lines.append(f"{customer.name} pays {customer.price_for(Decimal('50.00'))}")
    return lines

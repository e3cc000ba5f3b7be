"""Unit tests for the Null Object example."""

from decimal import Decimal

from patternbook.patterns.null_object import (
    CustomerRepository,
    NullCustomer,
    RealCustomer,
    demo,
)


def test_unknown_id_returns_null_customer():
    customer = CustomerRepository().find(7)
    assert isinstance(customer, NullCustomer)
    assert customer.is_null
    assert customer.name == "Guest"
    assert customer.price_for(Decimal("19.99")) == Decimal("19.99")


def test_known_customer_gets_discount():
    repo = CustomerRepository()
    repo.add(RealCustomer(3, "Grace", Decimal("0.25")))
    customer = repo.find(3)
    assert not customer.is_null
    assert customer.price_for(Decimal("10.00")) == Decimal("7.50")


def test_prices_are_rounded_to_cents():
    customer = RealCustomer(1, "Ada", Decimal("0.333"))
    assert customer.price_for(Decimal("10")) == Decimal("6.67")


def test_demo():
    assert demo() == ["Ada pays 45.00", "Guest pays 50.00"]

"""Unit tests for the Facade (checkout) example."""

from decimal import Decimal

import pytest

from patternbook.patterns.facade import (
    CheckoutFacade,
    InvalidQuantityError,
    Inventory,
    OutOfStockError,
    PaymentGateway,
    Shipping,
    demo,
)


@pytest.fixture
def checkout() -> CheckoutFacade:
    return CheckoutFacade(
        Inventory({"BOOK": (Decimal("30.00"), 2)}), PaymentGateway(), Shipping()
    )


def test_place_order_coordinates_subsystems(checkout):
    confirmation = checkout.place_order("BOOK", 2, "4000")
    assert confirmation.total == Decimal("60.00")
    assert confirmation.charge_id == "ch_0001"
    assert confirmation.tracking_number == "TRK-00001"
    assert checkout.inventory.available("BOOK") == 0
    assert checkout.payments.charges == [("4000", Decimal("60.00"))]


def test_out_of_stock_takes_no_payment(checkout):
    with pytest.raises(OutOfStockError) as exc_info:
        checkout.place_order("BOOK", 3, "4000")
    err = exc_info.value
    assert (err.sku, err.requested, err.available) == ("BOOK", 3, 2)
    assert checkout.payments.charges == []
    assert checkout.inventory.available("BOOK") == 2


@pytest.mark.parametrize("qty", [0, -2])
def test_non_positive_quantity_is_rejected(checkout, qty):
    with pytest.raises(InvalidQuantityError) as exc_info:
        checkout.place_order("BOOK", qty, "4000")
    assert exc_info.value.qty == qty
    assert isinstance(exc_info.value, ValueError)
    assert checkout.payments.charges == []
    assert checkout.inventory.available("BOOK") == 2


def test_unknown_sku_is_out_of_stock(checkout):
    with pytest.raises(OutOfStockError, match="only 0 in stock"):
        checkout.place_order("PEN", 1, "4000")


def test_demo():
    assert demo() == [
        "charged 17.00 (ch_0001), shipping TRK-00001",
        "Cannot order 5 x MUG-01: only 1 in stock.",
    ]

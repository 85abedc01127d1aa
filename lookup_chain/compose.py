"""
Composition layer: order -> customer -> address.

Two surface forms of one bind sequence. Each step's output seeds the next
step's input; the first failure ends the chain and is returned unchanged.
"""

from __future__ import annotations

from ._errors import NotFoundError
from ._types import LCR
from .do import DoBlock, do
from .models import Address, Customer, Order
from .store import DEFAULT_LOOKUPS, Lookups


def get_address_from_order(
    order_id: int,
    *,
    lookups: Lookups = DEFAULT_LOOKUPS,
) -> LCR[Address, NotFoundError]:
    """
    Resolve an order's delivery address with nested `.then` binds.

    Example:
        result = await get_address_from_order(1)
        # Ok(Address(id=1, street='123 Anywhere Street', ...))

        result = await get_address_from_order(-1)
        # Error(NotFoundError(entity='Order', id=-1)), customer/address never looked up
    """
    return lookups.order(order_id).then(
        lambda order: lookups.customer(order.customer_id).then(
            lambda customer: lookups.address(customer.address_id)
        )
    )


@do
def get_address_from_order_comprehensions(
    order_id: int,
    *,
    lookups: Lookups = DEFAULT_LOOKUPS,
) -> DoBlock[Address, NotFoundError]:
    """Same chain as get_address_from_order, written with @do."""
    order: Order = yield lookups.order(order_id)
    customer: Customer = yield lookups.customer(order.customer_id)
    address: Address = yield lookups.address(customer.address_id)
    return address


__all__ = (
    "get_address_from_order",
    "get_address_from_order_comprehensions",
)

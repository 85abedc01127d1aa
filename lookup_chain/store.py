"""
In-memory data store.

Three fixed collections and one lookup per collection. Each lookup returns a
deferred effect: the linear scan happens when the effect runs, not when
find_* is called.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Sequence
from dataclasses import dataclass

from . import effect as fx
from ._errors import NotFoundError
from ._types import LCR, Lookup
from .models import Address, Customer, Order

logger = logging.getLogger(__name__)

# ============================================================================
# Fixed collections
# ============================================================================

ADDRESSES: tuple[Address, ...] = (
    Address(1, "123 Anywhere Street", "Chicago", "IL"),
)

CUSTOMERS: tuple[Customer, ...] = (
    Customer(1, "Matt", "Moore", 1),
)

ORDERS: tuple[Order, ...] = (
    Order(1, 1),
)


class _Record(typing.Protocol):
    @property
    def id(self) -> int: ...


def _scan[R: _Record](records: Sequence[R], record_id: int, *, op: str) -> R | None:
    found = next((r for r in records if r.id == record_id), None)
    logger.debug("%s(%d) -> %s", op, record_id, "miss" if found is None else "hit")
    return found


# ============================================================================
# Lookups
# ============================================================================


def find_order(order_id: int) -> LCR[Order, NotFoundError]:
    return fx.deferred(
        lambda: _scan(ORDERS, order_id, op="find_order"),
        error=lambda: NotFoundError("Order", order_id),
    )


def find_customer(customer_id: int) -> LCR[Customer, NotFoundError]:
    return fx.deferred(
        lambda: _scan(CUSTOMERS, customer_id, op="find_customer"),
        error=lambda: NotFoundError("Customer", customer_id),
    )


def find_address(address_id: int) -> LCR[Address, NotFoundError]:
    return fx.deferred(
        lambda: _scan(ADDRESSES, address_id, op="find_address"),
        error=lambda: NotFoundError("Address", address_id),
    )


@dataclass(frozen=True, slots=True)
class Lookups:
    """
    The three lookups a chain depends on.

    Composition functions take one of these so stand-in lookups
    (counting, failing) can replace the store.
    """

    order: Lookup[Order] = find_order
    customer: Lookup[Customer] = find_customer
    address: Lookup[Address] = find_address


DEFAULT_LOOKUPS = Lookups()

__all__ = (
    "ADDRESSES",
    "CUSTOMERS",
    "ORDERS",
    "DEFAULT_LOOKUPS",
    "Lookups",
    "find_address",
    "find_customer",
    "find_order",
)

"""
Short-circuiting lookup chains over lazy result effects.

Resolves order -> customer -> address from a fixed in-memory store, in two
equivalent forms:
- get_address_from_order:                nested `.then` binds
- get_address_from_order_comprehensions: @do generator (do-notation)

Every lookup is a deferred LazyCoroResult; nothing runs until the effect is
awaited, and the first NotFoundError ends the chain.
"""

# Core types
from ._errors import NotFoundError
from ._types import LCR, Lookup, NoError
from .models import Address, Customer, Order

# Effect helpers (namespace import preferred: `from lookup_chain import effect as fx`)
from . import effect
from .effect import attempt, deferred, fail, or_else, pure, to_result, unsafe

# Do-notation
from .do import DoBlock, do

# Store
from .store import (
    ADDRESSES,
    CUSTOMERS,
    DEFAULT_LOOKUPS,
    ORDERS,
    Lookups,
    find_address,
    find_customer,
    find_order,
)

# Composition
from .compose import get_address_from_order, get_address_from_order_comprehensions

# Config
from .config import DemoConfig, configure_logging

__all__ = (
    # Types
    "LCR",
    "Lookup",
    "NoError",
    "NotFoundError",
    # Models
    "Address",
    "Customer",
    "Order",
    # Effect
    "effect",
    "attempt",
    "deferred",
    "fail",
    "or_else",
    "pure",
    "to_result",
    "unsafe",
    # Do-notation
    "DoBlock",
    "do",
    # Store
    "ADDRESSES",
    "CUSTOMERS",
    "ORDERS",
    "DEFAULT_LOOKUPS",
    "Lookups",
    "find_address",
    "find_customer",
    "find_order",
    # Composition
    "get_address_from_order",
    "get_address_from_order_comprehensions",
    # Config
    "DemoConfig",
    "configure_logging",
)

"""Immutable records of the lookup chain: order -> customer -> address."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    id: int
    street: str
    city: str
    state: str


@dataclass(frozen=True, slots=True)
class Customer:
    id: int
    first_name: str
    last_name: str
    address_id: int


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    customer_id: int


__all__ = ("Address", "Customer", "Order")

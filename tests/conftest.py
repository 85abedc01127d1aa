"""
Shared fixtures: stand-in lookups that count how often each lookup runs,
and a spy on the store's collection scans.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace

import pytest
from kungfu import LazyCoroResult, Result

from lookup_chain import Lookups, NotFoundError, find_address, find_customer, find_order
from lookup_chain import store as store_module
from lookup_chain._types import LCR, Lookup


@dataclass
class CountingLookups:
    """Wraps real lookups; counts executions, not constructions."""

    inner: Lookups = field(default_factory=Lookups)
    runs: Counter[str] = field(default_factory=Counter)

    def _counted[R](self, name: str, lookup: Lookup[R]) -> Lookup[R]:
        def counted(record_id: int) -> LCR[R, NotFoundError]:
            async def run() -> Result[R, NotFoundError]:
                self.runs[name] += 1
                return await lookup(record_id)

            return LazyCoroResult(run)

        return counted

    def lookups(self) -> Lookups:
        return Lookups(
            order=self._counted("order", self.inner.order),
            customer=self._counted("customer", self.inner.customer),
            address=self._counted("address", self.inner.address),
        )


@pytest.fixture
def counting() -> CountingLookups:
    return CountingLookups()


@pytest.fixture
def dangling_customer() -> CountingLookups:
    """Store whose order points at a customer that does not exist."""
    return CountingLookups(
        inner=Lookups(
            order=lambda order_id: find_order(order_id).map(
                lambda order: replace(order, customer_id=99)
            ),
            customer=find_customer,
            address=find_address,
        )
    )


@pytest.fixture
def dangling_address() -> CountingLookups:
    """Store whose customer points at an address that does not exist."""
    return CountingLookups(
        inner=Lookups(
            order=find_order,
            customer=lambda customer_id: find_customer(customer_id).map(
                lambda customer: replace(customer, address_id=42)
            ),
            address=find_address,
        )
    )


@pytest.fixture
def scans(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, int]]:
    """Records every collection scan the store performs, as (op, id)."""
    seen: list[tuple[str, int]] = []
    real_scan = store_module._scan

    def spy(records, record_id, *, op):
        seen.append((op, record_id))
        return real_scan(records, record_id, op=op)

    monkeypatch.setattr(store_module, "_scan", spy)
    return seen

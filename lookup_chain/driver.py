"""
Demo driver.

Runs both chain forms for a known and an unknown order id and prints one
line per scenario, in two presentation modes:

- direct:   run the chain, print the address or substitute a fallback line
- captured: attempt() the chain, then branch on the captured outcome
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, assert_never

from kungfu import Error, Ok, Result

from . import effect as fx
from ._errors import NotFoundError
from ._types import LCR
from .compose import get_address_from_order, get_address_from_order_comprehensions
from .config import DemoConfig
from .models import Address

logger = logging.getLogger(__name__)

type Chain = Callable[[int], LCR[Address, NotFoundError]]
type Mode = Literal["direct", "captured"]


@dataclass(frozen=True, slots=True)
class Scenario:
    label: str
    chain: Chain
    order_id: int
    mode: Mode


def describe_outcome(
    outcome: Result[Address, NotFoundError],
    *,
    not_found: str,
) -> str:
    match outcome:
        case Ok(address):
            return str(address)
        case Error(_):
            return not_found
        case _ as unreachable:
            assert_never(unreachable)


async def run_direct(effect: LCR[Address, NotFoundError], *, fallback: str) -> str:
    """Run to completion; a failure is replaced by the fallback line."""
    return await fx.or_else(effect.map(str), fallback)


async def run_captured(effect: LCR[Address, NotFoundError], *, not_found: str) -> str:
    """Capture the outcome as a value, then branch on it."""
    outcome = await fx.unsafe(fx.attempt(effect))
    return describe_outcome(outcome, not_found=not_found)


def scenarios(config: DemoConfig) -> list[Scenario]:
    bind, comprehension = get_address_from_order, get_address_from_order_comprehensions
    known, unknown = config.known_order_id, config.unknown_order_id
    return [
        Scenario("bind chain", bind, known, "direct"),
        Scenario("do-notation", comprehension, known, "direct"),
        Scenario("bind chain, captured", bind, known, "captured"),
        Scenario("do-notation, captured", comprehension, known, "captured"),
        Scenario("bind chain, captured, unknown order", bind, unknown, "captured"),
        Scenario("do-notation, captured, unknown order", comprehension, unknown, "captured"),
        Scenario("bind chain, fallback, unknown order", bind, unknown, "direct"),
    ]


async def run_scenario(scenario: Scenario, config: DemoConfig) -> str:
    effect = scenario.chain(scenario.order_id)
    match scenario.mode:
        case "direct":
            return await run_direct(effect, fallback=config.fallback_message)
        case "captured":
            return await run_captured(effect, not_found=config.not_found_message)
        case _ as unreachable:
            assert_never(unreachable)


async def run_demo(
    config: DemoConfig,
    *,
    out: Callable[[str], None] = print,
) -> list[str]:
    """Run every scenario in order, emit one line each, return the lines."""
    lines: list[str] = []
    for scenario in scenarios(config):
        logger.debug("scenario: %s (order_id=%d)", scenario.label, scenario.order_id)
        line = await run_scenario(scenario, config)
        out(line)
        lines.append(line)
    return lines


__all__ = (
    "Scenario",
    "describe_outcome",
    "run_captured",
    "run_demo",
    "run_direct",
    "run_scenario",
    "scenarios",
)

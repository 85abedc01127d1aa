from __future__ import annotations

from _infra import banner, run

from lookup_chain import NotFoundError, effect as fx, get_address_from_order
from lookup_chain.driver import describe_outcome


async def main() -> None:
    banner("03_outcomes: attempt -> branch, or_else -> fallback, unsafe -> raise")

    for order_id in (1, -1):
        outcome = await fx.unsafe(fx.attempt(get_address_from_order(order_id)))
        print(f"attempt({order_id}): {describe_outcome(outcome, not_found='Not found')}")

        line = await fx.or_else(get_address_from_order(order_id).map(str), "Lookup failed")
        print(f"or_else({order_id}): {line}")

    try:
        await fx.unsafe(get_address_from_order(-1))
    except NotFoundError as exc:
        print(f"unsafe(-1) raised {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    run(main)

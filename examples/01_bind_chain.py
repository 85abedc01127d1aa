from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok
from lookup_chain import find_address, find_customer, find_order


async def main() -> None:
    banner("01_bind_chain: order -> customer -> address with `.then`")

    for order_id in (1, -1):
        # Nothing is looked up yet: the chain is only a description.
        chain = find_order(order_id).then(
            lambda order: find_customer(order.customer_id).then(
                lambda customer: find_address(customer.address_id)
            )
        )

        result = await chain
        match result:
            case Ok(address):
                print(f"order {order_id}: {address.street}, {address.city} {address.state}")
            case Error(err):
                print(f"order {order_id}: {err}")


if __name__ == "__main__":
    run(main)

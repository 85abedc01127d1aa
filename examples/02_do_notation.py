from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok
from lookup_chain import DoBlock, NotFoundError, do, find_address, find_customer, find_order
from lookup_chain.models import Customer, Order


@do
def full_name_and_city(order_id: int) -> DoBlock[str, NotFoundError]:
    order: Order = yield find_order(order_id)
    customer: Customer = yield find_customer(order.customer_id)
    address = yield find_address(customer.address_id)
    return f"{customer.first_name} {customer.last_name}, {address.city}"


async def main() -> None:
    banner("02_do_notation: the same chain written as a generator")

    for order_id in (1, -1):
        match await full_name_and_city(order_id):
            case Ok(line):
                print(f"order {order_id}: {line}")
            case Error(err):
                print(f"order {order_id}: {err}")


if __name__ == "__main__":
    run(main)

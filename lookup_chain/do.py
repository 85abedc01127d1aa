"""
Do-notation for LazyCoroResult.

A generator function yields effects and receives their success values;
@do turns it into a function returning a single effect:

    @do
    def address_of(order_id: int):
        order = yield find_order(order_id)
        customer = yield find_customer(order.customer_id)
        return (yield find_address(customer.address_id))

Same semantics as the nested `.then` chain: the first Error closes the
generator and becomes the result, later steps never run.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Generator
from functools import wraps

from kungfu import Error, LazyCoroResult, Ok, Result

from ._types import LCR

logger = logging.getLogger(__name__)

type DoBlock[T, E] = Generator[LCR[typing.Any, E], typing.Any, T]


def do[T, E, **P](
    func: Callable[P, DoBlock[T, E]],
) -> Callable[P, LCR[T, E]]:
    """
    Decorator: generator of effects -> function returning an effect.

    Calling the decorated function only captures arguments. The generator is
    created and driven each time the returned effect runs, so the effect can
    be executed more than once.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> LCR[T, E]:
        async def run() -> Result[T, E]:
            block = func(*args, **kwargs)
            sent: typing.Any = None
            try:
                while True:
                    try:
                        step = block.send(sent)
                    except StopIteration as stop:
                        return Ok(stop.value)
                    result = await step
                    match result:
                        case Ok(value):
                            sent = value
                        case Error(err):
                            logger.debug("%s: short-circuit on %r", func.__qualname__, err)
                            return Error(err)
            finally:
                block.close()

        return LazyCoroResult(run)

    return wrapper


__all__ = ("DoBlock", "do")

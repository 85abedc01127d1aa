"""
Deferred effects and their runners.

Lifting values into LazyCoroResult and running it back down:

- up:   pure / fail / deferred  - build an effect, nothing runs yet
- attempt                       - reify failure as a value
- down: to_result / or_else / unsafe - execute and extract

Examples:
    from lookup_chain import effect as fx

    order = fx.deferred(lambda: orders.get(1), error=lambda: NotFoundError("Order", 1))

    result = await fx.to_result(order)         # Ok(Order(...)) | Error(...)
    order = await fx.or_else(order, None)      # Order(...) | None
    order = await fx.unsafe(order)             # Order(...) or raises
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._types import LCR, NoError


# ============================================================================
# Up: values into effects
# ============================================================================


def pure[T](value: T) -> LCR[T, NoError]:
    """
    Lift pure value into always-succeeding effect.

    Example:
        address = fx.pure(Address(1, "123 Anywhere Street", "Chicago", "IL"))
        result = await fx.to_result(address)  # Ok(Address(...))
    """
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> LCR[NoError, E]:
    """
    Create always-failing effect. Dual of pure().

    NOTE: Return type LCR[Never, E] means "never produces a value".
    """
    return Error(error).to_async()


def deferred[T, E](
    thunk: Callable[[], T | None],
    *,
    error: Callable[[], E],
) -> LCR[T, E]:
    """
    Defer a search until the effect runs. None becomes Error(error()).

    **When to use:** Collection scans, cache checks, any lookup that answers
    with Optional and must not run when the effect is merely built.

    Example:
        def find_order(order_id: int) -> LCR[Order, NotFoundError]:
            return fx.deferred(
                lambda: next((o for o in ORDERS if o.id == order_id), None),
                error=lambda: NotFoundError("Order", order_id),
            )

    NOTE: Both thunk and error are called at run time, once per run.
    """

    async def run() -> Result[T, E]:
        value = thunk()
        if value is None:
            return Error(error())
        return Ok(value)

    return LazyCoroResult(run)


def attempt[T, E](effect: LCR[T, E]) -> LCR[Result[T, E], NoError]:
    """
    Outcome-capturing execution: the inner Result becomes the success value.

    The returned effect never fails. Branch on the captured outcome:

        outcome = await fx.unsafe(fx.attempt(chain))
        match outcome:
            case Ok(address): ...
            case Error(err): ...
    """

    async def run() -> Result[Result[T, E], NoError]:
        return Ok(await effect())

    return LazyCoroResult(run)


# ============================================================================
# Down: run effects and extract
# ============================================================================


async def to_result[T, E](effect: LCR[T, E]) -> Result[T, E]:
    """Run effect and return its Result."""
    return await effect()


async def or_else[T, D, E](effect: LCR[T, E], default: D) -> T | D:
    """
    Run and return value, or default on failure.

    **When to use:** Fallback substitution, when the caller wants a
    presentable value instead of handling the Error case.
    """
    result = await effect()
    match result:
        case Ok(value):
            return value
        case Error(_):
            return default


async def unsafe[T, E](effect: LCR[T, E]) -> T:
    """
    Run and unwrap, raises on Error.

    The carried error is raised as is when it is an exception, so
    `except NotFoundError` works at the call site. Any other error value
    is wrapped in RuntimeError.
    """
    result = await effect()
    match result:
        case Ok(value):
            return value
        case Error(err):
            if isinstance(err, BaseException):
                raise err
            raise RuntimeError(f"effect failed: {err!r}")


__all__ = (
    "pure",
    "fail",
    "deferred",
    "attempt",
    "to_result",
    "or_else",
    "unsafe",
)

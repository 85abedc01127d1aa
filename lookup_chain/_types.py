"""
Core type definitions for lookup_chain.

Aliases shared by the store, the composition layer and the driver.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import LazyCoroResult

from ._errors import NotFoundError

# ============================================================================
# Type aliases
# ============================================================================

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) rather than None: an error of this type
#       can never be constructed.
type NoError = typing.Never

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

# Lookup = deferred search of one collection by identifier
type Lookup[R] = Callable[[int], LazyCoroResult[R, NotFoundError]]

__all__ = (
    "NoError",
    "LCR",
    "Lookup",
)

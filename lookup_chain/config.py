from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass

LOG_LEVEL_ENV = "LOOKUP_CHAIN_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """
    Settings for the demo driver.

    Args:
        known_order_id: Order id that resolves all the way to an address
        unknown_order_id: Order id with no matching Order record
        not_found_message: Line printed when a captured outcome is a failure
        fallback_message: Line substituted when direct execution fails
        log_level: Level name passed to configure_logging
    """

    known_order_id: int = 1
    unknown_order_id: int = -1
    not_found_message: str = "Not found"
    fallback_message: str = "Lookup failed"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> DemoConfig:
        """Defaults, with log_level taken from LOOKUP_CHAIN_LOG_LEVEL when set."""
        raw = environ.get(LOG_LEVEL_ENV)
        if not raw:
            return cls()
        level = raw.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"{LOG_LEVEL_ENV}={raw!r} is not a logging level")
        return cls(log_level=level)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout is reserved for demo output."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ("LOG_LEVEL_ENV", "DemoConfig", "configure_logging")

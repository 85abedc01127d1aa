from __future__ import annotations

import asyncio
import os
import sys
from collections.abc import Sequence

from .config import DemoConfig, configure_logging
from .driver import run_demo


def main(argv: Sequence[str] | None = None) -> int:
    # Arguments are accepted and ignored.
    _ = argv
    config = DemoConfig.from_env(os.environ)
    configure_logging(config.log_level)
    asyncio.run(run_demo(config))
    return 0


def cli() -> None:
    try:
        code = main(sys.argv[1:])
    except ValueError as exc:
        sys.exit(f"lookup-chain: {exc}")
    sys.exit(code)


if __name__ == "__main__":
    cli()

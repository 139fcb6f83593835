from __future__ import annotations

import argparse
import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError

from laptop_api.core.config import get_settings
from laptop_api.core.logging_config import configure_logging
from laptop_api.db.init_db import init_db
from laptop_api.db.session import build_engine


LOG = logging.getLogger("laptop_api.cli")


async def _init_db() -> None:
    engine = build_engine(get_settings())
    try:
        await init_db(engine)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Laptop inventory API CLI")
    parser.add_argument(
        "command",
        choices=["init-db"],
        help="Command to run",
    )
    args = parser.parse_args(argv)
    configure_logging(get_settings())

    if args.command == "init-db":
        try:
            asyncio.run(_init_db())
        except (SQLAlchemyError, OSError) as exc:
            LOG.error("Error setting database err=%s", exc)
            return 1
        print("laptops table is ready")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

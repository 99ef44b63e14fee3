"""Protean Engine runner for the storefront domain.

In production (PROTEAN_ENV=production) events are processed asynchronously.
The engine publishes them from the outbox to Redis Streams and runs the
event handlers (order notification emails) off the request path.

Usage:
    python src/server.py
    python src/server.py --test-mode   # drain pending messages and exit
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain():
    import storefront.elements  # noqa: F401
    from storefront.domain import storefront

    storefront.init()
    return storefront


async def run(test_mode: bool = False):
    engine = Engine(_get_domain(), test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Rai Aura engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(args.test_mode))


if __name__ == "__main__":
    main()

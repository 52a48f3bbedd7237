"""CLI entrypoint to hold Redis locks for a while and release them."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from redis_locker.core.errors import LockAcquisitionTimeout
from redis_locker.core.locks_redis import RedisLockManager
from redis_locker.core.settings import LockerSettings
from redis_locker.utils.logging import get_logger


logger = get_logger("LockerCLI")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Acquire Redis locks, hold them, then release them.")
    parser.add_argument("keys", nargs="*", help="Keys to lock, or values for --pattern")
    parser.add_argument("--pattern", help="Key template with a single {} placeholder")
    parser.add_argument("--config", type=Path, default=None, help="Path to locker YAML settings")
    parser.add_argument("--url", default=None, help="Redis URL (overrides settings)")
    parser.add_argument("--ttl", type=int, default=None, help="Lock expiry in milliseconds")
    parser.add_argument("--try-delay", type=int, default=None, help="Delay between attempts in milliseconds")
    parser.add_argument("--try-limit", type=int, default=None, help="Maximum number of attempts")
    parser.add_argument("--hold", type=float, default=5.0, help="Seconds to hold the locks")
    return parser


def _overrides(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    overrides = {
        name: value
        for name, value in (("ttl", args.ttl), ("try_delay", args.try_delay), ("try_limit", args.try_limit))
        if value is not None
    }
    return overrides or None


async def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    if not args.keys:
        logger.error("Nothing to lock")
        return 2

    settings = LockerSettings.from_file(args.config) if args.config else LockerSettings.from_env()
    if args.url:
        settings = settings.model_copy(update={"redis_url": args.url})

    manager = RedisLockManager.from_settings(settings)
    try:
        if args.pattern:
            await manager.lock_pattern(args.pattern, *args.keys, options=_overrides(args))
        else:
            await manager.lock(*args.keys, options=_overrides(args))
        logger.info("Holding %s for %.1fs", ", ".join(sorted(manager.held_keys)), args.hold)
        await asyncio.sleep(args.hold)
    except LockAcquisitionTimeout as exc:
        logger.error("%s (after %d attempts)", exc, exc.attempts)
        return 1
    finally:
        await manager.release()
        await manager.close()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

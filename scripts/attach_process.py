#!/usr/bin/env python3
"""Connect to an instrumentation server, list its processes and optionally open one.

Usage:
    python -m scripts.attach_process 192.168.1.20 --filter py
    python -m scripts.attach_process 192.168.1.20 --pid 4242

The address defaults to PROCATTACH_DEFAULT_ADDRESS (127.0.0.1).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from procattach.config import ConfigurationError, default_server_address
from procattach.exceptions import ApplicationError
from procattach.logging_config import setup_logging
from procattach.server_client import ServerClientConfig
from procattach.session import ProcessSession

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Select and open a process on a remote instrumentation server")
    parser.add_argument("address", nargs="?", default=None, help="server host or IP (port is always 3030)")
    parser.add_argument("--filter", dest="filter_text", default="", help="case-insensitive process name filter")
    parser.add_argument("--pid", type=int, default=None, help="open the process with this pid")
    parser.add_argument("--verbose", action="store_true", help="log requests and state changes")
    return parser.parse_args(argv)


def _log_transition(old_state, new_state) -> None:
    logger.info("Session state %s -> %s", old_state.value, new_state.value)


async def run(args) -> int:
    address = args.address or default_server_address()
    async with ProcessSession(config=ServerClientConfig.from_env()) as session:
        session.add_listener(_log_transition)
        info = await session.setup(address)
        print(f"Server: {info.describe()}")

        for descriptor in session.filter(args.filter_text):
            print(f"  {descriptor}")

        if args.pid is not None:
            session.select_pid(args.pid)
            opened = await session.open_selected()
            print(f"Opened {opened.descriptor} on {opened.address}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(user_friendly=not args.verbose)
    try:
        return asyncio.run(run(args))
    except (ApplicationError, ConfigurationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Poll once and print the farm status. Exit 0 when a state was derived, 1 on a failed poll.

Usage: python scripts/check_status.py [config.yaml] [--json] [-v]"""

import argparse
import asyncio
import json
import logging
import os
import sys

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _PROJECT_ROOT)


def _format_progress(progress: dict) -> str:
    if progress["kind"] == "height":
        return f"{progress['progress_height']:,} / {progress['tip_height']:,}"
    return f"{progress['plot_count']} plot(s) / {progress['total_size']:,} bytes"


async def _poll_once(config: dict) -> dict:
    from chia_status.status_server.app import build_poller

    poller = build_poller(config)
    try:
        report = await poller.poll()
    finally:
        await poller.aclose()
    return report.to_dict()


def main() -> int:
    from chia_status.config.settings import read_config

    parser = argparse.ArgumentParser(description="Print current Chia farm status")
    parser.add_argument("config", nargs="?", default=None, help="config YAML (default config/config.yaml)")
    parser.add_argument("--json", action="store_true", help="print the raw /status payload")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    config, _ = read_config(args.config)
    payload = asyncio.run(_poll_once(config))

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(payload["status"])
        if payload.get("message"):
            print(payload["message"])
        elif payload.get("progress"):
            print(_format_progress(payload["progress"]))
    return 1 if payload["status"] == "Error" else 0


if __name__ == "__main__":
    sys.exit(main())

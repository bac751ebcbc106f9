#!/usr/bin/env python3
"""
clusterprobe - Main entry point.

Initializes the elastic check and runs it once or on a fixed interval.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from ..collectors.base import CheckError
from ..collectors.elastic import ElasticCheck
from ..data.models import SystemInfo
from .config import Config, configure_logging
from .workers import CheckWorker

logger = logging.getLogger(__name__)


def run_agent(args: argparse.Namespace) -> int:
    config = Config.load(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config.logging)

    check = ElasticCheck()
    if not config.is_check_enabled(check.name):
        logger.info("[%s] check disabled in config, nothing to do", check.name)
        return 0

    check.init(config, SystemInfo.collect())
    worker = CheckWorker(check, config, interval_seconds=args.interval)

    try:
        if args.once:
            ok = worker.run_once()
            print(json.dumps({**check.get_status(), "worker": worker.get_status()}, indent=2))
            return 0 if ok else 1

        worker.start()
        try:
            while worker.is_alive():
                worker.join(timeout=1.0)
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            worker.stop()
            worker.join(timeout=5)
        return 0
    finally:
        check.close()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Elasticsearch leader probe",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", type=str, help="Path to config YAML file")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run the check a single time and print its status as JSON",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Run interval in seconds (defaults to the check config)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default=None,
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the clusterprobe command."""
    args = parse_args(argv)
    try:
        return run_agent(args)
    except CheckError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())

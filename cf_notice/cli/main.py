#!/usr/bin/env python3
"""
cf-notice - Command Line Interface

Main entry point for the DNS change notifier CLI.
"""

import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from ..core.check_cycle import CheckCycle
from ..core.config import CheckerConfig, build_config, load_yaml_config
from ..core.reporter import Reporter, ReportFilter
from ..core.scheduler import Scheduler
from ..core.snapshot_store import SnapshotStore
from ..exceptions import APIError, ConfigError, SnapshotError
from ..providers.dns_client import DNSClient

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="cf-notice - Detect and report DNS record changes of a Cloudflare zone"
    )

    parser.add_argument(
        "--storage",
        "-s",
        help="Snapshot storage path, or set the CF_NOTICE_PATH environment "
        "(default: ~/.config/cf-notice.json)",
    )

    parser.add_argument(
        "--interval",
        "-i",
        type=int,
        help="Interval in seconds to re-check; 0 runs once (default: 0)",
    )

    parser.add_argument("--zid", dest="zone_id", help="Cloudflare zone id")

    parser.add_argument(
        "--zno",
        dest="zone_index",
        type=int,
        help="Cloudflare zone number, used when --zid is not given (default: 0)",
    )

    parser.add_argument(
        "--cookie",
        "-c",
        help="Cookie (file or string) of your Cloudflare access, or set CF_COOKIE",
    )

    parser.add_argument(
        "--api-key",
        "-k",
        dest="api_key",
        help="API key of your Cloudflare access, or set CF_API_KEY",
    )

    parser.add_argument(
        "--filter",
        "-f",
        choices=[f.value for f in ReportFilter],
        help="Records to print: no-change, changes or all (default: all)",
    )

    parser.add_argument("--config", help="Optional YAML configuration file")

    parser.add_argument(
        "--list-snapshots",
        action="store_true",
        help="Print the zones stored in the snapshot file and exit",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    reporter = Reporter()

    try:
        file_config = load_yaml_config(args.config) if args.config else {}
        config = build_config(
            vars(args),
            os.environ,
            file_config,
            require_credential=not args.list_snapshots,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    config_logger(config)
    logger.debug(f"Loading storage at {config.storage_path}")

    if args.list_snapshots:
        sys.exit(list_snapshots(config, reporter))

    try:
        sys.exit(run(config, reporter=reporter))
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping")
        sys.exit(0)


def run(
    config: CheckerConfig,
    client: Optional[DNSClient] = None,
    reporter: Optional[Reporter] = None,
    max_cycles: Optional[int] = None,
) -> int:
    """
    Resolve the zone and run the scheduler.

    Returns:
        Process exit status
    """
    reporter = reporter or Reporter()
    client = client or DNSClient(config)

    try:
        config = pick_zone(config, client, reporter)
    except APIError as e:
        logger.error(f"Failed to fetch zones: {e}")
        reporter.error(f"Failed to fetch zones: {e}")
        return 1
    except ConfigError as e:
        logger.error(str(e))
        reporter.error(str(e))
        return 1

    cycle = CheckCycle(config, client, SnapshotStore(config.storage_path), reporter)
    Scheduler(config, cycle).run(max_cycles=max_cycles)
    return 0


def pick_zone(config: CheckerConfig, client, reporter: Reporter) -> CheckerConfig:
    """
    Bind the configuration to a zone.

    An explicit zone id is used as is; otherwise the zones are listed and the
    one at ``config.zone_index`` is picked.
    """
    if config.zone_id:
        return config

    zones = client.list_zones()
    if not zones:
        raise ConfigError("No zones available for this credential")
    if config.zone_index >= len(zones):
        raise ConfigError(
            f"Zone number {config.zone_index} out of range ({len(zones)} zones available)"
        )

    picked = zones[config.zone_index]
    reporter.show_zones(zones, picked)
    return config.with_zone(picked.id)


def list_snapshots(config: CheckerConfig, reporter: Reporter) -> int:
    """Print the zones stored in the snapshot file."""
    try:
        snapshots = SnapshotStore(config.storage_path).load_all()
    except SnapshotError as e:
        logger.error(str(e))
        reporter.error(str(e))
        return 1

    reporter.show_snapshots(snapshots)
    return 0


def config_logger(config: CheckerConfig):
    """Configure logging."""
    logging_config: Dict = config.log_settings
    log_level = "DEBUG" if config.debug else str(logging_config.get("level", "INFO")).upper()

    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = logging_config.get("file")
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)


if __name__ == "__main__":
    main()

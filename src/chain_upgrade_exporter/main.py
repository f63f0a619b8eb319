#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from chain_upgrade_exporter import __version__
from chain_upgrade_exporter.app import run_exporter
from chain_upgrade_exporter.common import configure_logging
from chain_upgrade_exporter.config import ConfigurationError, get_config_path, load_exporter_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export announced chain upgrades as Prometheus gauges"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to the TOML configuration file (default: $CHAIN_UPGRADE_EXPORTER_CONFIG "
        "or config.toml)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default="INFO",
        help="Logging verbosity (default: %(default)s)",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=parsed_args.log_level)

    config_path = Path(parsed_args.config).expanduser() if parsed_args.config else get_config_path()
    try:
        config = load_exporter_config(config_path)
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    try:
        run_exporter(config)
    except Exception:
        log.exception("Fatal error while running the exporter")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def cli() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    cli()

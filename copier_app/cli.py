"""Command-line entry point for the relay server."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

import structlog

from .api.app import ENDPOINTS, create_app
from .config.loader import ConfigLoader
from .errors import ConfigurationError
from .logging.config import configure_logging, log_server_started
from .relay import SignalRelay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trade-copier",
        description="Relay trading signals from a Master terminal to Slave terminals.",
    )
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument("--host", help="Bind address (env: HOST)")
    parser.add_argument("--port", type=int, help="Listen port (env: PORT)")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL (env: LOG_LEVEL)")
    parser.add_argument("--debug", action="store_true", help="Run the Flask debugger")
    return parser


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Config overrides for the flags that were actually given."""
    overrides: dict[str, Any] = {}
    if args.host is not None:
        overrides.setdefault("server", {})["host"] = args.host
    if args.port is not None:
        overrides.setdefault("server", {})["port"] = args.port
    if args.debug:
        overrides.setdefault("server", {})["debug"] = True
    if args.log_level is not None:
        overrides.setdefault("logging", {})["level"] = args.log_level
    return overrides


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader.create(config_file=args.config).load(cli_overrides(args))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_caller=config.logging.include_caller,
    )
    logger = structlog.get_logger("copier_app")

    relay = SignalRelay(signal_params=config.signals)
    app = create_app(relay, config)

    log_server_started(
        logger,
        host=config.server.host,
        port=config.server.port,
        endpoints=ENDPOINTS,
        context={"service": "trade-copier"},
    )

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=True,
        use_reloader=False,
    )
    return 0

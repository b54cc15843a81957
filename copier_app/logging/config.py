"""
Centralized logging configuration for the signal relay.

This module configures structlog on top of the standard library logging
module. Every component gets its logger from here so that relay events,
request errors and server startup share one structured format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = True,
    include_caller: bool = False
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines; otherwise human-readable
        include_caller: Include caller information (filename, line number)
    """
    log_level = getattr(logging, level.upper())

    # werkzeug and flask log through the standard library
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_relay_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with relay context.

    Signal submissions and acknowledgments go through this logger so the
    audit trail of what each Slave executed can be filtered out of the
    request noise.
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="relay",
        audit_trail=True
    )


def log_signal_received(
    logger: FilteringBoundLogger,
    signal_id: str,
    action: str,
    symbol: Optional[str],
    ticket: int,
    producer_id: str,
) -> None:
    """
    Log a newly appended signal with standardized format.

    Args:
        logger: Structlog logger instance
        signal_id: Id assigned to the stored signal
        action: OPEN, CLOSE or MODIFY
        symbol: Instrument symbol, None for a CLOSE without one
        ticket: Order ticket on the Master side
        producer_id: Master that submitted the signal
    """
    logger.info(
        "Signal received",
        event_type="signal_received",
        signal_id=signal_id,
        action=action,
        symbol=symbol if symbol is not None else "(no symbol)",
        ticket=ticket,
        producer_id=producer_id,
    )


def log_signal_acknowledged(
    logger: FilteringBoundLogger,
    consumer_id: str,
    signal_id: str,
    newly_recorded: bool,
    known_signal: bool,
) -> None:
    """
    Log a Slave acknowledgment with standardized format.

    Acknowledging an unknown id is accepted, so it is logged as a warning
    for operators rather than rejected.
    """
    bound_logger = logger.bind(
        event_type="signal_acknowledged",
        consumer_id=consumer_id,
        signal_id=signal_id,
        newly_recorded=newly_recorded,
        known_signal=known_signal,
    )

    if known_signal:
        bound_logger.info("Signal acknowledged")
    else:
        bound_logger.warning("Acknowledged unknown signal id")


def log_server_started(
    logger: FilteringBoundLogger,
    host: str,
    port: int,
    endpoints: dict[str, str],
    context: Optional[dict[str, Any]] = None
) -> None:
    """Log the startup banner with the served endpoints."""
    bound_logger = logger.bind(
        event_type="server_started",
        host=host,
        port=port,
        endpoints=endpoints,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Trade Copier API ready")

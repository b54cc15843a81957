"""
Logging configuration and utilities for the signal relay.
"""
from .config import configure_logging, get_logger, get_relay_logger

__all__ = ["configure_logging", "get_logger", "get_relay_logger"]

"""Validation of producer and consumer request payloads."""

from .signal_request import SignalRequest, parse_acknowledgment, parse_signal_request

__all__ = ["SignalRequest", "parse_acknowledgment", "parse_signal_request"]

"""
Signal records and the append-only signal log.

Signals are created once, when the Master submits them, and never change
afterwards. The log keeps every signal for the lifetime of the process.
"""

from .ids import SignalIdGenerator
from .log import SignalLog
from .models import Signal, SignalAction

__all__ = ["Signal", "SignalAction", "SignalIdGenerator", "SignalLog"]

"""
Per-Slave acknowledgment bookkeeping.

A (consumer, signal) pair starts PENDING, which is implicit: there is no
record. It becomes ACKNOWLEDGED once the Slave confirms execution. That
state is terminal, and the signal never shows up in that Slave's pending
list again.
"""

import threading
from collections.abc import Iterable
from enum import Enum
from typing import Optional

from ..errors import MissingFieldError
from ..signals.models import Signal


class DeliveryState(Enum):
    """Delivery state of one signal for one Slave."""
    PENDING = "pending"
    ACKNOWLEDGED = "acknowledged"


def _require(value: Optional[str], field: str) -> str:
    if value is None or value == "":
        raise MissingFieldError(f"{field} is required", field=field)
    return value


class DeliveryTracker:
    """Maps each consumer id to the set of signal ids it has executed."""

    def __init__(self) -> None:
        self._acknowledged: dict[str, set[str]] = {}
        self._lock = threading.Lock()

    def acknowledge(self, consumer_id: str, signal_id: str) -> bool:
        """
        Record that a consumer executed a signal.

        Idempotent. The signal id is not checked against the log.

        Returns:
            True if the record is new, False if it was already there

        Raises:
            MissingFieldError: If either id is missing or empty
        """
        consumer_id = _require(consumer_id, "consumer_id")
        signal_id = _require(signal_id, "signal_id")

        with self._lock:
            executed = self._acknowledged.setdefault(consumer_id, set())
            if signal_id in executed:
                return False
            executed.add(signal_id)
            return True

    def is_acknowledged(self, consumer_id: str, signal_id: str) -> bool:
        with self._lock:
            executed = self._acknowledged.get(consumer_id)
            return executed is not None and signal_id in executed

    def state_of(self, consumer_id: str, signal_id: str) -> DeliveryState:
        """Current delivery state of a (consumer, signal) pair."""
        if self.is_acknowledged(consumer_id, signal_id):
            return DeliveryState.ACKNOWLEDGED
        return DeliveryState.PENDING

    def pending_for(self, consumer_id: str, signals: Iterable[Signal]) -> list[Signal]:
        """
        Filter signals down to those the consumer has not acknowledged.

        Args:
            consumer_id: Slave identifier
            signals: Signals in log order

        Returns:
            Unacknowledged signals, in the order given

        Raises:
            MissingFieldError: If consumer_id is missing or empty
        """
        consumer_id = _require(consumer_id, "consumer_id")

        # Copy under the lock so a concurrent acknowledge cannot change the
        # set while the filter below iterates it
        with self._lock:
            executed = frozenset(self._acknowledged.get(consumer_id, ()))

        return [signal for signal in signals if signal.id not in executed]

    def acknowledged_count(self, consumer_id: str) -> int:
        with self._lock:
            return len(self._acknowledged.get(consumer_id, ()))

    def consumer_count(self) -> int:
        """Number of consumers that have acknowledged at least one signal."""
        with self._lock:
            return len(self._acknowledged)

"""Append-only, insertion-ordered signal log."""

import threading

import structlog

from .models import Signal

logger = structlog.get_logger(__name__)


class SignalLog:
    """
    In-memory log of every signal the Master has submitted.

    The log only grows: no deletion, no mutation, no reordering. Nothing is
    persisted, so a restart starts from an empty log.
    """

    def __init__(self) -> None:
        self._signals: list[Signal] = []
        self._ids: set[str] = set()
        self._lock = threading.Lock()

    def append(self, signal: Signal) -> Signal:
        """
        Append a fully built signal to the end of the log.

        Raises:
            ValueError: If a signal with the same id is already stored
        """
        with self._lock:
            if signal.id in self._ids:
                raise ValueError(f"Duplicate signal id: {signal.id}")
            self._ids.add(signal.id)
            self._signals.append(signal)
            size = len(self._signals)

        logger.debug("Signal appended", signal_id=signal.id, log_size=size)
        return signal

    def all_signals(self) -> tuple[Signal, ...]:
        """Snapshot of the whole log in insertion order."""
        with self._lock:
            return tuple(self._signals)

    def __contains__(self, signal_id: object) -> bool:
        with self._lock:
            return signal_id in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._signals)

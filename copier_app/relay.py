"""
Signal relay coordinator.

Binds the signal log and the delivery tracker behind the three operations
the HTTP layer exposes: submit a signal, list a Slave's pending signals,
and acknowledge one of them. A single relay is built at startup and handed
to the app; nothing here is module-level state.
"""

from typing import Any, Optional

import structlog

from .config.defaults import SignalParams
from .delivery.tracker import DeliveryTracker
from .logging.config import get_relay_logger, log_signal_acknowledged, log_signal_received
from .signals.ids import SignalIdGenerator
from .signals.log import SignalLog
from .signals.models import Signal
from .utils.time import utc_now
from .validation.signal_request import parse_acknowledgment, parse_signal_request

logger = structlog.get_logger(__name__)


class SignalRelay:
    """Owns the signal log and the per-Slave delivery records."""

    def __init__(
        self,
        signal_params: Optional[SignalParams] = None,
        signal_log: Optional[SignalLog] = None,
        tracker: Optional[DeliveryTracker] = None,
        id_generator: Optional[SignalIdGenerator] = None
    ):
        self.signal_params = signal_params or SignalParams()
        self.signal_log = signal_log or SignalLog()
        self.tracker = tracker or DeliveryTracker()
        self.id_generator = id_generator or SignalIdGenerator()
        self.logger = get_relay_logger(__name__)

    def submit(self, payload: Any) -> Signal:
        """
        Validate a Master submission and append it to the log.

        Args:
            payload: Decoded JSON body of POST /signal

        Returns:
            The stored signal, including its assigned id

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        request = parse_signal_request(payload, self.signal_params)

        created_at = utc_now()
        signal = Signal(
            id=self.id_generator.next_id(
                request.producer_id, request.ticket, request.action, created_at
            ),
            producer_id=request.producer_id,
            ticket=request.ticket,
            action=request.action,
            symbol=request.symbol,
            side=request.side,
            lot_size=request.lot_size,
            open_price=request.open_price,
            stop_loss=request.stop_loss,
            take_profit=request.take_profit,
            created_at=created_at,
        )

        self.signal_log.append(signal)

        log_signal_received(
            self.logger,
            signal_id=signal.id,
            action=signal.action.value,
            symbol=signal.symbol,
            ticket=signal.ticket,
            producer_id=signal.producer_id,
        )

        return signal

    def pending_for(self, consumer_id: str) -> list[Signal]:
        """
        Signals the Slave has not acknowledged, in submission order.

        Raises:
            MissingFieldError: If consumer_id is missing or empty
        """
        pending = self.tracker.pending_for(consumer_id, self.signal_log.all_signals())

        logger.debug("Pending signals computed", consumer_id=consumer_id, count=len(pending))
        return pending

    def acknowledge(self, consumer_id: Optional[str], signal_id: Optional[str]) -> None:
        """
        Record that a Slave executed a signal.

        Re-sending an acknowledgment and acknowledging an id the log has
        never seen both succeed, so a Slave retrying after a network error
        never gets an error back.

        Args:
            consumer_id: Slave identifier from the URL
            signal_id: Id of the executed signal

        Raises:
            MissingFieldError: If consumer_id or signal_id is missing
        """
        consumer_id, signal_id = parse_acknowledgment(consumer_id, signal_id)

        newly_recorded = self.tracker.acknowledge(consumer_id, signal_id)

        log_signal_acknowledged(
            self.logger,
            consumer_id=consumer_id,
            signal_id=signal_id,
            newly_recorded=newly_recorded,
            known_signal=signal_id in self.signal_log,
        )

    def all_signals(self) -> tuple[Signal, ...]:
        """Full log in insertion order. Not exposed to Slaves."""
        return self.signal_log.all_signals()

    def get_stats(self) -> dict[str, Any]:
        """Get relay statistics."""
        return {
            "total_signals": len(self.signal_log),
            "consumers": self.tracker.consumer_count(),
        }


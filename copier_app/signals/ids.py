"""Signal id generation."""

import itertools
import threading
from datetime import datetime

from ..utils.time import to_epoch_ms
from .models import SignalAction


class SignalIdGenerator:
    """
    Builds ids of the form sig_{master}_{ticket}_{action}_{epoch_ms}_{seq}.

    The readable prefix lets operators match a signal to the Master order.
    The trailing sequence number keeps ids unique when the same order is
    submitted twice within one millisecond.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(
        self,
        producer_id: str,
        ticket: int,
        action: SignalAction,
        created_at: datetime
    ) -> str:
        with self._lock:
            seq = next(self._counter)
        return f"sig_{producer_id}_{ticket}_{action.value}_{to_epoch_ms(created_at)}_{seq}"

"""Signal data model and wire format."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from ..utils.time import format_timestamp


class SignalAction(Enum):
    """Trade instruction carried by a signal."""
    OPEN = "OPEN"
    CLOSE = "CLOSE"
    MODIFY = "MODIFY"

    @property
    def requires_symbol(self) -> bool:
        """A close is identified by ticket alone; open and modify need a symbol."""
        return self is not SignalAction.CLOSE

    @classmethod
    def values(cls) -> list[str]:
        return [action.value for action in cls]


@dataclass(frozen=True)
class Signal:
    """One trade instruction relayed from the Master to every Slave."""
    id: str
    producer_id: str
    ticket: int
    action: SignalAction
    symbol: Optional[str]
    side: str
    lot_size: float
    open_price: float
    stop_loss: float
    take_profit: float
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the field names the terminal EAs expect."""
        return {
            "id": self.id,
            "master_id": self.producer_id,
            "ticket": self.ticket,
            "symbol": self.symbol,
            "type": self.side,
            "lot": self.lot_size,
            "open_price": self.open_price,
            "sl": self.stop_loss,
            "tp": self.take_profit,
            "action": self.action.value,
            "created_at": format_timestamp(self.created_at),
        }

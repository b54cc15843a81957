"""
Validation and coercion of signal submissions.

Identity fields (master, ticket, action, and symbol for OPEN/MODIFY) are
strict: a missing or invalid value rejects the request. Trade parameters
are lenient: anything absent or unparsable falls back to a configured
default, so a sloppy EA never loses a signal over a malformed price.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..config.defaults import SignalParams
from ..errors import InvalidFieldError, MalformedRequestError, MissingFieldError
from ..signals.models import SignalAction

# wire name -> accepted aliases, first match wins
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "master_id": ("master_id", "producer_id"),
    "ticket": ("ticket",),
    "action": ("action",),
    "symbol": ("symbol",),
    "type": ("type", "side"),
    "lot": ("lot", "lot_size"),
    "open_price": ("open_price",),
    "sl": ("sl", "stop_loss"),
    "tp": ("tp", "take_profit"),
}


@dataclass(frozen=True)
class SignalRequest:
    """Validated submission, ready to be stamped with an id and time."""
    producer_id: str
    ticket: int
    action: SignalAction
    symbol: Optional[str]
    side: str
    lot_size: float
    open_price: float
    stop_loss: float
    take_profit: float


def _is_missing(value: Any) -> bool:
    """None, "", 0 and false count as absent; whitespace counts as present."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def _lookup(payload: Mapping[str, Any], name: str) -> Any:
    for key in FIELD_ALIASES[name]:
        value = payload.get(key)
        if value is not None and value != "":
            return value
    return None


def coerce_float(value: Any, default: float) -> float:
    """Parse a number, falling back to default when absent or unparsable."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    return number if math.isfinite(number) else default


def coerce_ticket(value: Any) -> int:
    """
    Parse the Master order ticket.

    Raises:
        InvalidFieldError: If the value is not an integer
    """
    if isinstance(value, bool):
        raise InvalidFieldError("ticket must be an integer", field="ticket", value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                number = math.nan
            if math.isfinite(number) and number.is_integer():
                return int(number)
    raise InvalidFieldError("ticket must be an integer", field="ticket", value=value)


def parse_signal_request(
    payload: Any,
    params: Optional[SignalParams] = None
) -> SignalRequest:
    """
    Validate a Master submission.

    Args:
        payload: Decoded JSON body
        params: Fallbacks for trade parameters

    Returns:
        Validated request

    Raises:
        MalformedRequestError: If the payload is not a JSON object
        MissingFieldError: If master_id, ticket or action is missing, or
            symbol is missing for OPEN/MODIFY
        InvalidFieldError: If action or ticket has an invalid value
    """
    if params is None:
        params = SignalParams()

    if not isinstance(payload, Mapping):
        raise MalformedRequestError(
            "Request body must be a JSON object",
            body_type=type(payload).__name__
        )

    master_id = _lookup(payload, "master_id")
    ticket = _lookup(payload, "ticket")
    action = _lookup(payload, "action")

    missing = [name for name, value in
               (("master_id", master_id), ("ticket", ticket), ("action", action))
               if _is_missing(value)]
    if missing:
        raise MissingFieldError(
            "Required fields: master_id, ticket, action",
            field=missing[0],
            context={"missing": missing}
        )

    if action not in SignalAction.values():
        raise InvalidFieldError(
            "action must be OPEN, CLOSE or MODIFY",
            field="action",
            value=action
        )
    signal_action = SignalAction(action)

    symbol = _lookup(payload, "symbol")
    if signal_action.requires_symbol and _is_missing(symbol):
        raise MissingFieldError(
            "symbol is required when action is OPEN or MODIFY",
            field="symbol",
            context={"action": signal_action.value}
        )

    side = _lookup(payload, "type")

    return SignalRequest(
        producer_id=str(master_id),
        ticket=coerce_ticket(ticket),
        action=signal_action,
        symbol=str(symbol) if symbol is not None else None,
        side=str(side) if not _is_missing(side) else params.default_side,
        lot_size=coerce_float(_lookup(payload, "lot"), params.default_lot),
        open_price=coerce_float(_lookup(payload, "open_price"), params.default_price),
        stop_loss=coerce_float(_lookup(payload, "sl"), params.default_price),
        take_profit=coerce_float(_lookup(payload, "tp"), params.default_price),
    )


def parse_acknowledgment(consumer_id: Any, signal_id: Any) -> tuple[str, str]:
    """
    Validate a Slave acknowledgment.

    Returns:
        (consumer_id, signal_id)

    Raises:
        MissingFieldError: If either id is missing
    """
    if _is_missing(consumer_id) or _is_missing(signal_id):
        raise MissingFieldError(
            "consumer_id and signal_id are required",
            field="consumer_id" if _is_missing(consumer_id) else "signal_id"
        )

    return str(consumer_id), str(signal_id)

"""Unit tests for signal submission validation."""

import pytest

from copier_app.config.defaults import SignalParams
from copier_app.errors import (
    InvalidFieldError,
    MalformedRequestError,
    MissingFieldError,
    ValidationError,
)
from copier_app.signals.models import SignalAction
from copier_app.validation.signal_request import (
    coerce_float,
    coerce_ticket,
    parse_acknowledgment,
    parse_signal_request,
)


class TestParseSignalRequest:
    """Test suite for parse_signal_request."""

    def test_full_open_request(self, open_payload):
        request = parse_signal_request(open_payload)

        assert request.producer_id == "M1"
        assert request.ticket == 100
        assert request.action is SignalAction.OPEN
        assert request.symbol == "EURUSD"
        assert request.side == "BUY"
        assert request.lot_size == 0.1
        assert request.open_price == 1.0845
        assert request.stop_loss == 1.08
        assert request.take_profit == 1.095

    @pytest.mark.parametrize("missing", ["master_id", "ticket", "action"])
    def test_required_fields(self, open_payload, missing):
        del open_payload[missing]

        with pytest.raises(MissingFieldError) as exc_info:
            parse_signal_request(open_payload)

        assert exc_info.value.field == missing
        assert "master_id, ticket, action" in str(exc_info.value)

    @pytest.mark.parametrize("blank", [None, "", 0, False])
    def test_blank_master_counts_as_missing(self, open_payload, blank):
        open_payload["master_id"] = blank

        with pytest.raises(MissingFieldError):
            parse_signal_request(open_payload)

    def test_zero_ticket_counts_as_missing(self, open_payload):
        open_payload["ticket"] = 0

        with pytest.raises(MissingFieldError) as exc_info:
            parse_signal_request(open_payload)

        assert exc_info.value.field == "ticket"

    def test_false_action_counts_as_missing(self, open_payload):
        open_payload["action"] = False

        with pytest.raises(MissingFieldError) as exc_info:
            parse_signal_request(open_payload)

        assert exc_info.value.field == "action"

    def test_whitespace_master_is_kept(self, open_payload):
        open_payload["master_id"] = "   "
        assert parse_signal_request(open_payload).producer_id == "   "

    def test_zero_lot_is_kept(self, open_payload):
        """Zero is a value for trade parameters, not an absence."""
        open_payload.update(lot=0, sl="0")

        request = parse_signal_request(open_payload)

        assert request.lot_size == 0.0
        assert request.stop_loss == 0.0

    def test_false_side_uses_default(self, open_payload):
        open_payload["type"] = False
        assert parse_signal_request(open_payload).side == "BUY"

    def test_oversized_lot_uses_default(self, open_payload):
        open_payload["lot"] = int("9" * 400)
        assert parse_signal_request(open_payload).lot_size == 0.01

    @pytest.mark.parametrize("action", ["open", "BUY", "DELETE", 1])
    def test_invalid_action(self, open_payload, action):
        open_payload["action"] = action

        with pytest.raises(InvalidFieldError) as exc_info:
            parse_signal_request(open_payload)

        assert exc_info.value.field == "action"
        assert exc_info.value.value == action

    @pytest.mark.parametrize("action", ["OPEN", "MODIFY"])
    @pytest.mark.parametrize("symbol", [None, "", False, 0])
    def test_symbol_required_for_open_and_modify(self, open_payload, action, symbol):
        open_payload["action"] = action
        open_payload["symbol"] = symbol

        with pytest.raises(MissingFieldError) as exc_info:
            parse_signal_request(open_payload)

        assert exc_info.value.field == "symbol"

    def test_close_without_symbol(self, close_payload):
        request = parse_signal_request(close_payload)

        assert request.action is SignalAction.CLOSE
        assert request.symbol is None

    def test_close_keeps_symbol_when_given(self, close_payload):
        close_payload["symbol"] = "EURUSD"
        assert parse_signal_request(close_payload).symbol == "EURUSD"

    def test_defaults_for_absent_trade_parameters(self, close_payload):
        request = parse_signal_request(close_payload)

        assert request.side == "BUY"
        assert request.lot_size == 0.01
        assert request.open_price == 0.0
        assert request.stop_loss == 0.0
        assert request.take_profit == 0.0

    def test_defaults_for_unparsable_trade_parameters(self, open_payload):
        """Garbage numbers fall back to defaults instead of rejecting."""
        open_payload.update(lot="abc", open_price="NaN", sl=True, tp={"x": 1})

        request = parse_signal_request(open_payload)

        assert request.lot_size == 0.01
        assert request.open_price == 0.0
        assert request.stop_loss == 0.0
        assert request.take_profit == 0.0

    def test_numeric_strings_parsed(self, open_payload):
        open_payload.update(ticket="555", lot="0.5", open_price=" 1.2 ")

        request = parse_signal_request(open_payload)

        assert request.ticket == 555
        assert request.lot_size == 0.5
        assert request.open_price == 1.2

    def test_configured_defaults(self, close_payload):
        params = SignalParams(default_side="SELL", default_lot=1.0, default_price=0.0)

        request = parse_signal_request(close_payload, params)

        assert request.side == "SELL"
        assert request.lot_size == 1.0

    def test_aliases_accepted(self):
        request = parse_signal_request({
            "producer_id": "M2",
            "ticket": 7,
            "action": "MODIFY",
            "symbol": "XAUUSD",
            "side": "SELL",
            "lot_size": 2,
            "stop_loss": 1900,
            "take_profit": 2100,
        })

        assert request.producer_id == "M2"
        assert request.side == "SELL"
        assert request.lot_size == 2.0
        assert request.stop_loss == 1900.0
        assert request.take_profit == 2100.0

    def test_wire_name_wins_over_alias(self, open_payload):
        open_payload["producer_id"] = "other"
        assert parse_signal_request(open_payload).producer_id == "M1"

    def test_master_id_stringified(self, open_payload):
        open_payload["master_id"] = 12345
        assert parse_signal_request(open_payload).producer_id == "12345"

    @pytest.mark.parametrize("payload", [[], "text", 42])
    def test_non_object_body(self, payload):
        with pytest.raises(MalformedRequestError):
            parse_signal_request(payload)

    def test_all_errors_are_validation_errors(self):
        with pytest.raises(ValidationError):
            parse_signal_request({})


class TestCoercion:
    """Test numeric coercion helpers."""

    @pytest.mark.parametrize("value,expected", [
        (100, 100),
        (100.0, 100),
        ("100", 100),
        (" 42 ", 42),
        ("7.0", 7),
        (-3, -3),
    ])
    def test_ticket_accepted(self, value, expected):
        assert coerce_ticket(value) == expected

    @pytest.mark.parametrize("value", ["abc", 1.5, "1.5", True, [1], "inf"])
    def test_ticket_rejected(self, value):
        with pytest.raises(InvalidFieldError) as exc_info:
            coerce_ticket(value)
        assert exc_info.value.field == "ticket"

    @pytest.mark.parametrize("value,expected", [
        (None, 9.0),
        (False, 9.0),
        ("", 9.0),
        ("x", 9.0),
        (float("inf"), 9.0),
        ("-inf", 9.0),
        (int("9" * 400), 9.0),
        (-int("9" * 400), 9.0),
        ("1e400", 9.0),
        (0, 0.0),
        (3, 3.0),
        ("2.5", 2.5),
    ])
    def test_coerce_float(self, value, expected):
        assert coerce_float(value, 9.0) == expected


class TestParseAcknowledgment:
    """Test acknowledgment validation."""

    def test_valid(self):
        assert parse_acknowledgment("slaveA", "sig-1") == ("slaveA", "sig-1")

    def test_whitespace_consumer_accepted(self):
        """Any consumer id that can poll can also acknowledge."""
        assert parse_acknowledgment(" ", "sig-1") == (" ", "sig-1")

    @pytest.mark.parametrize("consumer_id,signal_id,field", [
        (None, "sig-1", "consumer_id"),
        ("slaveA", None, "signal_id"),
        ("slaveA", "", "signal_id"),
        ("slaveA", 0, "signal_id"),
        ("", "", "consumer_id"),
    ])
    def test_missing(self, consumer_id, signal_id, field):
        with pytest.raises(MissingFieldError) as exc_info:
            parse_acknowledgment(consumer_id, signal_id)
        assert exc_info.value.field == field
        assert str(exc_info.value) == "consumer_id and signal_id are required"

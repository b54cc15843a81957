"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from copier_app.api.app import create_app
from copier_app.relay import SignalRelay


@pytest.fixture
def open_payload() -> Dict[str, Any]:
    """Master submission opening a EURUSD position."""
    return {
        "master_id": "M1",
        "ticket": 100,
        "action": "OPEN",
        "symbol": "EURUSD",
        "type": "BUY",
        "lot": 0.1,
        "open_price": 1.0845,
        "sl": 1.0800,
        "tp": 1.0950,
    }


@pytest.fixture
def close_payload() -> Dict[str, Any]:
    """Master submission closing ticket 100, without a symbol."""
    return {
        "master_id": "M1",
        "ticket": 100,
        "action": "CLOSE",
    }


@pytest.fixture
def relay() -> SignalRelay:
    """Fresh relay with default signal parameters."""
    return SignalRelay()


@pytest.fixture
def app(relay):
    """Flask app serving the relay fixture."""
    flask_app = create_app(relay)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()

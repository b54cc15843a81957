"""
Flask application exposing the relay over HTTP.

Every response is a JSON object. Relay responses carry a boolean
``success``; failures add an ``error`` message. Caller errors map to 400,
anything unexpected to 500, and the server keeps running either way.
"""

from typing import Any, Optional

import structlog
from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ..config.defaults import CopierConfig, get_default_config
from ..errors import InternalError, RequestError
from ..relay import SignalRelay
from ..utils.time import format_timestamp

logger = structlog.get_logger(__name__)

ENDPOINTS = {
    "signal": "POST /signal",
    "pending": "GET /signal/<consumer_id>",
    "executed": "POST /signal/<consumer_id>/executed",
    "health": "GET /health",
}

RELAY_EXTENSION = "signal_relay"


def _json_body() -> Any:
    """Decoded JSON body; a missing or undecodable body counts as {}."""
    body = request.get_json(silent=True)
    return {} if body is None else body


def _failure(message: str, status_code: int) -> tuple[Response, int]:
    return jsonify(success=False, error=message), status_code


def get_relay(app: Flask) -> SignalRelay:
    """Relay instance bound to an app by create_app."""
    return app.extensions[RELAY_EXTENSION]


def create_app(
    relay: Optional[SignalRelay] = None,
    config: Optional[CopierConfig] = None
) -> Flask:
    """
    Build the Flask application.

    Args:
        relay: Relay to serve; a fresh one is built when omitted
        config: Loaded configuration, defaults when omitted

    Returns:
        Configured Flask app
    """
    if config is None:
        config = get_default_config()
    if relay is None:
        relay = SignalRelay(signal_params=config.signals)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[RELAY_EXTENSION] = relay

    CORS(app, origins=config.cors.origins)

    @app.post("/signal")
    def submit_signal():
        signal = relay.submit(_json_body())
        return jsonify(success=True, signal_id=signal.id)

    @app.get("/signal/<consumer_id>")
    def pending_signals(consumer_id: str):
        pending = relay.pending_for(consumer_id)
        return jsonify(
            success=True,
            signals=[signal.to_dict() for signal in pending],
            count=len(pending),
        )

    @app.post("/signal/<consumer_id>/executed")
    def signal_executed(consumer_id: str):
        body = _json_body()
        signal_id = body.get("signal_id") if isinstance(body, dict) else None
        relay.acknowledge(consumer_id, signal_id)
        return jsonify(success=True)

    @app.get("/health")
    def health():
        return jsonify(status="ok", timestamp=format_timestamp())

    @app.errorhandler(RequestError)
    def handle_request_error(error: RequestError):
        logger.info(
            "Request rejected",
            method=request.method,
            path=request.path,
            error=error.message,
            field=getattr(error, "field", None),
        )
        return _failure(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return _failure(error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        internal = InternalError.wrap(error, operation=f"{request.method} {request.path}")
        logger.error(
            "Unhandled error while processing request",
            operation=internal.operation,
            error=internal.message,
            exc_info=internal.cause or internal,
        )
        return _failure(internal.message, internal.status_code)

    return app

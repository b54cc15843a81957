"""
Error handling tests for the signal relay.

Covers the error hierarchy and how the HTTP layer maps errors to
responses without taking the server down.
"""

import pytest

from copier_app.errors import (
    ConfigurationError,
    InternalError,
    InvalidFieldError,
    MalformedRequestError,
    MissingFieldError,
    RequestError,
    SystemFailureError,
    ValidationError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_request_error_hierarchy(self):
        base_error = RequestError("bad request")
        assert base_error.recoverable is True
        assert base_error.status_code == 400
        assert base_error.context == {}

        missing = MissingFieldError("ticket is required", field="ticket")
        assert isinstance(missing, ValidationError)
        assert missing.field == "ticket"
        assert missing.status_code == 400

        invalid = InvalidFieldError("bad action", field="action", value="HEDGE")
        assert isinstance(invalid, ValidationError)
        assert invalid.value == "HEDGE"

        malformed = MalformedRequestError("not an object", body_type="list")
        assert isinstance(malformed, ValidationError)
        assert malformed.body_type == "list"

    def test_system_failure_hierarchy(self):
        internal = InternalError("boom", operation="GET /signal/x")
        assert isinstance(internal, SystemFailureError)
        assert internal.recoverable is False
        assert internal.status_code == 500
        assert internal.operation == "GET /signal/x"

        config_error = ConfigurationError("bad config", issues=["x"])
        assert config_error.issues == ["x"]
        assert config_error.recoverable is False

    def test_internal_error_wrap(self):
        cause = KeyError("missing")
        wrapped = InternalError.wrap(cause, operation="POST /signal")

        assert wrapped.cause is cause
        assert wrapped.message == str(cause)
        assert InternalError.wrap(wrapped) is wrapped

    def test_wrap_uses_class_name_for_empty_message(self):
        assert InternalError.wrap(RuntimeError()).message == "RuntimeError"

    def test_context_carried(self):
        error = MissingFieldError("x", field="ticket", context={"missing": ["ticket"]})
        assert error.context == {"missing": ["ticket"]}


class TestHttpErrorMapping:
    """Test how the API reports failures."""

    def test_validation_error_is_400(self, client):
        response = client.post("/signal", json={"master_id": "M1"})

        assert response.status_code == 400
        assert response.get_json() == {
            "success": False,
            "error": "Required fields: master_id, ticket, action",
        }

    def test_unexpected_error_is_500_and_server_survives(self, client, relay, open_payload, monkeypatch):
        def explode(consumer_id):
            raise RuntimeError("tracker exploded")

        monkeypatch.setattr(relay, "pending_for", explode)

        response = client.get("/signal/slaveA")
        assert response.status_code == 500
        assert response.get_json() == {"success": False, "error": "tracker exploded"}

        # next request is served normally
        monkeypatch.undo()
        assert client.post("/signal", json=open_payload).status_code == 200
        assert client.get("/signal/slaveA").get_json()["count"] == 1

    def test_unknown_route_is_json_404(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.get_json() == {"success": False, "error": "Not Found"}

    def test_wrong_method_is_json_405(self, client):
        response = client.delete("/signal")
        assert response.status_code == 405
        assert response.get_json()["success"] is False

"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_server_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate listener parameters."""
        issues = []

        if "port" in params:
            value = params["port"]
            if not isinstance(value, int) or isinstance(value, bool) or not 1 <= value <= 65535:
                issues.append(ConfigIssue(
                    field="server.port",
                    message="Must be an integer between 1 and 65535",
                    value=value
                ))

        if "host" in params:
            value = params["host"]
            if not isinstance(value, str) or not value.strip():
                issues.append(ConfigIssue(
                    field="server.host",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "debug" in params and not isinstance(params["debug"], bool):
            issues.append(ConfigIssue(
                field="server.debug",
                message="Must be a boolean",
                value=params["debug"]
            ))

        return issues

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate logging parameters."""
        issues = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                issues.append(ConfigIssue(
                    field="logging.level",
                    message=f"Must be one of {sorted(LOG_LEVELS)}",
                    value=value
                ))

        for key in ("format_json", "include_caller"):
            if key in params and not isinstance(params[key], bool):
                issues.append(ConfigIssue(
                    field=f"logging.{key}",
                    message="Must be a boolean",
                    value=params[key]
                ))

        return issues

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate trade parameter fallbacks."""
        issues = []

        if "default_side" in params:
            value = params["default_side"]
            if not isinstance(value, str) or not value.strip():
                issues.append(ConfigIssue(
                    field="signals.default_side",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "default_lot" in params:
            value = params["default_lot"]
            if not _is_number(value) or value <= 0:
                issues.append(ConfigIssue(
                    field="signals.default_lot",
                    message="Must be a positive number",
                    value=value
                ))

        if "default_price" in params:
            value = params["default_price"]
            if not _is_number(value) or value < 0:
                issues.append(ConfigIssue(
                    field="signals.default_price",
                    message="Must be a non-negative number",
                    value=value
                ))

        return issues

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        issues = []

        for section in ("server", "logging", "signals", "cors"):
            if section in config and not isinstance(config[section], dict):
                issues.append(ConfigIssue(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
                return issues

        if "server" in config:
            issues.extend(ConfigValidator.validate_server_params(config["server"]))

        if "logging" in config:
            issues.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "signals" in config:
            issues.extend(ConfigValidator.validate_signal_params(config["signals"]))

        if "cors" in config:
            origins = config["cors"].get("origins")
            if origins is not None and not isinstance(origins, (str, list)):
                issues.append(ConfigIssue(
                    field="cors.origins",
                    message="Must be a string or a list of strings",
                    value=origins
                ))

        return issues

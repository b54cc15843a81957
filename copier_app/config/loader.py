"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CopierConfig,
    CorsParams,
    DefaultConfig,
    LoggingParams,
    ServerParams,
    SignalParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "copier.yaml"

# environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "HOST": ("server", "host"),
    "PORT": ("server", "port"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FORMAT_JSON": ("logging", "format_json"),
    "CORS_ORIGINS": ("cors", "origins"),
}

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig
    config_file: Optional[Path] = None

    @classmethod
    def create(
        cls,
        config_dir: Optional[Path] = None,
        config_file: Optional[Path] = None
    ) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
            config_file=Path(config_file) if config_file is not None else None,
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML config file, if there is one."""
        path = self.config_file or (self.config_dir / CONFIG_FILENAME)

        if not path.exists():
            if self.config_file is not None:
                raise ConfigurationError(f"Config file not found: {path}")
            return {}

        with open(path) as f:
            file_config = yaml.safe_load(f) or {}

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        return file_config

    def load_env_config(self, environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
        """Collect overrides from environment variables."""
        if environ is None:
            environ = os.environ

        config: dict[str, Any] = {}
        for var, (section, key) in ENV_OVERRIDES.items():
            raw = environ.get(var)
            if raw is None or raw == "":
                continue
            if var == "CORS_ORIGINS" and "," in raw:
                config.setdefault(section, {})[key] = [o.strip() for o in raw.split(",") if o.strip()]
            else:
                config.setdefault(section, {})[key] = raw

        return config

    def merge_config(
        self,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides and environment variables (highest priority)
        2. YAML config file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())
        config = self._deep_merge(config, self.load_env_config(environ))

        if overrides:
            config = self._deep_merge(config, overrides)

        return self._coerce_types(config)

    def load(
        self,
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> CopierConfig:
        """
        Load, validate and freeze the configuration.

        Raises:
            ConfigurationError: If any value fails validation
        """
        config = self.merge_config(overrides, environ)

        issues = ConfigValidator.validate_config(config)
        if issues:
            summary = "; ".join(f"{issue.field}: {issue.message}" for issue in issues)
            raise ConfigurationError(f"Invalid configuration: {summary}", issues=issues)

        return CopierConfig(
            server=self._build(ServerParams, config.get("server", {})),
            logging=self._build(LoggingParams, config.get("logging", {})),
            signals=self._build(SignalParams, config.get("signals", {})),
            cors=self._build(CorsParams, config.get("cors", {})),
        )

    def _build(self, params_cls: type, section: dict[str, Any]) -> Any:
        """Instantiate a params dataclass, ignoring unknown keys."""
        known = {f.name for f in fields(params_cls)}
        return params_cls(**{k: v for k, v in section.items() if k in known})

    def _coerce_types(self, config: dict[str, Any]) -> dict[str, Any]:
        """Convert string values (env vars, quoted YAML) to the default's type."""
        defaults = self._dataclass_to_dict(self.defaults)
        result: dict[str, Any] = {}

        for section, values in config.items():
            if not isinstance(values, dict) or section not in defaults:
                result[section] = values
                continue

            coerced = {}
            for key, value in values.items():
                default = defaults[section].get(key)
                coerced[key] = self._coerce_value(value, default)
            result[section] = coerced

        return result

    def _coerce_value(self, value: Any, default: Any) -> Any:
        """Coerce one value, leaving it untouched when conversion fails."""
        if not isinstance(value, str) or isinstance(default, str) or default is None:
            return value

        text = value.strip()
        if isinstance(default, bool):
            if text.lower() in _TRUE_STRINGS:
                return True
            if text.lower() in _FALSE_STRINGS:
                return False
            return value
        try:
            if isinstance(default, int):
                return int(text)
            if isinstance(default, float):
                return float(text)
        except ValueError:
            return value
        return value

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

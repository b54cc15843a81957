"""Default configuration parameters for the signal relay."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ServerParams:
    """HTTP listener parameters."""
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False


@dataclass(frozen=True)
class LoggingParams:
    """Structured logging parameters."""
    level: str = "INFO"
    format_json: bool = True                         # One JSON object per line
    include_caller: bool = False


@dataclass(frozen=True)
class SignalParams:
    """Fallbacks for trade parameters that are absent or unparsable."""
    default_side: str = "BUY"
    default_lot: float = 0.01
    default_price: float = 0.0                       # open_price, sl and tp


@dataclass(frozen=True)
class CorsParams:
    """Cross-origin access for browser dashboards."""
    origins: Union[str, list[str]] = "*"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    server: ServerParams = field(default_factory=ServerParams)
    logging: LoggingParams = field(default_factory=LoggingParams)
    signals: SignalParams = field(default_factory=SignalParams)
    cors: CorsParams = field(default_factory=CorsParams)


# Loaded configuration has the same shape as the defaults
CopierConfig = DefaultConfig


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig()

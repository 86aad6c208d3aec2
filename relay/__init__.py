"""Slack <-> IRC relay package."""

from relay.config import RelayConfig, load_configs
from relay.domain.errors import ConfigurationError
from relay.domain.relay import RelayController

__all__ = [
    "ConfigurationError",
    "RelayConfig",
    "RelayController",
    "load_configs",
]

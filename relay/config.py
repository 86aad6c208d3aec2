"""Configuration loading and validation."""

__version__ = "0.1.0"

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from relay.domain.errors import ConfigurationError

load_dotenv()

REQUIRED_FIELDS = ("server", "nickname", "channel_mapping", "token", "app_token")
DEFAULT_AVATAR_URL = "http://api.adorable.io/avatars/48/{author}.png"
DEFAULT_RELAY_COMMAND_PREFIX = "%"

# JSON config file key -> RelayConfig field
_FILE_KEYS = {
    "server": "server",
    "nickname": "nickname",
    "token": "token",
    "appToken": "app_token",
    "channelMapping": "channel_mapping",
    "ircOptions": "irc_options",
    "commandCharacters": "command_characters",
    "relayCommandPrefix": "relay_command_prefix",
    "autoSendCommands": "auto_send_commands",
    "avatarUrl": "avatar_url",
    "emojis": "emojis",
}


@dataclass
class RelayConfig:
    """One Slack workspace <-> IRC server relay."""

    server: str = ""
    nickname: str = ""
    token: str = ""  # Slack bot token (xoxb-)
    app_token: str = ""  # Slack Socket Mode token (xapp-)
    channel_mapping: Dict[str, str] = field(default_factory=dict)
    irc_options: Dict[str, Any] = field(default_factory=dict)
    command_characters: List[str] = field(default_factory=list)
    relay_command_prefix: str = DEFAULT_RELAY_COMMAND_PREFIX
    auto_send_commands: List[List[str]] = field(default_factory=list)
    avatar_url: str = DEFAULT_AVATAR_URL
    emojis: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> "RelayConfig":
        """Raise ConfigurationError unless the relay can start with this config."""
        for name in REQUIRED_FIELDS:
            if not getattr(self, name):
                raise ConfigurationError(f"Missing configuration field {name}")
        if not isinstance(self.channel_mapping, dict):
            raise ConfigurationError("Invalid channel mapping given")
        for command in self.auto_send_commands:
            if not isinstance(command, list) or not command:
                raise ConfigurationError(f"Invalid auto-send command: {command!r}")
        return self

    @property
    def irc_channels(self) -> List[str]:
        """IRC channels to join, keys included ("#chan secret")."""
        return list(self.channel_mapping.values())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RelayConfig":
        """Create a RelayConfig from one JSON config object (camelCase keys)."""
        if not isinstance(data, dict):
            raise ConfigurationError("Relay configuration must be a JSON object")
        kwargs = {attr: data[key] for key, attr in _FILE_KEYS.items() if key in data}
        return cls(**kwargs)

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Create a RelayConfig from RELAY_* environment variables."""
        return cls(
            server=os.getenv("RELAY_SERVER", ""),
            nickname=os.getenv("RELAY_NICKNAME", ""),
            token=os.getenv("RELAY_SLACK_TOKEN", ""),
            app_token=os.getenv("RELAY_SLACK_APP_TOKEN", ""),
            channel_mapping=_json_env("RELAY_CHANNEL_MAPPING", {}),
            irc_options=_json_env("RELAY_IRC_OPTIONS", {}),
            command_characters=_json_env("RELAY_COMMAND_CHARACTERS", []),
            relay_command_prefix=os.getenv("RELAY_COMMAND_PREFIX", DEFAULT_RELAY_COMMAND_PREFIX),
            auto_send_commands=_json_env("RELAY_AUTO_SEND_COMMANDS", []),
            avatar_url=os.getenv("RELAY_AVATAR_URL", DEFAULT_AVATAR_URL),
        )


def _json_env(name: str, default: Any) -> Any:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{name} is not valid JSON: {e}") from e


def load_configs(path: Optional[str] = None) -> List[RelayConfig]:
    """Load and validate relay configs.

    A JSON file may hold one config object or a list of them. Without a
    file (argument or RELAY_CONFIG_FILE), a single config is read from the
    environment.
    """
    path = path or os.getenv("RELAY_CONFIG_FILE", "")
    if not path:
        return [RelayConfig.from_env().validate()]

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file {path} is not valid JSON: {e}") from e

    entries = raw if isinstance(raw, list) else [raw]
    if not entries:
        raise ConfigurationError(f"Config file {path} has no relays")
    return [RelayConfig.from_dict(entry).validate() for entry in entries]

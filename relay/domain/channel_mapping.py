"""Slack <-> IRC channel mapping table.

Pure Python, no framework dependencies.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from relay.domain.errors import ConfigurationError


class ChannelMapping:
    """Bidirectional lookup between Slack channel names and IRC channel names.

    Slack names are matched exactly. IRC names are stored lowercased, and any
    channel key that followed the name in the raw config ("#chan secret") is
    dropped while parsing.
    """

    def __init__(self, forward: Dict[str, str]):
        self._forward = MappingProxyType(dict(forward))
        self._inverse = MappingProxyType({irc: slack for slack, irc in forward.items()})

    @classmethod
    def build(cls, raw_mapping: Mapping[str, str]) -> "ChannelMapping":
        """Parse the configured mapping, raising ConfigurationError if invalid."""
        if not isinstance(raw_mapping, Mapping):
            raise ConfigurationError("Invalid channel mapping given")
        if not raw_mapping:
            raise ConfigurationError("Channel mapping is empty")

        forward: Dict[str, str] = {}
        seen: Dict[str, str] = {}
        for slack_channel, raw_irc in raw_mapping.items():
            if not isinstance(slack_channel, str) or not slack_channel.strip():
                raise ConfigurationError("Channel mapping has an empty Slack channel")
            tokens = raw_irc.split() if isinstance(raw_irc, str) else []
            if not tokens:
                raise ConfigurationError(
                    f"Channel mapping for {slack_channel} has an empty IRC channel"
                )
            irc_channel = tokens[0].lower()
            if irc_channel in seen:
                raise ConfigurationError(
                    f"IRC channel {irc_channel} is mapped from both "
                    f"{seen[irc_channel]} and {slack_channel}"
                )
            seen[irc_channel] = slack_channel
            forward[slack_channel] = irc_channel
        return cls(forward)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def inverse(self) -> Mapping[str, str]:
        return self._inverse

    @property
    def irc_channels(self) -> List[str]:
        return list(self._forward.values())

    def resolve_to_b(self, slack_channel: str) -> Optional[str]:
        """IRC channel for a Slack channel name, or None."""
        return self._forward.get(slack_channel)

    def resolve_to_a(self, irc_channel: str) -> Optional[str]:
        """Slack channel for an IRC channel name (any case), or None."""
        return self._inverse.get(irc_channel.lower())

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"ChannelMapping({dict(self._forward)!r})"

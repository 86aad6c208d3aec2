"""Domain layer — pure Python, no framework dependencies."""

from relay.domain.errors import ConfigurationError
from relay.domain.channel_mapping import ChannelMapping
from relay.domain.roster import PendingRosterRequests
from relay.domain.models import OutboundSlackMessage, TranslatedMessage

__all__ = [
    "ChannelMapping",
    "ConfigurationError",
    "OutboundSlackMessage",
    "PendingRosterRequests",
    "TranslatedMessage",
]

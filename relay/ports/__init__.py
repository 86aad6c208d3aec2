"""Port interfaces (Hexagonal Architecture)."""

from relay.ports.inbound import (
    ErrorEvent,
    IrcInvite,
    IrcJoin,
    IrcMessage,
    IrcNames,
    Lifecycle,
    SlackMessage,
)
from relay.ports.outbound import EntityResolver, IrcPort, SlackPort

__all__ = [
    "EntityResolver",
    "ErrorEvent",
    "IrcInvite",
    "IrcJoin",
    "IrcMessage",
    "IrcNames",
    "IrcPort",
    "Lifecycle",
    "SlackMessage",
    "SlackPort",
]

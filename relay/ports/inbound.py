"""Inbound port — events delivered to the relay by the network adapters."""

from dataclasses import dataclass, field
from typing import List, Optional

SLACK = "slack"
IRC = "irc"


@dataclass
class SlackMessage:
    """A Slack `message` event, with the channel name already resolved.

    channel_name is "#name" for public channels and the bare name for
    private ones; None when the bot is not a member of the channel.
    """

    channel_id: str
    channel_name: Optional[str]
    user_id: str
    text: str
    subtype: Optional[str] = None


@dataclass
class IrcMessage:
    """PRIVMSG, NOTICE or CTCP ACTION seen in an IRC channel."""

    kind: str  # "message", "notice" or "action"
    author: str
    channel: str
    text: str


@dataclass
class IrcJoin:
    channel: str
    nick: str


@dataclass
class IrcInvite:
    channel: str
    inviter: str


@dataclass
class IrcNames:
    """End of a NAMES reply for a channel."""

    channel: str
    nicks: List[str] = field(default_factory=list)


@dataclass
class Lifecycle:
    """Connection state change, e.g. Slack "open" or IRC "registered"."""

    network: str
    state: str
    detail: str = ""


@dataclass
class ErrorEvent:
    network: str
    error: object

"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TranslatedMessage:
    """Slack message rendered for an IRC channel."""

    channel: str
    text: str
    prelude: Optional[str] = None  # sent as its own line before text


@dataclass
class OutboundSlackMessage:
    """IRC line rendered for a Slack channel."""

    text: str
    username: str
    icon_url: str
    parse: str = "full"

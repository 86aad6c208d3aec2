"""Outbound ports — interfaces the relay core sends through."""

from typing import Optional, Protocol, runtime_checkable

from relay.domain.models import OutboundSlackMessage


@runtime_checkable
class EntityResolver(Protocol):
    """Turns Slack channel/user IDs into names. Returns None when unknown."""

    def channel_name(self, channel_id: str) -> Optional[str]: ...
    def user_name(self, user_id: str) -> Optional[str]: ...


@runtime_checkable
class SlackPort(Protocol):
    """Fire-and-forget posting to a Slack channel, addressed by name."""

    def post_message(self, channel_name: str, message: OutboundSlackMessage) -> None: ...


@runtime_checkable
class IrcPort(Protocol):
    """Fire-and-forget IRC primitives."""

    def say(self, channel: str, text: str) -> None: ...
    def send(self, command: str, *args: str) -> None: ...
    def join(self, channel: str) -> None: ...

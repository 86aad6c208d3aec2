"""RelayController — Slack <-> IRC event routing, no framework dependencies.

Owns the channel mapping and the pending NAMES counter, and turns each
inbound event into at most one outbound send. Adapters call dispatch() once
per event from the event loop, so no locking is needed.
"""

import sys
from typing import Callable, Dict, Mapping, Optional

from relay.config import RelayConfig
from relay.domain.channel_mapping import ChannelMapping
from relay.domain.emoji import EMOJI
from relay.domain.models import OutboundSlackMessage, TranslatedMessage
from relay.domain.roster import PendingRosterRequests
from relay.domain.text_pipeline import (
    format_action,
    format_action_line,
    format_chat_line,
    format_command_prelude,
    format_join,
    format_notice,
    format_roster,
    render_for_network_b,
)
from relay.ports.inbound import (
    IRC,
    ErrorEvent,
    IrcInvite,
    IrcJoin,
    IrcMessage,
    IrcNames,
    Lifecycle,
    SlackMessage,
)
from relay.ports.outbound import EntityResolver, IrcPort, SlackPort

ALLOWED_SUBTYPES = ("me_message",)
NAMES_COMMAND = "names"


def _log(msg: str):
    print(msg, file=sys.stderr)


class RelayController:
    """Pure relay logic — testable with mock ports.

    Handles:
    - Slack messages -> IRC lines (markup rendering, sender prefixes)
    - Relay commands typed in Slack (%names, raw IRC commands)
    - IRC messages/notices/actions/joins -> Slack posts
    - IRC invites to configured channels
    - NAMES replies, forwarded only when a Slack user asked for them
    """

    def __init__(
        self,
        config: RelayConfig,
        slack: SlackPort,
        irc: IrcPort,
        resolver: EntityResolver,
        emojis: Optional[Mapping[str, str]] = None,
    ):
        self.nickname = config.nickname
        self._mapping = ChannelMapping.build(config.channel_mapping)
        self._command_characters = list(config.command_characters)
        self._relay_command_prefix = config.relay_command_prefix
        self._auto_send_commands = [list(c) for c in config.auto_send_commands]
        self._avatar_url = config.avatar_url
        self._emojis: Dict[str, str] = dict(EMOJI)
        self._emojis.update(config.emojis)
        if emojis is not None:
            self._emojis.update(emojis)
        self._slack = slack
        self._irc = irc
        self._resolver = resolver
        self._roster = PendingRosterRequests()
        self._stopped = False
        self._handlers: Dict[type, Callable] = {
            SlackMessage: self.handle_slack_message,
            IrcMessage: self.handle_irc_message,
            IrcJoin: self.handle_irc_join,
            IrcInvite: self.handle_irc_invite,
            IrcNames: self.handle_irc_names,
            Lifecycle: self.handle_lifecycle,
            ErrorEvent: self.handle_error,
        }

    # -- Public properties --

    @property
    def mapping(self) -> ChannelMapping:
        return self._mapping

    @property
    def pending_roster_requests(self) -> int:
        return self._roster.count

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self):
        """Stop handling events. In-memory state is discarded with the controller."""
        self._stopped = True
        _log(f"[relay] {self.nickname} stopped")

    def dispatch(self, event) -> None:
        """Handle one inbound event to completion."""
        if self._stopped:
            return
        handler = self._handlers.get(type(event))
        if handler is None:
            _log(f"[relay] unknown event type: {type(event).__name__}")
            return
        handler(event)

    # -- Slack -> IRC --

    def is_command_message(self, text: str) -> bool:
        """True when text is an instruction for the IRC side (e.g. "!seen bob")."""
        return bool(text) and text[0] in self._command_characters

    def is_relay_command(self, text: str) -> bool:
        return bool(self._relay_command_prefix) and text.startswith(self._relay_command_prefix)

    def handle_slack_message(self, message: SlackMessage):
        # Ignore bot messages, edits and people leaving/joining
        if message.subtype and message.subtype not in ALLOWED_SUBTYPES:
            return
        text = message.text or ""

        if message.channel_name is None:
            _log(f"[relay] Received message from a channel the bot isn't in: {message.channel_id}")
            return

        if self.is_relay_command(text):
            self._handle_relay_command(message, text[len(self._relay_command_prefix):])
            return

        translated = self.translate_slack_message(message)
        if translated is None:
            _log(f"[relay] No IRC channel mapped for {message.channel_name}, dropping message")
            return

        if translated.prelude:
            self._irc.say(translated.channel, translated.prelude)
        self._irc.say(translated.channel, translated.text)

    def translate_slack_message(self, message: SlackMessage) -> Optional[TranslatedMessage]:
        """Render a Slack message for its mapped IRC channel, or None if unmapped."""
        irc_channel = self._mapping.resolve_to_b(message.channel_name)
        if not irc_channel:
            return None

        user = self._user_display_name(message.user_id)
        text = render_for_network_b(message.text or "", self._resolver, self._emojis)

        if self.is_command_message(text):
            return TranslatedMessage(irc_channel, text, prelude=format_command_prelude(user))
        if not message.subtype:
            return TranslatedMessage(irc_channel, format_chat_line(user, text))
        return TranslatedMessage(irc_channel, format_action_line(user, text))

    def _handle_relay_command(self, message: SlackMessage, command: str):
        irc_channel = self._mapping.resolve_to_b(message.channel_name)
        if not irc_channel:
            _log(f"[relay] No IRC channel mapped for {message.channel_name}, dropping command")
            return

        if command.strip().lower() == NAMES_COMMAND:
            self._roster.record_request()
            self._irc.send("NAMES", irc_channel)
            return

        text = render_for_network_b(command.strip(), self._resolver, self._emojis)
        if not text:
            _log(f"[relay] Empty relay command from {message.channel_name}, dropping")
            return
        self._irc.send(text, irc_channel)

    def _user_display_name(self, user_id: str) -> str:
        try:
            name = self._resolver.user_name(user_id)
        except LookupError:
            name = None
        return name or user_id

    # -- IRC -> Slack --

    def handle_irc_message(self, event: IrcMessage):
        if event.kind == "notice":
            text = format_notice(event.text)
        elif event.kind == "action":
            text = format_action(event.text)
        else:
            text = event.text
        self.send_to_slack(event.author, event.channel, text)

    def handle_irc_join(self, event: IrcJoin):
        self.send_to_slack(self.nickname, event.channel, format_join(event.nick, event.channel))

    def handle_irc_invite(self, event: IrcInvite):
        _log(f"[relay] Received invite to {event.channel} from {event.inviter}")
        if self._mapping.resolve_to_a(event.channel) is None:
            _log(f"[relay] Channel not found in config, not joining: {event.channel}")
            return
        _log(f"[relay] Joining channel: {event.channel}")
        self._irc.join(event.channel)

    def handle_irc_names(self, event: IrcNames):
        # Unsolicited replies (e.g. on channel join) are not forwarded
        if not self._roster.consume():
            return
        self.send_to_slack(self.nickname, event.channel, format_roster(event.nicks))

    def send_to_slack(self, author: str, irc_channel: str, text: str) -> bool:
        """Post text to the Slack channel mapped to irc_channel, as author."""
        slack_channel = self._mapping.resolve_to_a(irc_channel)
        if not slack_channel:
            _log(f"[relay] No Slack channel mapped for {irc_channel}, dropping message")
            return False
        message = OutboundSlackMessage(
            text=text,
            username=author,
            icon_url=self._avatar_url.format(author=author),
        )
        self._slack.post_message(slack_channel, message)
        return True

    # -- Lifecycle --

    def handle_lifecycle(self, event: Lifecycle):
        detail = f": {event.detail}" if event.detail else ""
        _log(f"[relay] {event.network} {event.state}{detail}")
        if event.network == IRC and event.state == "registered":
            for command in self._auto_send_commands:
                self._irc.send(*command)

    def handle_error(self, event: ErrorEvent):
        _log(f"[relay] Received error event from {event.network}: {event.error}")

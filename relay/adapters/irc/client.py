"""IRC adapter — pydle client feeding the relay, plus its IrcPort wrapper."""

import asyncio
import sys
from typing import Callable, List, Set

import pydle

from relay.ports.inbound import (
    IRC,
    ErrorEvent,
    IrcInvite,
    IrcJoin,
    IrcMessage,
    IrcNames,
    Lifecycle,
)


def _log(msg: str):
    print(msg, file=sys.stderr)


def split_channel_key(raw: str):
    """"#chan secret" -> ("#chan", "secret"); key is None when absent."""
    parts = raw.split()
    return parts[0], (parts[1] if len(parts) > 1 else None)


class IrcPortAdapter:
    """IrcPort implementation using a pydle client. Sends are fire-and-forget."""

    def __init__(self, client: pydle.Client):
        self._client = client
        self._tasks: Set[asyncio.Task] = set()

    def say(self, channel: str, text: str) -> None:
        self._spawn(self._client.message(channel, text))

    def send(self, command: str, *args: str) -> None:
        self._spawn(self._client.rawmsg(command, *args))

    def join(self, channel: str) -> None:
        self._spawn(self._client.join(channel))

    def _spawn(self, coro):
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if not task.cancelled() and task.exception():
            _log(f"[irc] send failed: {task.exception()}")


class IrcRelayClient(pydle.Client):
    """Pydle client that converts IRC callbacks into relay events."""

    def __init__(self, nickname: str, channels: List[str], dispatch: Callable, **kwargs):
        super().__init__(nickname, **kwargs)
        self._channels = list(channels)
        self._dispatch = dispatch

    async def on_connect(self):
        """Registered with the server: join configured channels."""
        await super().on_connect()
        self._dispatch(Lifecycle(IRC, "registered", self.nickname))
        for raw in self._channels:
            channel, key = split_channel_key(raw)
            await self.join(channel, key)

    async def on_disconnect(self, expected: bool):
        await super().on_disconnect(expected)
        if expected:
            self._dispatch(Lifecycle(IRC, "disconnected"))
        else:
            self._dispatch(ErrorEvent(IRC, "connection lost"))

    async def on_channel_message(self, target, by, message):
        await super().on_channel_message(target, by, message)
        self._dispatch(IrcMessage("message", by, target, message))

    async def on_channel_notice(self, target, by, message):
        await super().on_channel_notice(target, by, message)
        self._dispatch(IrcMessage("notice", by, target, message))

    async def on_ctcp_action(self, by, target, contents):
        if self.is_channel(target):
            self._dispatch(IrcMessage("action", by, target, contents))

    async def on_join(self, channel, user):
        await super().on_join(channel, user)
        self._dispatch(IrcJoin(channel, user))

    async def on_invite(self, channel, by):
        await super().on_invite(channel, by)
        self._dispatch(IrcInvite(channel, by))

    async def on_raw_366(self, message):
        """RPL_ENDOFNAMES: pydle has collected the 353 replies by now."""
        channel = message.params[1]
        users = self.channels.get(channel, {}).get("users", set())
        self._dispatch(IrcNames(channel, sorted(users, key=str.lower)))

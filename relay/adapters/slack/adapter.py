"""Slack adapter — Socket Mode events in, Web API posts out.

SlackAdapter keeps a cache of the workspace's channels and users so the
relay core can resolve IDs synchronously (EntityResolver) and post to
channels by name (SlackPort).
"""

import asyncio
import json
import sys
from typing import Any, Callable, Dict, Optional, Set

import aiohttp

from relay.adapters.slack.web_api import SlackApiError, SlackWebClient
from relay.domain.models import OutboundSlackMessage
from relay.ports.inbound import SLACK, ErrorEvent, Lifecycle, SlackMessage

RECONNECT_DELAY_SECONDS = 5


def _log(msg: str):
    print(msg, file=sys.stderr)


class SlackAdapter:
    """EntityResolver + SlackPort implementation over the Slack APIs."""

    def __init__(
        self,
        token: str,
        app_token: str,
        web: Optional[SlackWebClient] = None,
        app_web: Optional[SlackWebClient] = None,
        reconnect_delay: float = RECONNECT_DELAY_SECONDS,
    ):
        self._web = web or SlackWebClient(token)
        self._app_web = app_web or SlackWebClient(app_token)
        # channel_id -> {"name", "is_private", "is_member"}
        self._channels: Dict[str, Dict[str, Any]] = {}
        # user_id -> name
        self._users: Dict[str, str] = {}
        self._tasks: Set[asyncio.Task] = set()
        self._bot_user_id: Optional[str] = None
        self._reconnect_delay = reconnect_delay
        self._running = False

    # -- Directory cache --

    def remember_channel(self, channel: Dict[str, Any]):
        self._channels[channel["id"]] = {
            "name": channel.get("name", ""),
            "is_private": bool(channel.get("is_private") or channel.get("is_group")),
            "is_member": bool(channel.get("is_member")),
        }

    def remember_user(self, user: Dict[str, Any]):
        self._users[user["id"]] = user.get("name", "")

    async def load_directory(self):
        """Fetch all channels and users visible to the bot."""
        async for channel in self._web.paginate(
            "conversations.list", "channels",
            types="public_channel,private_channel", exclude_archived="true", limit=200,
        ):
            self.remember_channel(channel)
        async for user in self._web.paginate("users.list", "members", limit=200):
            self.remember_user(user)
        _log(f"[slack] directory loaded: {len(self._channels)} channels, {len(self._users)} users")

    def channel_name(self, channel_id: str) -> Optional[str]:
        channel = self._channels.get(channel_id)
        return channel["name"] if channel else None

    def user_name(self, user_id: str) -> Optional[str]:
        return self._users.get(user_id) or None

    def routing_name(self, channel_id: str) -> Optional[str]:
        """Mapping key for a channel the bot is in: "#name" public, "name" private."""
        channel = self._channels.get(channel_id)
        if not channel or not channel["is_member"]:
            return None
        return channel["name"] if channel["is_private"] else f"#{channel['name']}"

    def channel_id_for(self, routing_name: str) -> Optional[str]:
        for channel_id in self._channels:
            if self.routing_name(channel_id) == routing_name:
                return channel_id
        return None

    # -- SlackPort --

    def post_message(self, channel_name: str, message: OutboundSlackMessage) -> None:
        channel_id = self.channel_id_for(channel_name)
        if not channel_id:
            _log(f"[slack] Tried to send a message to a channel the bot isn't in: {channel_name}")
            return
        self._spawn(self._web.call(
            "chat.postMessage",
            channel=channel_id,
            text=message.text,
            username=message.username,
            icon_url=message.icon_url,
            parse=message.parse,
        ))

    def _spawn(self, coro):
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if not task.cancelled() and task.exception():
            _log(f"[slack] send failed: {task.exception()}")

    # -- Socket Mode --

    def handle_envelope(self, envelope: Dict[str, Any], dispatch: Callable) -> None:
        """Convert one Socket Mode envelope into relay events."""
        kind = envelope.get("type")
        if kind == "hello":
            dispatch(Lifecycle(SLACK, "open"))
        elif kind == "disconnect":
            dispatch(Lifecycle(SLACK, "disconnect", envelope.get("reason", "")))
        elif kind == "events_api":
            event = envelope.get("payload", {}).get("event", {})
            self.handle_event(event, dispatch)

    def handle_event(self, event: Dict[str, Any], dispatch: Callable) -> None:
        kind = event.get("type")
        if kind == "message":
            channel_id = event.get("channel", "")
            dispatch(SlackMessage(
                channel_id=channel_id,
                channel_name=self.routing_name(channel_id),
                user_id=event.get("user", ""),
                text=event.get("text", ""),
                subtype=event.get("subtype"),
            ))
        elif kind in ("channel_created", "channel_rename", "group_rename"):
            channel = dict(event.get("channel", {}))
            known = self._channels.get(channel.get("id"), {})
            channel.setdefault("is_member", known.get("is_member", False))
            channel.setdefault("is_private", known.get("is_private", kind == "group_rename"))
            self.remember_channel(channel)
        elif kind == "member_joined_channel":
            if event.get("channel") in self._channels and event.get("user") == self._bot_user_id:
                self._channels[event["channel"]]["is_member"] = True
        elif kind in ("team_join", "user_change"):
            self.remember_user(event.get("user", {}))

    async def run(self, dispatch: Callable):
        """Listen for events until stop(), reconnecting when Slack asks to."""
        self._running = True
        try:
            identity = await self._web.call("auth.test")
            self._bot_user_id = identity.get("user_id")
            await self.load_directory()
        except (SlackApiError, aiohttp.ClientError) as e:
            dispatch(ErrorEvent(SLACK, e))
            raise

        while self._running:
            try:
                url = await self._app_web.open_socket()
                await self._listen(url, dispatch)
            except (SlackApiError, aiohttp.ClientError) as e:
                dispatch(ErrorEvent(SLACK, e))
            if self._running:
                await asyncio.sleep(self._reconnect_delay)

    async def _listen(self, url: str, dispatch: Callable):
        async with aiohttp.ClientSession() as session:
            async with session.ws_connect(url) as ws:
                async for msg in ws:
                    if msg.type == aiohttp.WSMsgType.ERROR:
                        dispatch(ErrorEvent(SLACK, ws.exception()))
                        return
                    if msg.type != aiohttp.WSMsgType.TEXT:
                        continue
                    # A bad frame must not end the session
                    try:
                        envelope = json.loads(msg.data)
                        if envelope.get("envelope_id"):
                            await ws.send_json({"envelope_id": envelope["envelope_id"]})
                        self.handle_envelope(envelope, dispatch)
                    except Exception as e:
                        dispatch(ErrorEvent(SLACK, e))
                        continue
                    if envelope.get("type") == "disconnect" or not self._running:
                        return

    def stop(self):
        self._running = False
        for task in list(self._tasks):
            task.cancel()

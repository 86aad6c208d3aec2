"""Launcher for Slack <-> IRC relays."""

import asyncio
import sys
from typing import Any, Dict, List, Optional, Tuple

from relay.adapters.irc.client import IrcPortAdapter, IrcRelayClient
from relay.adapters.slack.adapter import SlackAdapter
from relay.config import RelayConfig, load_configs
from relay.domain.errors import ConfigurationError
from relay.domain.relay import RelayController

# ircOptions keys consumed by pydle.Client() rather than connect()
_CLIENT_OPTIONS = ("username", "realname", "fallback_nicknames")
_CONNECT_OPTIONS = ("port", "tls", "tls_verify", "password")


def _log(msg: str):
    print(msg, file=sys.stderr)


def split_irc_options(options: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split ircOptions into pydle client kwargs and connect() kwargs.

    Accepts the `secure` and `userName`/`realName` spellings as well.
    """
    options = dict(options)
    if "secure" in options:
        options.setdefault("tls", bool(options.pop("secure")))
    if "userName" in options:
        options.setdefault("username", options.pop("userName"))
    if "realName" in options:
        options.setdefault("realname", options.pop("realName"))

    client_kwargs = {k: options[k] for k in _CLIENT_OPTIONS if k in options}
    connect_kwargs = {k: options[k] for k in _CONNECT_OPTIONS if k in options}
    ignored = set(options) - set(_CLIENT_OPTIONS) - set(_CONNECT_OPTIONS)
    if ignored:
        _log(f"[relay] ignoring unsupported ircOptions: {', '.join(sorted(ignored))}")
    return client_kwargs, connect_kwargs


class Relay:
    """One relay: Slack adapter + IRC client + controller."""

    def __init__(self, config: RelayConfig):
        self.config = config
        self.slack = SlackAdapter(config.token, config.app_token)
        client_kwargs, self._connect_kwargs = split_irc_options(config.irc_options)
        client_kwargs.setdefault("username", config.nickname)
        client_kwargs.setdefault("realname", config.nickname)
        self.irc = IrcRelayClient(
            config.nickname, config.irc_channels, self._dispatch, **client_kwargs
        )
        self.controller = RelayController(
            config,
            slack=self.slack,
            irc=IrcPortAdapter(self.irc),
            resolver=self.slack,
        )

    def _dispatch(self, event):
        self.controller.dispatch(event)

    async def run(self):
        _log(f"[relay] Connecting {self.config.nickname} to IRC ({self.config.server}) and Slack")
        await self.irc.connect(self.config.server, **self._connect_kwargs)
        await self.slack.run(self._dispatch)

    async def stop(self):
        self.controller.stop()
        self.slack.stop()
        if self.irc.connected:
            await self.irc.disconnect(expected=True)


def build_relays(path: Optional[str] = None) -> List[Relay]:
    return [Relay(config) for config in load_configs(path)]


async def launch_all_relays(path: Optional[str] = None):
    """Launch all configured relays concurrently."""
    relays = build_relays(path)
    _log(f"Launching {len(relays)} relay(s)...")

    async def _run(relay: Relay):
        try:
            await relay.run()
        except Exception as e:
            _log(f"[{relay.config.nickname}] crashed: {e}")
        finally:
            await relay.stop()

    await asyncio.gather(*[_run(relay) for relay in relays])


def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else None
    try:
        asyncio.run(launch_all_relays(path))
    except ConfigurationError as e:
        _log(f"Configuration error: {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

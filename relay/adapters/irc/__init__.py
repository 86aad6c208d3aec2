from relay.adapters.irc.client import IrcPortAdapter, IrcRelayClient

__all__ = ["IrcPortAdapter", "IrcRelayClient"]

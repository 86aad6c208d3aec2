"""Tests for relay/launcher.py helpers."""

from relay.launcher import split_irc_options


class TestSplitIrcOptions:
    def test_split(self):
        client, connect = split_irc_options({
            "port": 6697,
            "secure": True,
            "userName": "relay",
            "realName": "Slack relay",
            "password": "serverpass",
        })
        assert client == {"username": "relay", "realname": "Slack relay"}
        assert connect == {"port": 6697, "tls": True, "password": "serverpass"}

    def test_unsupported_options_logged(self, capsys):
        client, connect = split_irc_options({"floodProtection": True, "port": 6667})
        assert client == {}
        assert connect == {"port": 6667}
        assert "floodProtection" in capsys.readouterr().err

    def test_empty(self):
        assert split_irc_options({}) == ({}, {})

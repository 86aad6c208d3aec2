"""Tests for domain/channel_mapping.py — pure Python, no network."""

import pytest

from relay.domain.channel_mapping import ChannelMapping
from relay.domain.errors import ConfigurationError


class TestBuild:
    def test_strips_channel_key(self):
        mapping = ChannelMapping.build({"#general": "#linked-general secretpass"})
        assert mapping.resolve_to_b("#general") == "#linked-general"
        assert mapping.resolve_to_a("#linked-general") == "#general"

    def test_secret_not_retained(self):
        mapping = ChannelMapping.build({"#general": "#linked-general secretpass"})
        assert "secretpass" not in repr(mapping)
        assert all("secretpass" not in v for v in mapping.forward.values())
        assert all("secretpass" not in k for k in mapping.inverse)

    def test_lowercases_irc_channel(self):
        mapping = ChannelMapping.build({"#Dev": "#IRC-Dev"})
        assert mapping.forward == {"#Dev": "#irc-dev"}
        assert mapping.inverse == {"#irc-dev": "#Dev"}

    def test_empty_mapping(self):
        with pytest.raises(ConfigurationError):
            ChannelMapping.build({})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError, match="Invalid channel mapping"):
            ChannelMapping.build(["#general", "#irc"])

    def test_empty_value(self):
        with pytest.raises(ConfigurationError):
            ChannelMapping.build({"#general": "   "})

    def test_empty_key(self):
        with pytest.raises(ConfigurationError):
            ChannelMapping.build({"": "#irc"})

    def test_duplicate_irc_target(self):
        with pytest.raises(ConfigurationError, match="mapped from both"):
            ChannelMapping.build({"#a": "#irc", "#b": "#IRC key"})


class TestLookups:
    @pytest.fixture
    def mapping(self):
        return ChannelMapping.build({
            "#general": "#linked-general secretpass",
            "privategroup": "#Private",
        })

    def test_round_trip(self, mapping):
        for slack_channel in ("#general", "privategroup"):
            assert mapping.resolve_to_a(mapping.resolve_to_b(slack_channel)) == slack_channel

    def test_slack_side_is_case_sensitive(self, mapping):
        assert mapping.resolve_to_b("#General") is None

    def test_irc_side_is_case_insensitive(self, mapping):
        assert mapping.resolve_to_a("#PRIVATE") == "privategroup"

    def test_unmapped(self, mapping):
        assert mapping.resolve_to_b("#random") is None
        assert mapping.resolve_to_a("#random") is None

    def test_irc_channels(self, mapping):
        assert mapping.irc_channels == ["#linked-general", "#private"]

    def test_read_only(self, mapping):
        with pytest.raises(TypeError):
            mapping.forward["#new"] = "#new"
        with pytest.raises(TypeError):
            mapping.inverse["#new"] = "#new"

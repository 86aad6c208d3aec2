"""Tests for domain/text_pipeline.py — pure Python, no Slack dependency."""

import pytest

from relay.domain.text_pipeline import (
    A_TO_B_RULES,
    format_action,
    format_action_line,
    format_chat_line,
    format_command_prelude,
    format_join,
    format_notice,
    format_roster,
    render_for_network_b,
)


class MockResolver:
    """Mock EntityResolver backed by dicts."""

    def __init__(self, channels=None, users=None):
        self.channels = channels or {}
        self.users = users or {}
        self.lookups = []

    def channel_name(self, channel_id):
        self.lookups.append(("channel", channel_id))
        return self.channels.get(channel_id)

    def user_name(self, user_id):
        self.lookups.append(("user", user_id))
        return self.users.get(user_id)


class RaisingResolver:
    def channel_name(self, channel_id):
        raise KeyError(channel_id)

    def user_name(self, user_id):
        raise KeyError(user_id)


EMOJIS = {"smile": "😄", "+1": "👍"}


def render(text, resolver=None, emojis=EMOJIS):
    return render_for_network_b(text, resolver or MockResolver(), emojis)


class TestRuleOrder:
    def test_rule_names_in_order(self):
        assert [rule.name for rule in A_TO_B_RULES] == [
            "newlines",
            "entities",
            "broadcasts",
            "channel_refs",
            "user_refs",
            "links",
            "commands",
            "emoji",
        ]

    def test_broadcast_wins_over_generic_command(self):
        assert render("<!channel>") == "@channel"
        assert render("<!group> <!everyone>") == "@group @everyone"

    def test_generic_command(self):
        assert render("<!here>") == "<here>"
        assert render("<!here|label>") == "<label>"

    def test_decoded_entities_become_links(self):
        assert render("&lt;http://example.com&gt;") == "http://example.com"


class TestPlainText:
    def test_identity(self):
        assert render("just some text, nothing fancy") == "just some text, nothing fancy"

    @pytest.mark.parametrize("raw", ["a\nb", "a\r\nb", "a\rb"])
    def test_newlines_become_spaces(self, raw):
        assert render(raw) == "a b"

    def test_entities(self):
        assert render("fish &amp; chips &lt;3 &gt;_&gt;") == "fish & chips <3 >_>"

    def test_entities_decoded_once(self):
        assert render("write &amp;lt; for <") == "write &lt; for <"


class TestChannelReferences:
    def test_resolved(self):
        resolver = MockResolver(channels={"C1": "dev"})
        assert render("see <#C1>", resolver) == "see #dev"

    def test_label(self):
        assert render("see <#C1|dev>") == "see #dev"

    def test_unresolved(self):
        assert render("see <#C404>") == "see <#C404>"

    def test_resolver_raising(self):
        assert render("see <#C404>", RaisingResolver()) == "see <#C404>"


class TestUserReferences:
    def test_resolved(self):
        resolver = MockResolver(users={"U1": "alice"})
        assert render("hi <@U1>", resolver) == "hi @alice"

    def test_label_verbatim(self):
        assert render("hi <@U1|alice>") == "hi alice"

    def test_unresolved(self):
        assert render("<@U999>") == "<@U999>"

    def test_unresolved_does_not_block_rest(self):
        resolver = MockResolver(users={"U1": "alice"})
        assert render("<@U999> and <@U1> :smile:", resolver) == "<@U999> and @alice 😄"

    def test_resolver_raising(self):
        assert render("<@U999> hi", RaisingResolver()) == "<@U999> hi"


class TestLinks:
    def test_bare_url(self):
        assert render("go to <https://example.com/a?b=c>") == "go to https://example.com/a?b=c"

    def test_multiple_links(self):
        assert render("<http://a.com> <http://b.com>") == "http://a.com http://b.com"


class TestEmoji:
    def test_known(self):
        assert render(":smile: :+1:") == "😄 👍"

    def test_unknown_left_verbatim(self):
        assert render(":notanemoji:") == ":notanemoji:"

    def test_default_table(self):
        assert render_for_network_b(":tada:", MockResolver()) == "🎉"


class TestScenario:
    def test_channel_and_emoji(self):
        resolver = MockResolver(channels={"C1": "dev"})
        assert render("hello <#C1|dev> :smile:", resolver) == "hello #dev 😄"


class TestFormatting:
    def test_chat_line(self):
        assert format_chat_line("alice", "hi") == "<alice> hi"

    def test_action_line(self):
        assert format_action_line("alice", "waves") == "Action: alice waves"

    def test_command_prelude(self):
        assert format_command_prelude("alice") == "Command sent from Slack by alice:"

    def test_notice(self):
        assert format_notice("back soon") == "*back soon*"

    def test_action(self):
        assert format_action("waves") == "_waves_"

    def test_join(self):
        assert format_join("bob", "#irc") == "*bob* joined _#irc_ :green_heart:"

    def test_roster(self):
        assert format_roster(["alice", "bob"]) == "connected users:\n```\nalice\nbob\n```"

    def test_empty_roster(self):
        assert format_roster([]) == "connected users:\n```\n```"

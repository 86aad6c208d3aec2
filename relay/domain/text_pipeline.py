"""Slack <-> IRC text formatting.

Pure Python, no framework dependencies. Slack text is rendered for IRC by an
ordered chain of substitution rules; IRC text only needs light wrapping
before it is posted to Slack.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional, Tuple

from relay.domain.emoji import EMOJI
from relay.ports.outbound import EntityResolver

# Replacement signature: (match, resolver, emojis) -> replacement text
Replacer = Callable[["re.Match[str]", EntityResolver, Mapping[str, str]], str]


@dataclass(frozen=True)
class SubstitutionRule:
    """One regex substitution step of the Slack -> IRC pipeline."""

    name: str
    pattern: "re.Pattern[str]"
    replace: Replacer

    def apply(self, text: str, resolver: EntityResolver, emojis: Mapping[str, str]) -> str:
        return self.pattern.sub(lambda m: self.replace(m, resolver, emojis), text)


def _lookup(lookup: Callable[[str], Optional[str]], entity_id: str) -> Optional[str]:
    try:
        return lookup(entity_id)
    except LookupError:
        return None


def _fixed(value: str) -> Replacer:
    return lambda m, resolver, emojis: value


_ENTITIES = {"&amp;": "&", "&lt;": "<", "&gt;": ">"}


def _decode_entity(m, resolver, emojis) -> str:
    return _ENTITIES[m.group(0)]


def _broadcast(m, resolver, emojis) -> str:
    return "@" + m.group(1)


def _channel_ref(m, resolver, emojis) -> str:
    channel_id, label = m.group(1), m.group(2)
    if label:
        # Slack labels channel references with the bare channel name
        return label if label.startswith("#") else f"#{label}"
    name = _lookup(resolver.channel_name, channel_id)
    return f"#{name}" if name else m.group(0)


def _user_ref(m, resolver, emojis) -> str:
    user_id, label = m.group(1), m.group(2)
    if label:
        return label
    name = _lookup(resolver.user_name, user_id)
    return f"@{name}" if name else m.group(0)


def _link(m, resolver, emojis) -> str:
    return m.group(1)


def _command(m, resolver, emojis) -> str:
    return f"<{m.group(2) or m.group(1)}>"


def _emoji(m, resolver, emojis) -> str:
    return emojis.get(m.group(1), m.group(0))


# Order matters: the specific bracket rules (broadcasts, references) must run
# before the generic link and command rules would claim the same brackets.
A_TO_B_RULES: Tuple[SubstitutionRule, ...] = (
    SubstitutionRule("newlines", re.compile(r"\r\n|\r|\n"), _fixed(" ")),
    SubstitutionRule("entities", re.compile(r"&amp;|&lt;|&gt;"), _decode_entity),
    SubstitutionRule("broadcasts", re.compile(r"<!(channel|group|everyone)>"), _broadcast),
    SubstitutionRule("channel_refs", re.compile(r"<#(C\w+)(?:\|([^>]*))?>"), _channel_ref),
    SubstitutionRule("user_refs", re.compile(r"<@([UW]\w+)(?:\|([^>]*))?>"), _user_ref),
    # Unresolved references (<@U..>, <#C..>) are left alone.
    SubstitutionRule("links", re.compile(r"<(?![!@#])(\S+?)>"), _link),
    SubstitutionRule("commands", re.compile(r"<!(\w+)(?:\|(\w+))?>"), _command),
    SubstitutionRule("emoji", re.compile(r":([\w+-]+):"), _emoji),
)


def render_for_network_b(
    raw_text: str,
    resolver: EntityResolver,
    emojis: Optional[Mapping[str, str]] = None,
    rules: Iterable[SubstitutionRule] = A_TO_B_RULES,
) -> str:
    """Render Slack markup as a single plain-text IRC line."""
    table = EMOJI if emojis is None else emojis
    text = raw_text
    for rule in rules:
        text = rule.apply(text, resolver, table)
    return text


# -- Slack -> IRC prefixes --


def format_chat_line(user: str, text: str) -> str:
    return f"<{user}> {text}"


def format_action_line(user: str, text: str) -> str:
    return f"Action: {user} {text}"


def format_command_prelude(user: str) -> str:
    return f"Command sent from Slack by {user}:"


# -- IRC -> Slack --


def format_notice(text: str) -> str:
    return f"*{text}*"


def format_action(text: str) -> str:
    return f"_{text}_"


def format_join(nick: str, channel: str) -> str:
    return f"*{nick}* joined _{channel}_ :green_heart:"


def format_roster(nicks: Iterable[str]) -> str:
    """Member list as a Slack preformatted block."""
    lines = ["connected users:", "```"]
    lines.extend(nicks)
    lines.append("```")
    return "\n".join(lines)

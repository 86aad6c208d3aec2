from relay.adapters.slack.adapter import SlackAdapter
from relay.adapters.slack.web_api import SlackApiError, SlackWebClient

__all__ = ["SlackAdapter", "SlackApiError", "SlackWebClient"]

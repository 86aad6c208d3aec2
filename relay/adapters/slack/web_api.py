"""Slack Web API client — aiohttp-based."""

import asyncio
from typing import Any, AsyncIterator, Dict, Optional

import aiohttp

SLACK_API_BASE = "https://slack.com/api"


class SlackApiError(Exception):
    """Raised when Slack answers a Web API call with ok=false"""

    def __init__(self, method: str, error: str):
        super().__init__(f"{method} failed: {error}")
        self.method = method
        self.error = error


class SlackWebClient:
    """Minimal Slack Web API client (form-encoded POST, bearer token)."""

    def __init__(self, token: str, api_base: str = SLACK_API_BASE, max_retries: int = 3):
        self._token = token
        self._api_base = api_base
        self._max_retries = max_retries

    @property
    def is_configured(self) -> bool:
        return bool(self._token)

    async def call(self, method: str, **params: Any) -> Dict[str, Any]:
        """Call a Web API method and return the decoded reply.

        Rate-limited calls (429) are retried after the Retry-After delay.
        """
        headers = {"Authorization": f"Bearer {self._token}"}
        data = {k: str(v) for k, v in params.items() if v is not None}

        for attempt in range(self._max_retries):
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    f"{self._api_base}/{method}", headers=headers, data=data
                ) as resp:
                    if resp.status == 429 and attempt < self._max_retries - 1:
                        delay = int(resp.headers.get("Retry-After", "1"))
                        await asyncio.sleep(min(delay, 30))
                        continue
                    if resp.status >= 400:
                        body = await resp.text()
                        raise SlackApiError(method, f"HTTP {resp.status}: {body}")
                    payload = await resp.json()

            if not payload.get("ok"):
                raise SlackApiError(method, payload.get("error", "unknown_error"))
            return payload

        raise SlackApiError(method, "Max retries exceeded")

    async def paginate(self, method: str, key: str, **params: Any) -> AsyncIterator[Dict[str, Any]]:
        """Yield every item under `key` across cursor-paginated replies."""
        cursor: Optional[str] = None
        while True:
            payload = await self.call(method, cursor=cursor, **params)
            for item in payload.get(key, []):
                yield item
            cursor = payload.get("response_metadata", {}).get("next_cursor")
            if not cursor:
                return

    async def open_socket(self) -> str:
        """Socket Mode websocket URL (requires an app-level token)."""
        payload = await self.call("apps.connections.open")
        return payload["url"]

"""Minimal client for the Telegram Bot API."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import requests

API_URL = "https://api.telegram.org"
UPDATES_LIMIT = 100
_NETWORK_MARGIN = 5


class TelegramError(Exception):
    """Raised when the Bot API reports a failure or answers with garbage."""


def create_keyboard(labels: Iterable[str]) -> dict[str, Any]:
    """Build a resizable reply keyboard with one row of buttons."""
    return {
        "keyboard": [[{"text": label} for label in labels]],
        "resize_keyboard": True,
    }


class TelegramApi:
    """Calls Bot API methods for one bot token."""

    def __init__(self, token: str, session: requests.Session | None = None) -> None:
        self.token = token
        self.session = session if session is not None else requests.Session()

    def _call(
        self, method: str, payload: dict[str, Any], timeout: float | None = None
    ) -> Any:
        url = f"{API_URL}/bot{self.token}/{method}"
        try:
            response = self.session.post(url, json=payload, timeout=timeout)
        except requests.RequestException as exc:
            raise TelegramError(f"{method}: {exc}") from exc
        try:
            body = response.json()
        except ValueError as exc:
            raise TelegramError(f"{method}: invalid JSON answer") from exc
        if not isinstance(body, dict) or not body.get("ok"):
            description = (
                body.get("description", "unknown error")
                if isinstance(body, dict)
                else "unexpected answer"
            )
            raise TelegramError(f"{method}: {description}")
        return body.get("result")

    def get_updates(self, offset: int | None = None, timeout: int = 10) -> list[dict]:
        """Long-poll for updates starting at the given offset."""
        payload: dict[str, Any] = {"timeout": timeout, "limit": UPDATES_LIMIT}
        if offset is not None:
            payload["offset"] = offset
        result = self._call("getUpdates", payload, timeout=timeout + _NETWORK_MARGIN)
        if not isinstance(result, list):
            raise TelegramError("getUpdates: result is not a list")
        return result

    def send_message(
        self,
        chat_id: int,
        text: str,
        reply_markup: dict[str, Any] | None = None,
    ) -> Any:
        """Send a text message, optionally with a reply keyboard."""
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_markup is not None:
            payload["reply_markup"] = reply_markup
        return self._call("sendMessage", payload)
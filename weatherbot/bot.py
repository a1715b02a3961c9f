"""Telegram weather bot: command handling and the polling loop."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import requests
from dotenv import load_dotenv

from weatherbot import answers
from weatherbot.storage import DEFAULT_PATH, FavoriteStore
from weatherbot.telegram import TelegramApi, TelegramError, create_keyboard
from weatherbot.weather import WeatherClient, WeatherError

logger = logging.getLogger(__name__)

START_KEYBOARD = ("/about", "/favorite", "/help")
_ADD_PREFIX_LENGTH = len("/add")


def _default_client() -> WeatherClient:
    return WeatherClient(os.environ.get("API", ""))


def _command_name(text: str) -> str | None:
    if not text.startswith("/"):
        return None
    word = text[1:].split(" ", 1)[0]
    return word.split("@", 1)[0]


class WeatherBot:
    """Answers users' messages with weather reports."""

    def __init__(
        self,
        api: TelegramApi,
        store: FavoriteStore,
        client_factory: Callable[[], WeatherClient] | None = None,
    ) -> None:
        self.api = api
        self.store = store
        self.client_factory = client_factory or _default_client
        self.offset: int | None = None
        self.timeout = 10
        self._commands: dict[str, Callable[[dict, str], None]] = {
            "start": self._on_start,
            "about": self._on_about,
            "help": self._on_help,
            "add": self._on_add,
            "favorite": self._on_favorite,
        }

    def handle_message(self, message: dict[str, Any]) -> None:
        """Dispatch one incoming message to its command or to the city lookup."""
        text = message.get("text")
        if text is None:
            return
        chat = message.get("chat", {})
        name = _command_name(text)
        if name is None:
            self._on_text(chat, text)
            return
        handler = self._commands.get(name)
        if handler is not None:
            handler(chat, text)

    def handle_update(self, update: dict[str, Any]) -> None:
        """Handle an update if it carries a message."""
        message = update.get("message")
        if message is not None:
            self.handle_message(message)

    def poll(self) -> int:
        """Fetch and handle one batch of updates; return how many arrived."""
        updates = self.api.get_updates(self.offset, self.timeout)
        for update in updates:
            self.offset = update["update_id"] + 1
            try:
                self.handle_update(update)
            except (WeatherError, requests.RequestException) as exc:
                logger.error("cannot handle update %s: %s", update["update_id"], exc)
        return len(updates)

    def _send(self, chat: dict, text: str, reply_markup: dict | None = None) -> None:
        if reply_markup is None:
            self.api.send_message(chat["id"], text)
        else:
            self.api.send_message(chat["id"], text, reply_markup)

    @staticmethod
    def _username(chat: dict) -> str:
        return chat.get("username") or ""

    def _on_start(self, chat: dict, text: str) -> None:
        username = self._username(chat)
        if self.store.is_empty(username):
            self.store.setup(username)
        self._send(chat, answers.help_text(), create_keyboard(START_KEYBOARD))

    def _on_about(self, chat: dict, text: str) -> None:
        self._send(chat, answers.about())

    def _on_help(self, chat: dict, text: str) -> None:
        self._send(chat, answers.help_text())

    def _on_add(self, chat: dict, text: str) -> None:
        client = self.client_factory()
        city = answers.trim(text[_ADD_PREFIX_LENGTH:])
        if city and client.geocoding(city):
            self.store.update(city, self._username(chat))
            self._send(chat, answers.favorite())
        else:
            self._send(chat, answers.not_city())

    def _on_favorite(self, chat: dict, text: str) -> None:
        city = self.store.get_city(self._username(chat))
        if not city:
            self._send(chat, answers.not_favorite())
            return
        client = self.client_factory()
        client.geocoding(city)
        self._send(chat, answers.info(client.data()))

    def _on_text(self, chat: dict, text: str) -> None:
        client = self.client_factory()
        if client.geocoding(text):
            self._send(chat, answers.info(client.data()))
        else:
            self._send(chat, answers.invalid_city())


def main(argv: list[str] | None = None) -> int:
    """Run the bot until the Bot API reports an error."""
    parser = argparse.ArgumentParser(prog="weatherbot", description="Telegram weather bot")
    parser.add_argument("--env", default=".env", help="file with TOKEN and API")
    parser.add_argument("--db", default=DEFAULT_PATH, help="SQLite database file")
    args = parser.parse_args(argv)

    load_dotenv(args.env)
    token = os.environ.get("TOKEN")
    if not token:
        print("TOKEN is not set", file=sys.stderr)
        return 1

    api = TelegramApi(token)
    with FavoriteStore(args.db) as store:
        bot = WeatherBot(api, store)
        try:
            while True:
                bot.poll()
        except TelegramError as exc:
            print(f"Ошибка в работе: {exc}", file=sys.stderr)
    return 0
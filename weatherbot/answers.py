"""Texts the bot sends back to its users."""

from __future__ import annotations

import re
from collections.abc import Iterable

_PLACEHOLDER = "{}"
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)

_INFO_TEMPLATE = (
    "Город: {} \n\nПогодные условия: {}\n\nТемпература: "
    "{}°\nОщущается как: {}°\n\nДавление: {} Па\nВлажность: "
    "{}%\n\nСкорость ветра: {} м/с\nНаправление ветра: {}°"
)


def trim(text: str) -> str:
    """Strip leading and trailing spaces (spaces only, not other whitespace)."""
    return text.strip(" ")


def unescape_string(text: str) -> str:
    """Turn each backslash-n pair into a newline.

    Any other backslash pair collapses to the lone backslash; a trailing
    backslash is kept as is.
    """
    return _ESCAPE.sub(lambda m: "\n" if m.group(1) == "n" else "\\", text)


def start() -> str:
    """Reply to /start."""
    return (
        "Привет! Я бот Telegram, который может сообщить информацию о погоде. "
        "\n\nОбщие команды:\n /about - расскажем о создателе.\n\nВ сообщении "
        "бот ожидает получить название города"
    )


def about() -> str:
    """Reply to /about."""
    return "Проект реализован в рамках учебного курса"


def help_text() -> str:
    """Reply to /help."""
    return unescape_string(
        "Привет! Я Telegram-бот, который может сообщить информацию о погоде. "
        "\n\nОбщие команды:\n /about - расскажем о создателе.\n /favorite - "
        "сообщим о погоде в любимом городе. \n /add <Название города> - "
        "добавим город в любимый \n\nВ сообщении "
        "бот ожидает получить название города"
    )


def invalid_city() -> str:
    """Reply when a message names no known city."""
    return "Проверьте, пожалуйста, название города"


def favorite() -> str:
    """Reply after a favourite city was stored."""
    return (
        "Город добавлен в любимый. \n\nВоспользуйтесь командой /favorite и вы "
        "получите полную информацию о вашем любимом городе"
    )


def not_city() -> str:
    """Reply when /add names no known city."""
    return "Проверьте, пожалуйста, написание города"


def not_favorite() -> str:
    """Reply to /favorite when the user has no favourite city."""
    return unescape_string(
        "У вас нет любимого города. \n\nЧтобы добавить город в любимый "
        "воспользуйтесь командой /add <Название города>"
    )


def info(data: Iterable[str]) -> str:
    """Fill the weather report with the given values, in order.

    Missing values leave their placeholders in place; more values than
    placeholders raise ValueError.
    """
    text = _INFO_TEMPLATE
    for item in data:
        if _PLACEHOLDER not in text:
            raise ValueError("more values than placeholders in the report")
        text = text.replace(_PLACEHOLDER, item, 1)
    return text
# weatherbot

A Telegram bot that tells you the current weather in any city. Its replies are
in Russian. It gets the weather from OpenWeatherMap and keeps each user's
favourite city in a small SQLite database.

## Installation

```
pip install .
```

## Configuration

The bot reads its settings from a `.env` file (by default `.env` in the working
directory) and from the environment:

```
TOKEN=token
API=placeholder
```

- `TOKEN` is the Telegram bot token. Without it the bot prints
  `TOKEN is not set` and exits with status 1.
- `API` is the OpenWeatherMap API key.

Favourite cities are stored in an SQLite file, `dbfile.db` in the working
directory by default. The file and its table are created on first run.

## Running

```
weatherbot
weatherbot --env path/to/.env --db path/to/favorites.db
```

- `--env` names the file with `TOKEN` and `API` (default `.env`).
- `--db` names the SQLite database file (default `dbfile.db`).

The bot long-polls Telegram for updates. If handling one update fails because
the weather service gave a bad answer or could not be reached, the error is
logged and the bot goes on. If the Telegram API reports an error, the bot prints
`Ошибка в работе: ...` to standard error and exits.

## Talking to the bot

- `/start` registers you and shows a keyboard with `/about`, `/favorite` and `/help`.
- `/help` lists the commands.
- `/about` says the project was made as part of a study course.
- `/add <city>` checks that the city exists and saves it as your favourite.
- `/favorite` shows the weather in your favourite city, or tells you how to
  add one if you have none.
- Any other text that does not start with `/` is read as a city name. The bot
  replies with the city, the weather description, temperature, feels-like
  temperature, pressure, humidity, and wind speed and direction. Unknown
  commands are ignored.

## Using the pieces

```python
from weatherbot.weather import WeatherClient
from weatherbot import answers

client = WeatherClient("placeholder")
if client.geocoding("Moscow"):
    print(answers.info(client.data()))
```

- `weatherbot.answers` holds the reply texts (`start`, `about`, `help_text`,
  `invalid_city`, `favorite`, `not_city`, `not_favorite`, `info`) and the
  helpers `trim` and `unescape_string`.
- `weatherbot.weather.WeatherClient` resolves a city with `geocoding()` and
  returns the report values with `data()`; it raises `WeatherError` on
  malformed answers.
- `weatherbot.storage.FavoriteStore` is the favourites database, with
  `is_empty`, `setup`, `update`, `get_city` and `close`. It can be used as a
  context manager.
- `weatherbot.telegram.TelegramApi` is a minimal Bot API client with
  `get_updates` and `send_message`; it raises `TelegramError` on failures.
  `create_keyboard` builds a one-row reply keyboard.
- `weatherbot.bot.WeatherBot` routes incoming updates to the handlers;
  `poll()` fetches and handles one batch of updates. `weatherbot.bot.main` is
  the `weatherbot` command.

## Tests

```
pip install .[test]
pytest
```
"""SQLite store of each user's favourite city."""

from __future__ import annotations

import logging
import sqlite3
from os import PathLike

logger = logging.getLogger(__name__)

DEFAULT_PATH = "dbfile.db"

_SCHEMA = (
    "create table if not exists favorite ("
    "   _id integer primary key autoincrement not null,"
    "   username text unique not null,"
    "   city text"
    ");"
)


class FavoriteStore:
    """Favourite cities keyed by Telegram username."""

    def __init__(self, path: str | PathLike[str] = DEFAULT_PATH) -> None:
        self._db = sqlite3.connect(path)
        with self._db:
            self._db.execute(_SCHEMA)

    def is_empty(self, username: str) -> bool:
        """Return True when the user has no row yet."""
        (count,) = self._db.execute(
            "select count(*) from favorite where username = ?;", (username,)
        ).fetchone()
        return count == 0

    def setup(self, username: str) -> None:
        """Add the user with an empty favourite city."""
        try:
            with self._db:
                self._db.execute(
                    "insert into favorite (username, city) values (?, ?);",
                    (username, ""),
                )
        except sqlite3.Error as exc:
            logger.error("cannot add user %r: %s", username, exc)

    def update(self, city: str, username: str) -> None:
        """Set the user's favourite city."""
        try:
            with self._db:
                self._db.execute(
                    "update favorite set city = ? where username = ?;",
                    (city, username),
                )
        except sqlite3.Error as exc:
            logger.error("cannot update user %r: %s", username, exc)

    def get_city(self, username: str) -> str:
        """Return the user's favourite city, or an empty string."""
        row = self._db.execute(
            "select city from favorite where username = ?;", (username,)
        ).fetchone()
        if row is None or row[0] is None:
            return ""
        return row[0]

    def close(self) -> None:
        self._db.close()

    def __enter__(self) -> FavoriteStore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
"""Data Access Object (DAO) implementation for managing shortened URLs in SQLite

This module provides the embedded, default implementation of ShortURLBaseDAO.
The database lives in a single file inside a configurable directory and maps
key bytes to URL bytes in one flat table.

Responsibilities:
    - Insert and retrieve short URLs from the embedded database;
    - Guarantee inserts are on persistent media before returning;
    - Translate SQLite failures into DataStoreError.

Classes:
    ShortURLSQLiteDAO:
        DAO for storing and retrieving ShortURLModel in an embedded SQLite database.

Example:
    >>> from bref.models import Key, ShortURLModel
    >>> from bref.dao.sqlite import ShortURLSQLiteDAO

    >>> dao = ShortURLSQLiteDAO(path='/tmp/bref')
    >>> dao.insert(ShortURLModel(key=Key('1dFhvQ'), target='https://example.com/page'))
    <ShortURLSQLiteDAO /tmp/bref/bref.sqlite3>

    >>> dao.get(Key('1dFhvQ')).target
    'https://example.com/page'
    >>> dao.get(Key('missing')) is None
    True
"""

import logging

from beartype import beartype

from bref.models import Key, ShortURLModel
from bref.dao.base import ShortURLBaseDAO
from bref.dao.sqlite.mixins import SQLiteClientMixin
from bref.dao.sqlite.helpers import handle_sqlite_error


logger = logging.getLogger(__name__)

INSERT_SQL = 'INSERT INTO links (key, url) VALUES (?, ?) ON CONFLICT (key) DO UPDATE SET url = excluded.url'
SELECT_SQL = 'SELECT url FROM links WHERE key = ?'


class ShortURLSQLiteDAO(SQLiteClientMixin, ShortURLBaseDAO):
    """SQLite-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see SQLiteClientMixin):
        path (Path):
            Directory holding the database.
        db_file (Path):
            The database file.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLSQLiteDAO:
            Upsert a short URL mapping in its own transaction (last write wins).
            Raises DataStoreError on SQLite failures.

        get(key: Key, **kwargs) -> ShortURLModel | None:
            Retrieve a short URL mapping by key.
            Returns None when the key doesn't exist.
            Raises DataStoreError on SQLite failures.
    """

    @handle_sqlite_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLSQLiteDAO':
        """Insert a short URL mapping into the database

        The upsert runs in its own transaction and is committed (and synced,
        see `PRAGMA synchronous=FULL`) before returning.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLSQLiteDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If SQLite fails to write the mapping.
        """
        with self.connection as connection:
            connection.execute(INSERT_SQL, (bytes(short_url.key), short_url.target.encode('utf-8')))

        logger.debug('Stored short URL in SQLite.', extra={'key': str(short_url.key)})
        return self

    @handle_sqlite_error
    @beartype
    def get(self, key: Key, **kwargs) -> ShortURLModel | None:
        """Retrieve a stored short URL mapping by key

        Args:
            key (Key):
                The key identifying the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel | None:
                The retrieved ShortURLModel instance, or None if not found.

        Raises:
            DataStoreError:
                If SQLite fails to read the mapping.
        """
        row = self.connection.execute(SELECT_SQL, (bytes(key),)).fetchone()
        if row is None:
            return None

        (target,) = row
        return ShortURLModel(key=key, target=bytes(target).decode('utf-8', errors='replace'))

    def __repr__(self) -> str:
        return f'<ShortURLSQLiteDAO {self.db_file}>'

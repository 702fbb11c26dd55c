"""SQLite mixin providing shared connection management and connectivity checks.

Responsibilities:
    - Open (and create, if missing) the embedded database directory
    - Hand out one connection per thread
    - Close connections of threads that have finished
    - Create the schema
    - Healthcheck the database

Classes:
    - SQLiteClientMixin: Base mixin to inject SQLite connection setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLSQLiteDAO(SQLiteClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLSQLiteDAO(path='/var/lib/bref')
        >>> dao._healthcheck()
        True
        >>> dao.close()
"""

import logging
import sqlite3
import threading
from os import PathLike
from pathlib import Path

from bref.dao.exceptions import DataStoreError
from bref.utils.constants import DB_FILENAME, SQLITE_BUSY_TIMEOUT_SECONDS


logger = logging.getLogger(__name__)

SCHEMA_EXISTS_SQL = "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'links'"
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS links (
    key BLOB PRIMARY KEY,
    url BLOB NOT NULL
) WITHOUT ROWID;
"""


class SQLiteClientMixin:
    """Mixin SQLite connection setup and health check for SQLite-backed DAOs.

    sqlite3 connections must not be used by two threads at once, so every
    thread gets its own connection to the same database file. Concurrency
    control between them is left to SQLite itself (WAL journal, busy
    timeout); no application-level lock guards reads or writes.

    Connections are tracked per owning thread. Whenever a thread opens a new
    connection, the connections of threads that have since finished are
    closed, so a long-lived DAO holds at most one connection per live thread
    (plus those of threads that finished after the last connect).

    Attributes:
        path (Path):
            Directory holding the database.

        db_file (Path):
            The database file inside `path`.

        timeout (float):
            Seconds a connection waits on a locked database before failing.

    Methods:
        connection -> sqlite3.Connection:
            The calling thread's connection (opened on first use).

        close() -> None:
            Close every connection opened by this instance.

        _healthcheck() -> bool:
            Run a trivial query to verify the database is usable.
    """

    def __init__(self, path: str | PathLike, timeout: float = SQLITE_BUSY_TIMEOUT_SECONDS):
        """Initialize a SQLite-based DAO

        Args:
            path (str | PathLike):
                Directory of the embedded database. Created if missing.

            timeout (float):
                Seconds to wait on a locked database. Defaults to 30.

        Raises:
            DataStoreError:
                If the directory can't be created or the database can't be opened.
        """
        self.path = Path(path)
        self.db_file = self.path / DB_FILENAME
        self.timeout = timeout

        self._local = threading.local()
        self._connections: dict[threading.Thread, sqlite3.Connection] = {}
        self._connections_lock = threading.Lock()

        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DataStoreError(f"Can't create database directory {self.path}.") from e

        self._healthcheck()

    @property
    def connection(self) -> sqlite3.Connection:
        connection = getattr(self._local, 'connection', None)
        if connection is None:
            connection = self._connect()
            self._local.connection = connection
        return connection

    def _connect(self) -> sqlite3.Connection:
        # NOTE: check_same_thread=False only so close() and reaping can run from
        #       any thread; each connection is still used by a single thread.
        connection = sqlite3.connect(self.db_file, timeout=self.timeout, check_same_thread=False)
        try:
            connection.execute('PRAGMA journal_mode=WAL')
            # Writes are on disk before COMMIT returns
            connection.execute('PRAGMA synchronous=FULL')
            if connection.execute(SCHEMA_EXISTS_SQL).fetchone() is None:
                with connection:
                    connection.executescript(SCHEMA_SQL)
        except sqlite3.Error:
            connection.close()
            raise

        with self._connections_lock:
            finished = [thread for thread in self._connections if not thread.is_alive()]
            reaped = [self._connections.pop(thread) for thread in finished]
            self._connections[threading.current_thread()] = connection

        for stale in reaped:
            stale.close()

        logger.debug(
            'Opened SQLite connection.',
            extra={'dbFile': str(self.db_file), 'thread': threading.get_ident(), 'reaped': len(reaped)},
        )
        return connection

    def close(self) -> None:
        with self._connections_lock:
            connections, self._connections = list(self._connections.values()), {}
        for connection in connections:
            connection.close()
        self._local = threading.local()

    def _healthcheck(self) -> bool:
        """Run `SELECT 1` to healthcheck the database

        Raises:
            DataStoreError:
                If the database can't be opened or queried.
        """
        try:
            self.connection.execute('SELECT 1').fetchone()
        except sqlite3.Error as e:
            raise DataStoreError(f"Can't open SQLite database at {self.db_file}. Check the provided database path.") from e
        return True

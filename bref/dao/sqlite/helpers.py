import sqlite3
import functools
from typing import Any, TypeVar
from collections.abc import Callable

from bref.dao.exceptions import DataStoreError


F = TypeVar('F', bound=Callable[..., Any])


__all__ = []


def handle_sqlite_error(method: F) -> F:
    """Wrap SQLite-interacting DAO methods to translate storage failures

    Args:
        method (Callable[..., Any]):
            DAO method performing SQLite operations which may raise sqlite3.Error
            (disk full, corruption, locked database, permission denial, ...).

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError instead.

    Example:
        >>> @handle_sqlite_error
        ... def get_url(self, key):
        ...     return self.connection.execute('SELECT url FROM links WHERE key = ?', (key,)).fetchone()
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except sqlite3.Error as e:
            raise DataStoreError(f'SQLite operation failed on {self.db_file}: {e}') from e

    return wrapper

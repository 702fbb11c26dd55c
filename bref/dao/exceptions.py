"""Exceptions related to Data Access Objects (DAO) operations.

A missing short URL is *not* an error: DAOs return None for unknown keys.
Only genuine storage failures are raised.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., I/O failure,
        corruption, permission denial, connection issues).

Example:
    >>> from bref.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't write to /var/lib/bref/bref.sqlite3.")
    Traceback (most recent call last):
        ...
    bref.dao.exceptions.DataStoreError: Can't write to /var/lib/bref/bref.sqlite3.
"""

from bref.exceptions import BrefError


class DAOError(BrefError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include disk full, database corruption, permission denial and
    connectivity issues.
    """

    error_code = 'dao:data_store_error'

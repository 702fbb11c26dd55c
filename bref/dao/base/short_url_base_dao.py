"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage engine (e.g., SQLite, Redis).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Standardize error handling across multiple data store implementations.
    - Be safe to share between concurrent callers without external locking.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from bref.models import Key, ShortURLModel
        >>> from bref.dao.sqlite import ShortURLSQLiteDAO

        >>> dao = ShortURLSQLiteDAO(path='/var/lib/bref')

        >>> short_url = ShortURLModel(
        ...     key=Key('1dFhvQ'),
        ...     target="https://example.com/blog/article-123",
        ... )
        >>> dao.insert(short_url)

        >>> retrieved = dao.get(Key('1dFhvQ'))
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> print(dao.get(Key('unknown')))
        None
"""

from abc import ABC, abstractmethod

from bref.models import Key, ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Write a ShortURLModel into the data store, overwriting any
            existing mapping for the same key (last write wins).
            Raises DataStoreError on storage failure.

        get(key: Key, **kwargs) -> ShortURLModel | None:
            Retrieve a ShortURLModel from the data store by key.
            Returns None if not found.
            Raises DataStoreError on storage failure.

        close() -> None:
            Release connections held by the DAO.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLSQLiteDAO or
        ShortURLRedisDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Mappings never expire and are never deleted. The DAO does not
          provide an interface to delete or enumerate entries.
        - Each operation is atomic on its own key. There are no
          transactions spanning multiple keys.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert (or overwrite) a ShortURLModel in the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, key: Key, **kwargs) -> ShortURLModel | None:
        """Retrieve a ShortURLModel from the data store by its key.

        Args:
            key (Key):
                The key of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel | None: The ShortURLModel instance if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    def close(self) -> None:
        """Release the data store resources held by this DAO.

        The DAO must not be used afterwards. Engines without resources to
        release keep this no-op.
        """
        pass

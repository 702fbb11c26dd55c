"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO, for
deployments that prefer a networked key-value engine over the embedded one.

Responsibilities:
    - Insert and retrieve short URLs from Redis;
    - Translate Redis failures into DataStoreError.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from bref.models import Key, ShortURLModel
    >>> from bref.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="bref:dev")

    >>> short_url = ShortURLModel(key=Key('1dFhvQ'), target="https://example.com/page")
    >>> dao.insert(short_url)
    <ShortURLRedisDAO>

    >>> dao.get(Key('1dFhvQ')).target
    'https://example.com/page'

NOTE (durability):
    This DAO runs in a relaxed durability mode. A successful insert means
    Redis accepted the write; whether it survives a server crash depends on
    the server's persistence settings (AOF with `appendfsync always` gives
    the same guarantee as the SQLite DAO).
"""

import logging

from beartype import beartype

from bref.models import Key, ShortURLModel
from bref.dao.base import ShortURLBaseDAO
from bref.dao.redis.mixins import RedisClientMixin
from bref.dao.redis.helpers import handle_redis_error


logger = logging.getLogger(__name__)


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLRedisDAO:
            Store a short URL mapping (SET, last write wins).
            Raises DataStoreError on Redis failures.

        get(key: Key, **kwargs) -> ShortURLModel | None:
            Retrieve a short URL mapping by key (GET).
            Returns None when the key doesn't exist.
            Raises DataStoreError on Redis failures.
    """

    @handle_redis_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL mapping into Redis

        A single SET is atomic, so concurrent readers observe either the
        previous value or the new one. Existing mappings are overwritten.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If a Redis error occurs.
        """
        self.redis.set(self.keys.link_url_key(str(short_url.key)), short_url.target)
        logger.debug('Stored short URL in Redis.', extra={'key': str(short_url.key)})
        return self

    @handle_redis_error
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
                If a Redis error occurs.
        """
        target = self.redis.get(self.keys.link_url_key(str(key)))
        if target is None:
            return None

        # Clients created without decode_responses return raw bytes
        if isinstance(target, bytes):
            target = target.decode('utf-8', errors='replace')

        return ShortURLModel(key=key, target=target)

    def __repr__(self) -> str:
        return '<ShortURLRedisDAO>'

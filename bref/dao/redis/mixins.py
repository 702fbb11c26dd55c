"""Redis client ownership for Redis-backed DAOs.

Classes:
    - RedisClientMixin: opens (or adopts) a Redis client, namespaces its keys
      and verifies the server answers before the DAO is handed out.

Example:
        >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLRedisDAO(redis_host='redis', prefix='bref:prod')
        >>> dao.keys.link_url_key('1dFhvQ')
        'bref:prod:links:1dFhvQ:url'
        >>> dao.close()
"""

import redis

from bref.dao.redis.redis_key_schema import RedisKeySchema
from bref.dao.redis.helpers import handle_redis_error


class RedisClientMixin:
    """Mixin Redis client setup for Redis-backed DAOs.

    A client passed in by the caller is borrowed: `close()` leaves it open.
    A client built from connection parameters is owned and closed by `close()`.
    Either way the client's connection pool is thread-safe, so one DAO can be
    shared by concurrent callers.

    Attributes:
        redis (redis.Redis):
            Client used by subclasses.

        keys (RedisKeySchema):
            Namespaced key names.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """Initialize a Redis-based DAO

        Args:
            redis_host, redis_port, redis_db, redis_username, redis_password:
                Connection parameters, ignored when `redis_client` is given.

            redis_decode_responses (bool):
                Decode replies to str. Defaults to True.

            redis_client (redis.Redis | None):
                Client to borrow instead of opening a new one.

            prefix (str | None):
                Namespace prefix for all keys, e.g. 'bref:prod'.

        Raises:
            DataStoreError:
                If the server doesn't answer PING.
        """
        self._owns_client = redis_client is None
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        try:
            self._healthcheck()
        except Exception:
            self.close()
            raise

    def close(self) -> None:
        if self._owns_client:
            self.redis.close()

    @handle_redis_error
    def _healthcheck(self) -> bool:
        return bool(self.redis.ping())

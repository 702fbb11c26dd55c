import functools
import redis
from typing import Any, TypeVar
from collections.abc import Callable

from bref.dao.exceptions import DataStoreError


F = TypeVar('F', bound=Callable[..., Any])


__all__ = []


def redis_location(client: redis.Redis) -> str:
    """Describe a Redis client's server as 'host:port/db'"""
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_error(method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis failures

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on connectivity issues or
            any other error reported by Redis.

    Example:
        >>> @handle_redis_error
        ... def get_url(self, key):
        ...     return self.redis.get(key)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis command failed: {e}') from e

    return wrapper

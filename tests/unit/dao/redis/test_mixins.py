"""Unit tests for Redis-based mixins.

Test coverage includes:
    1. Initialization and configuration
       - Ensures correct initialization with or without a Redis client.
       - Confirms unreachable Redis raises DataStoreError.
    2. Healthcheck behavior
       - Healthcheck pings Redis.
       - Missed pong from Redis raises DataStoreError.
    3. Client ownership
       - close() only closes clients the mixin created.
"""

from unittest.mock import patch

import pytest
import redis

from bref.dao.exceptions import DataStoreError
from bref.dao.redis.mixins import RedisClientMixin
from bref.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Initialization and configuration
# -------------------------------


def test_initialize_without_redis_client():
    """Ensure DAO creates a Redis client when none is provided."""
    redis_config = {
        'redis_host': 'redis',
        'redis_port': 6379,
        'redis_db': 0,
        'redis_decode_responses': True,
        'redis_username': 'default',
        'redis_password': 'password',
    }

    with patch('bref.dao.redis.mixins.redis.Redis', autospec=True) as redis_mock:
        redis_mock_instance = redis_mock.return_value
        mixin = RedisClientMixin(**redis_config, prefix='testapp:test')

        redis_mock.assert_called_once_with(host='redis', port=6379, db=0, decode_responses=True, username='default', password='password')
        assert mixin.redis is redis_mock_instance
        redis_mock_instance.ping.assert_called_once_with()


def test_initialize_with_redis_client(redis_client):
    """Ensure DAO correctly uses a pre-initialized Redis client."""
    mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')

    assert mixin.redis is redis_client
    assert isinstance(mixin.keys, RedisKeySchema)
    assert mixin.keys.prefix == 'testapp:test'


def test_initialize_with_unreachable_redis(redis_client):
    redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection refused')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at 203.0.113.1:18000/5."):
        RedisClientMixin(redis_client=redis_client)


# -------------------------------
# 2. Healthcheck behavior
# -------------------------------


def test_healthcheck(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client)

    assert mixin._healthcheck() is True
    assert redis_client.ping.call_count == 2


def test_healthcheck_with_unreachable_redis(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client)
    redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection refused')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at 203.0.113.1:18000/5.") as exc_info:
        mixin._healthcheck()

    assert isinstance(exc_info.value.__cause__, redis.exceptions.ConnectionError)


# -------------------------------
# 3. Client ownership
# -------------------------------


def test_close_keeps_borrowed_client_open(redis_client):
    mixin = RedisClientMixin(redis_client=redis_client)
    mixin.close()

    redis_client.close.assert_not_called()


def test_close_closes_owned_client():
    with patch('bref.dao.redis.mixins.redis.Redis', autospec=True) as redis_mock:
        mixin = RedisClientMixin(redis_host='redis')
        mixin.close()

        redis_mock.return_value.close.assert_called_once_with()


def test_failed_healthcheck_closes_owned_client():
    with patch('bref.dao.redis.mixins.redis.Redis', autospec=True) as redis_mock:
        redis_mock.return_value.ping.side_effect = redis.exceptions.ConnectionError('Connection refused')
        redis_mock.return_value.connection_pool.connection_kwargs = {'host': 'redis', 'port': 6379, 'db': 0}

        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis:6379/0."):
            RedisClientMixin(redis_host='redis')

        redis_mock.return_value.close.assert_called_once_with()

from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis client."""
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': '203.0.113.1', 'port': 18000, 'db': 5},
    )
    client.ping.return_value = True
    client.get.return_value = None
    return client

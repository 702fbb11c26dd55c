"""Unit tests for handle_redis_error decorator.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Error handling
       - Ensures Redis connection errors are converted into DataStoreError.
       - Ensures other Redis errors are converted into DataStoreError.
       - Ensures non-Redis errors propagate unchanged.
    3. Function metadata preservation
"""

from unittest.mock import MagicMock

import pytest
import redis

from bref.dao.redis.helpers import handle_redis_error
from bref.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        }

    @handle_redis_error
    def call(self):
        if self.error is not None:
            raise self.error
        return 'OK'


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    assert DummyDAO().call() == 'OK'


# -------------------------------
# 2. Error handling
# -------------------------------


def test_decorator_transforms_redis_connection_error():
    dao = DummyDAO(redis.exceptions.ConnectionError('Cannot connect'))

    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0.") as exc_info:
        dao.call()

    assert isinstance(exc_info.value.__cause__, redis.exceptions.ConnectionError)


def test_decorator_transforms_other_redis_errors():
    dao = DummyDAO(redis.exceptions.ResponseError('MISCONF Redis is configured to save RDB snapshots'))

    with pytest.raises(DataStoreError, match='Redis command failed: MISCONF'):
        dao.call()


def test_decorator_does_not_catch_unrelated_errors():
    dao = DummyDAO(KeyError('unrelated'))

    with pytest.raises(KeyError):
        dao.call()


# -------------------------------
# 3. Function metadata preservation
# -------------------------------


def test_decorator_preserves_function_metadata():
    @handle_redis_error
    def sample_function():
        """This is a sample docstring."""
        return 'OK'

    assert sample_function.__name__ == 'sample_function'
    assert 'sample docstring' in sample_function.__doc__

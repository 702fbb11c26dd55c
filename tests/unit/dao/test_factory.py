"""Unit tests for create_short_url_dao()."""

from unittest.mock import patch

import pytest

from bref.exceptions import BadConfigurationError
from bref.dao import create_short_url_dao
from bref.dao.sqlite import ShortURLSQLiteDAO
from bref.utils.constants import APP_ENV_ENV, APP_NAME_ENV


def test_create_sqlite_dao(tmp_path):
    dao = create_short_url_dao({'active_backend': 'sqlite', 'sqlite': {'path': tmp_path}})

    assert isinstance(dao, ShortURLSQLiteDAO)
    assert dao.path == tmp_path
    dao.close()


def test_create_redis_dao(monkeypatch):
    monkeypatch.setenv(APP_NAME_ENV, 'bref')
    monkeypatch.setenv(APP_ENV_ENV, 'test')
    config = {
        'active_backend': 'redis',
        'redis': {'host': 'redis.test', 'port': 6379, 'db': 0, 'username': None, 'password': None},
    }

    with patch('bref.dao.redis.ShortURLRedisDAO') as dao_mock:
        dao = create_short_url_dao(config)

    assert dao is dao_mock.return_value
    dao_mock.assert_called_once_with(
        redis_host='redis.test',
        redis_port=6379,
        redis_db=0,
        redis_username=None,
        redis_password=None,
        prefix='bref:test',
    )


@pytest.mark.parametrize(
    'config',
    [
        {},
        {'active_backend': 'sqlite'},
        {'active_backend': 'dynamodb', 'dynamodb': {}},
    ],
)
def test_create_dao_with_bad_configuration(config):
    with pytest.raises(BadConfigurationError):
        create_short_url_dao(config)

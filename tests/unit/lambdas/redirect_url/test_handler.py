import json
from typing import cast
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from bref.types import LambdaEvent, LambdaContext, AppConfig
from bref.lambdas.redirect_url import app
from bref.models import Key, ShortURLModel
from bref.dao.base import ShortURLBaseDAO
from bref.dao.exceptions import DataStoreError


def _event(path_parameters: dict | None) -> LambdaEvent:
    return cast(LambdaEvent, {
        'resource': '/{key}',
        'pathParameters': path_parameters,
        'httpMethod': 'GET',
        'path': '/1dFhvQ',
        'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
    })


@pytest.fixture
def successful_event_302() -> LambdaEvent:
    return _event({'key': '1dFhvQ'})


class TestRedirectUrlHandler:

    @pytest.fixture
    def context(self) -> LambdaContext:
        return cast(LambdaContext, {'function_name': 'redirect_url'})

    @pytest.fixture
    def config(self) -> AppConfig:
        return cast(AppConfig, {'active_backend': 'redis', 'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}})

    @pytest.fixture
    def short_url_dao(self) -> ShortURLBaseDAO:
        dao = MagicMock(spec=ShortURLBaseDAO)
        dao.get.return_value = ShortURLModel(
            key=Key('1dFhvQ'),
            target='https://example.com/blog/chuck-norris-is-awesome',
        )
        return dao

    @pytest.fixture(autouse=True)
    def setup(
        self,
        monkeypatch: MonkeyPatch,
        context: LambdaContext,
        config: AppConfig,
        short_url_dao: ShortURLBaseDAO,
    ) -> None:
        # Patch handler dependencies
        monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
        monkeypatch.setattr(app, 'create_short_url_dao', lambda *a, **kw: short_url_dao)

        self.context = context
        self.short_url_dao = short_url_dao

    def test_lambda_handler(self, successful_event_302: LambdaEvent) -> None:
        response = app.lambda_handler(successful_event_302, self.context)
        headers = response['headers']
        body = json.loads(response['body'])

        assert response['statusCode'] == 302
        assert body == {}
        assert headers['Location'] == 'https://example.com/blog/chuck-norris-is-awesome'
        self.short_url_dao.get.assert_called_once_with(Key('1dFhvQ'))
        self.short_url_dao.close.assert_called_once_with()

    @pytest.mark.parametrize('path_parameters', [None, {}, {'shortcode': '1dFhvQ'}])
    def test_lambda_handler_with_missing_key(self, path_parameters: dict | None) -> None:
        response = app.lambda_handler(_event(path_parameters), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == "Bad Request (missing 'key' in path)"
        assert body['errorCode'] == 'MISSING_KEY'
        self.short_url_dao.get.assert_not_called()

    @pytest.mark.parametrize('raw_key', ['', 'abc-123', 'favicon.ico'])
    def test_lambda_handler_with_invalid_key(self, raw_key: str) -> None:
        response = app.lambda_handler(_event({'key': raw_key}), self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 400
        assert body['message'] == f"Bad Request (invalid key '{raw_key}')"
        assert body['errorCode'] == 'INVALID_KEY'
        self.short_url_dao.get.assert_not_called()

    def test_lambda_handler_with_unknown_key(self, successful_event_302: LambdaEvent) -> None:
        self.short_url_dao.get.return_value = None

        response = app.lambda_handler(successful_event_302, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 404
        assert body['message'] == "Not Found (short url https://testhost:1000/1dFhvQ doesn't exist)"
        assert body['errorCode'] == 'SHORT_URL_NOT_FOUND'

    def test_lambda_handler_with_data_store_error(self, successful_event_302: LambdaEvent) -> None:
        self.short_url_dao.get.side_effect = DataStoreError("Can't connect to Redis at redis.test:6379/0.")

        response = app.lambda_handler(successful_event_302, self.context)
        body = json.loads(response['body'])

        assert response['statusCode'] == 500
        assert body == {'message': 'Internal Server Error'}
        assert 'redis.test' not in response['body']
        self.short_url_dao.close.assert_called_once_with()

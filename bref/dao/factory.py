"""Build the short URL DAO selected by the application configuration

Functions:
    create_short_url_dao(app_config) -> ShortURLBaseDAO
        Instantiate the DAO of the configuration's active backend.

Example:
    >>> from bref.utils import load_config
    >>> dao = create_short_url_dao(load_config())
    >>> dao
    <ShortURLSQLiteDAO /home/user/.local/share/bref/bref.sqlite3>
"""

import logging

from bref.types import AppConfig
from bref.exceptions import BadConfigurationError
from bref.dao.base import ShortURLBaseDAO
from bref.utils.config import app_prefix


logger = logging.getLogger(__name__)


def create_short_url_dao(app_config: AppConfig) -> ShortURLBaseDAO:
    """Instantiate the DAO for the active storage backend

    Args:
        app_config (dict):
            Configuration as returned by `load_config()`.

    Returns:
        ShortURLBaseDAO: a ready-to-use DAO.

    Raises:
        BadConfigurationError:
            If the active backend is unknown or its settings are missing.
        DataStoreError:
            If the data store can't be reached or opened.
    """
    backend = app_config.get('active_backend')
    settings = app_config.get(backend)
    if settings is None:
        raise BadConfigurationError(f"Missing settings for backend '{backend}'.")

    logger.debug('Creating short URL DAO.', extra={'backend': backend})

    if backend == 'sqlite':
        from bref.dao.sqlite import ShortURLSQLiteDAO

        return ShortURLSQLiteDAO(**settings)

    if backend == 'redis':
        from bref.dao.redis import ShortURLRedisDAO

        redis_config = {f'redis_{k}': v for k, v in settings.items()}
        return ShortURLRedisDAO(**redis_config, prefix=app_prefix())

    raise BadConfigurationError(f"Unsupported backend '{backend}'.")

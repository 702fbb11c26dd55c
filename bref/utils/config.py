"""Utility functions for application configuration management.

Configuration is read from environment variables. The active storage
backend is selected by `BREF_BACKEND` and each backend reads its own
settings:

    {
        "active_backend": "sqlite",
        "sqlite": {"path": "/home/user/.local/share/bref"}
    }

    {
        "active_backend": "redis",
        "redis": {"host": "localhost", "port": 6379, "db": 0, ...}
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key prefix for networked DAOs, or None if `APP_NAME`
        is not set.

    data_dir() -> Path
        Return the default directory of the embedded database.

    load_config() -> dict
        Load the active backend configuration as a Python dictionary.

Example:
    Typical usage inside a handler:

        >>> from bref.utils.config import load_config
        >>> config = load_config()
        >>> config['active_backend']
        'sqlite'
"""

import os
import logging
from pathlib import Path

from bref.exceptions import BadConfigurationError
from bref.types import AppConfig
from bref.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    BACKEND_ENV,
    DEFAULT_BACKEND,
    SUPPORTED_BACKENDS,
    DB_PATH_ENV,
    XDG_DATA_HOME_ENV,
    REDIS_HOST_ENV,
    REDIS_PORT_ENV,
    REDIS_DB_ENV,
    REDIS_USERNAME_ENV,
    REDIS_PASSWORD_ENV,
)


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(APP_NAME_ENV)


def app_prefix() -> str | None:
    """Return key prefix for networked DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'bref'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'bref:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def data_dir() -> Path:
    """Return the default directory of the embedded database

    Follows the XDG base directory convention: `$XDG_DATA_HOME/bref`,
    falling back to `~/.local/share/bref`.
    """
    xdg_data_home = os.environ.get(XDG_DATA_HOME_ENV)
    base = Path(xdg_data_home) if xdg_data_home else Path.home() / '.local' / 'share'
    return base / 'bref'


def _int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {value!r}).") from e


def _sqlite_config() -> dict:
    db_path = os.environ.get(DB_PATH_ENV)
    return {'path': Path(db_path) if db_path else data_dir()}


def _redis_config() -> dict:
    return {
        'host': os.environ.get(REDIS_HOST_ENV, 'localhost'),
        'port': _int_env(REDIS_PORT_ENV, 6379),
        'db': _int_env(REDIS_DB_ENV, 0),
        'username': os.environ.get(REDIS_USERNAME_ENV) or None,
        'password': os.environ.get(REDIS_PASSWORD_ENV) or None,
    }


def load_config() -> AppConfig:
    """Load the active storage backend configuration

    Returns:
        dict: {'active_backend': <name>, <name>: <backend settings>}

    Raises:
        BadConfigurationError:
            If `BREF_BACKEND` names an unsupported backend or a numeric
            setting is malformed.

    Example:
        >>> os.environ['BREF_BACKEND'] = 'redis'
        >>> load_config()['redis']['port']
        6379
    """
    backend = os.environ.get(BACKEND_ENV, DEFAULT_BACKEND).lower()
    if backend not in SUPPORTED_BACKENDS:
        supported = ', '.join(sorted(SUPPORTED_BACKENDS))
        raise BadConfigurationError(f"Unsupported backend '{backend}' (supported backends: {supported}).")

    settings = _sqlite_config() if backend == 'sqlite' else _redis_config()
    logger.debug('Loaded configuration from environment.', extra={'backend': backend, 'appEnv': app_env()})
    return {'active_backend': backend, backend: settings}
